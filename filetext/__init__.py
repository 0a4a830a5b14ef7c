"""
filetext - plain text and metadata extraction from documents.
"""
__version__ = "1.0.0"
