"""
Utility helpers shared across layers.
"""
from .deadline import Deadline
from .validators import validate_filename, validate_file_type_hint

__all__ = [
    "Deadline",
    "validate_filename",
    "validate_file_type_hint",
]
