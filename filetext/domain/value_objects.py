"""
Value Objects - Immutable objects that represent domain concepts.
These have no identity and are compared by value.
"""
from typing import NewType

# Value objects for type safety and domain clarity
MimeType = NewType("MimeType", str)
