"""Exceptions raised when an edit has no sensible result."""

from typing import Any, Optional


class EditorError(Exception):
    """Base class for semedit errors."""


class IndexOutOfRange(EditorError, IndexError):
    """An index editor was applied to a sequence that has no such position."""

    def __init__(self, index: int, length: Optional[int] = None):
        self.index = index
        self.length = length
        if length is None:
            msg = f"index {index} is out of range"
        else:
            msg = f"index {index} is out of range for length {length}"
        super().__init__(msg)


class InvalidStride(EditorError, ValueError):
    """`on_every` was given a stride that is not a positive integer."""

    def __init__(self, stride: Any):
        self.stride = stride
        super().__init__(f"stride must be a positive integer, got {stride!r}")


class FieldNotFound(EditorError, LookupError):
    """A field editor was applied to a record without that field."""

    def __init__(self, field: str, record_type: type):
        self.field = field
        self.record_type = record_type
        super().__init__(f"{record_type.__name__} has no field {field!r}")
