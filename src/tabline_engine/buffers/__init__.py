"""Buffer selection for the tab line."""

from .filter import BufferValidityFilter, get_valid_buffers, is_positive_handle, is_valid

__all__ = [
    "BufferValidityFilter",
    "get_valid_buffers",
    "is_positive_handle",
    "is_valid",
]
