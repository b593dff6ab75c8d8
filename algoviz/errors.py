# errors.py
from enum import Enum


class ErrorKind(str, Enum):
    """
    Recoverable failures. These never propagate as exceptions out of a tracker:
    the tracker returns the untouched structure and names the kind in the result.
    """
    INVALID_INDEX = "InvalidIndex"
    EMPTY_STRUCTURE = "EmptyStructure"
    VALUE_NOT_FOUND = "ValueNotFound"
    DUPLICATE_VALUE = "DuplicateValue"
    UNKNOWN_OPERATION = "UnknownOperation"
    DANGLING_REFERENCE = "DanglingReference"


class InvariantError(AssertionError):
    """Raised when a structure handed to (or produced by) a tracker is malformed."""
