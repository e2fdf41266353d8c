"""
Exceptions raised by the recall engine.
"""


class RecallError(Exception):
    """Base class for all recall engine errors."""
    pass


class InvalidItemError(RecallError):
    """Raised when a quiz item violates its data contract.

    An item must carry at least one accepted answer, and its keyword
    weights must line up one-to-one with its keywords.
    """
    pass
