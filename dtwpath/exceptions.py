"""
Exceptions raised by dtwpath.
"""


class InvalidInputError(ValueError):
    """
    Raised when an input cannot be aligned.

    Covers sequences that are empty, too short, not 1-D, non-numeric or
    contain non-finite values, unknown distance or tie-break names, and
    empty matrices passed to backtracking.
    """
