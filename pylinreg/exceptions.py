"""
Exceptions raised when a sample cannot be analysed.
"""


class DegenerateInputError(ValueError):
    """
    Slope, intercept or their significance tests are undefined.

    Raised for samples with fewer than three observations, samples whose
    x values are all identical, and fits with a zero standard error.
    """


class ShapeMismatchError(ValueError):
    """x and y have different lengths."""


__all__ = ["DegenerateInputError", "ShapeMismatchError"]
