"""
Error Types
===========

Precondition violations raised by commitment and proof generation.

Verification never raises: a proof that does not open the commitment is an
ordinary ``False`` result, not an error.
"""


class CommitmentError(Exception):
    """Base class for all errors raised by this package."""


class VectorLengthMismatch(CommitmentError, ValueError):
    """
    A vector does not have the length the operation requires.

    Raised by ``CommitmentScheme.commit`` when the value vector length differs
    from the scheme dimension, and by ``BatchOpeningProof`` when ``indices``
    and ``values`` are not paired one-to-one.
    """

    def __init__(self, expected: int, actual: int, what: str = "Vector"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} length {actual} != n={expected}")


class IndexOutOfBounds(CommitmentError, IndexError):
    """An opening index lies outside ``[0, bound)``."""

    def __init__(self, index: int, bound: int):
        self.index = index
        self.bound = bound
        super().__init__(f"Index {index} out of bounds for vector of length {bound}")


class EntropyError(CommitmentError, RuntimeError):
    """The randomness source failed; setup cannot proceed without entropy."""
