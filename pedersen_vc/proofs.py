"""
Proof Generation
================

Opening proofs for Pedersen vector commitments.

Proofs:
-------
- SingleOpeningProof: opens coordinate i by disclosing (i, x_i, r)
- BatchOpeningProof: opens a list of coordinates by disclosing (S, x_S, r)

Both proofs disclose the full blinding scalar r. They are openings, not
zero-knowledge arguments. Generation performs no verification; a proof built
from values that do not match the commitment simply fails verification later.
"""

import logging
from typing import List, NamedTuple, Sequence, Tuple

from charm.toolbox.pairinggroup import ZR, G1

from .errors import IndexOutOfBounds, VectorLengthMismatch
from .logger import secure_log
from . import verify as _verify

logger = logging.getLogger(__name__)


def _check_index(index: int, bound: int):
    # Negative indices are rejected rather than wrapped
    if not isinstance(index, int) or isinstance(index, bool) or index < 0 or index >= bound:
        raise IndexOutOfBounds(index, bound)


class SingleOpeningProof(NamedTuple):
    """
    Opening of one coordinate: (index, value, blinding).
    """
    index: int
    value: ZR
    blinding: ZR

    @classmethod
    def generate(cls, scheme, values: List[ZR], blinding: ZR, index: int) -> 'SingleOpeningProof':
        """
        Generate the opening of position ``index``.

        Parameters
        ----------
        scheme : CommitmentScheme
            The scheme the commitment was computed with
        values : List[ZR]
            The committed value vector
        blinding : ZR
            The blinding scalar r used in the commitment
        index : int
            The position to open (0-indexed)

        Returns
        -------
        SingleOpeningProof

        Raises
        ------
        IndexOutOfBounds
            If index is not in [0, len(values))

        Examples
        --------
        >>> C = scheme.commit(values, r)
        >>> proof = SingleOpeningProof.generate(scheme, values, r, 0)
        >>> proof.verify(C, scheme)
        True
        """
        _check_index(index, len(values))
        secure_log("debug", "Generated single opening", log=logger, index=index, blinding=blinding)
        return cls(index, values[index], blinding)

    def verify(self, commitment: G1, scheme) -> bool:
        return _verify.verify_single_open(commitment, self, scheme)


class _BatchOpeningFields(NamedTuple):
    indices: Tuple[int, ...]
    values: Tuple[ZR, ...]
    blinding: ZR


class BatchOpeningProof(_BatchOpeningFields):
    """
    Opening of several coordinates: (indices, values, blinding).

    ``indices`` keeps the caller's order and any duplicates; ``values[j]`` is
    the value claimed at ``indices[j]``.
    """
    __slots__ = ()

    def __new__(cls, indices: Sequence[int], values: Sequence[ZR], blinding: ZR):
        indices = tuple(indices)
        values = tuple(values)
        if len(indices) != len(values):
            raise VectorLengthMismatch(len(indices), len(values), what="Opened values")
        return super().__new__(cls, indices, values, blinding)

    @classmethod
    def generate(cls, scheme, values: List[ZR], blinding: ZR, indices: Sequence[int]) -> 'BatchOpeningProof':
        """
        Generate the opening of every position in ``indices``.

        Parameters
        ----------
        scheme : CommitmentScheme
            The scheme the commitment was computed with
        values : List[ZR]
            The committed value vector
        blinding : ZR
            The blinding scalar r used in the commitment (disclosed in full)
        indices : Sequence[int]
            Positions to open (0-indexed); order is preserved, duplicates kept

        Returns
        -------
        BatchOpeningProof

        Raises
        ------
        IndexOutOfBounds
            If any index is not in [0, len(values))
        """
        indices = tuple(indices)
        bound = len(values)
        for i in indices:
            _check_index(i, bound)
        secure_log("debug", "Generated batch opening", log=logger,
                   indices=indices, blinding=blinding)
        return cls(indices, [values[i] for i in indices], blinding)

    def verify(self, commitment: G1, scheme) -> bool:
        return _verify.verify_batch_open(commitment, self, scheme)
