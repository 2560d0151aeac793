"""
Commitment Scheme
=================

Pedersen vector commitments over the prime-order group G1.

Formula (Vector commitment):
----------------------------
C := H^{r} · ∏_{i=0}^{n-1} G_i^{x_i} ∈ G1

written additively as C = r·H + Σ x_i·G_i, where H is the blinding generator,
G_i the i-th vector generator, r the blinding scalar and x_i the committed
values. Binding holds as long as no discrete-log relation among
(G_0, ..., G_{n-1}, H) is known, which is why every generator is sampled
independently at setup.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1

from .errors import VectorLengthMismatch, EntropyError
from .groups import EntropySource, random_point, identity
from .groups import setup as setup_group
from .utils import multiexp_g1

logger = logging.getLogger(__name__)


class CommitmentScheme:
    """
    Public parameters of a Pedersen vector commitment of dimension n.

    Instances are immutable: the generators are stored as a tuple and exposed
    through read-only properties, so one scheme can be shared freely between
    committers and verifiers.
    """

    __slots__ = ('_group', '_generators', '_blinding_generator')

    def __init__(self, group: PairingGroup, generators: Sequence[G1], blinding_generator: G1):
        """
        Wrap already-sampled generators. Use CommitmentScheme.setup() to
        sample fresh ones.
        """
        if len(generators) < 1:
            raise ValueError("A commitment scheme needs at least one generator")
        self._group = group
        self._generators = tuple(generators)
        self._blinding_generator = blinding_generator

    @classmethod
    def setup(cls, n: int, group: Optional[PairingGroup] = None,
              entropy: Optional[EntropySource] = None) -> 'CommitmentScheme':
        """
        Sample n vector generators and one blinding generator.

        Parameters
        ----------
        n : int
            The vector dimension, n >= 1
        group : PairingGroup, optional
            The pairing group. If None, groups.setup() picks the configured curve.
        entropy : EntropySource, optional
            Randomness source (callable nbytes -> bytes). If None, charm-crypto's
            secure RNG is used. Pass a seeded source for reproducible tests.

        Returns
        -------
        CommitmentScheme

        Raises
        ------
        ValueError
            If n is not a positive integer
        EntropyError
            If the randomness source fails or yields degenerate generators

        Examples
        --------
        >>> scheme = CommitmentScheme.setup(16)
        >>> scheme.n
        16
        """
        if not isinstance(n, int) or isinstance(n, bool) or n < 1:
            raise ValueError(f"Bad value for dimension n={n!r}, must be a positive integer")
        if group is None:
            group = setup_group()['group']

        # Vector generators first, blinding generator last
        generators = [random_point(group, entropy) for _ in range(n)]
        blinding_generator = random_point(group, entropy)

        scheme = cls(group, generators, blinding_generator)
        if not scheme.validate():
            raise EntropyError("Sampled generators are degenerate (identity or repeated)")

        logger.info("Sampled commitment scheme with n=%d generators", n)
        return scheme

    @property
    def group(self) -> PairingGroup:
        return self._group

    @property
    def generators(self) -> Tuple[G1, ...]:
        return self._generators

    @property
    def blinding_generator(self) -> G1:
        return self._blinding_generator

    @property
    def n(self) -> int:
        return len(self._generators)

    def commit(self, values: List[ZR], blinding: ZR) -> G1:
        """
        Commit to a value vector with blinding scalar r.

        Formula:
        --------
        C = H^{r} · ∏_{i=0}^{n-1} G_i^{values[i]}

        Parameters
        ----------
        values : List[ZR]
            The value vector (x_0, ..., x_{n-1})
        blinding : ZR
            The blinding scalar r

        Returns
        -------
        G1
            The commitment C. The caller keeps it; the scheme does not.

        Raises
        ------
        VectorLengthMismatch
            If len(values) != n
        """
        if len(values) != self.n:
            raise VectorLengthMismatch(self.n, len(values))

        # C = H^r
        C = self._blinding_generator ** blinding

        # C *= ∏ G_i^{x_i}
        C *= multiexp_g1(list(self._generators), list(values), self._group)

        return C

    def validate(self) -> bool:
        """
        Check that the scheme is well-formed.

        Checks:
        - at least one vector generator
        - no generator is the identity
        - all n + 1 generators are pairwise distinct
        """
        if self.n < 1:
            return False

        one = identity(self._group)
        everything = list(self._generators) + [self._blinding_generator]
        for elem in everything:
            if elem == one:
                return False

        for i in range(len(everything)):
            for j in range(i + 1, len(everything)):
                if everything[i] == everything[j]:
                    return False

        return True

    def __repr__(self):
        return f"CommitmentScheme(n={self.n})"
