"""
Pedersen Vector Commitments
===========================

Pedersen vector commitments over a prime-order group with single and batch
opening proofs, built on charm-crypto.

A committer holding values (x_0, ..., x_{n-1}) and a blinding scalar r
publishes C = H^r · ∏ G_i^{x_i}. Opening a coordinate discloses the value and
the full r; the verifier divides the opened contribution out of C and
compares with H^r.

Modules:
--------
- groups: Group initialization and sampling of points/scalars
- scheme: CommitmentScheme (setup, commit)
- proofs: SingleOpeningProof, BatchOpeningProof (generation)
- verify: Verification predicates
- errors: Typed precondition errors
- config: Environment-driven defaults
- logger: Logging setup with secret redaction
- utils: Multi-exponentiation and division in G1

Usage:
------
    from pedersen_vc import setup, CommitmentScheme, BatchOpeningProof
    from pedersen_vc.groups import random_scalar, scalar_from_int

    group = setup('MNT224')['group']
    scheme = CommitmentScheme.setup(4, group)
    values = [scalar_from_int(group, v) for v in (1, 2, 3, 4)]
    r = random_scalar(group)
    C = scheme.commit(values, r)
    proof = BatchOpeningProof.generate(scheme, values, r, [0, 1, 2, 3])
    assert proof.verify(C, scheme)
"""

__version__ = "0.1.0"

from .groups import setup
from .scheme import CommitmentScheme
from .proofs import SingleOpeningProof, BatchOpeningProof
from .errors import CommitmentError, VectorLengthMismatch, IndexOutOfBounds, EntropyError

__all__ = [
    'setup',
    'CommitmentScheme',
    'SingleOpeningProof',
    'BatchOpeningProof',
    'CommitmentError',
    'VectorLengthMismatch',
    'IndexOutOfBounds',
    'EntropyError',
]
