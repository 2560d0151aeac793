"""
Verification Equations
======================

Verification predicates for single and batch openings.

Each check has the form

    C / contribution = H^{r}

implemented as ``g1_div(C, contribution) == H ** r``. Equality is exact group
equality. Verification never raises: malformed proofs (out-of-range indices,
unpaired values) are rejected with ``False``.
"""

import logging

from charm.toolbox.pairinggroup import ZR, G1

from .utils import g1_div, multiexp_g1

logger = logging.getLogger(__name__)

# Combining weight for every opened index in a batch. Fixed rather than
# derived from a transcript challenge.
BATCH_WEIGHT = 1


def _in_range(index, n: int) -> bool:
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < n


def verify_single_open(C: G1, proof, scheme) -> bool:
    """
    Verify a single-coordinate opening.

    Formula:
    --------
    C / G_i^{x_i} = H^{r}

    Parameters
    ----------
    C : G1
        The commitment
    proof : SingleOpeningProof
        The opening (i, x_i, r)
    scheme : CommitmentScheme
        The scheme C was computed with

    Returns
    -------
    bool
        True if the equation holds, False otherwise

    Notes
    -----
    The check only accounts for coordinate i. It holds for the honest opening
    when every other coordinate of the committed vector is zero (in
    particular for n = 1); otherwise the unopened contributions remain on the
    left-hand side and the check fails.
    """
    if not _in_range(proof.index, scheme.n):
        logger.debug("Single opening rejected: index %r outside [0, %d)", proof.index, scheme.n)
        return False

    G_i = scheme.generators[proof.index]
    expected = g1_div(C, G_i ** proof.value)

    ok = expected == scheme.blinding_generator ** proof.blinding
    if not ok:
        logger.debug("Single opening rejected at index %d", proof.index)
    return ok


def verify_batch_open(C: G1, proof, scheme) -> bool:
    """
    Verify a multi-coordinate opening.

    Formula:
    --------
    C / ∏_{j} G_{S_j}^{β_j x_j} = H^{r},   β_j = BATCH_WEIGHT = 1

    Parameters
    ----------
    C : G1
        The commitment
    proof : BatchOpeningProof
        The opening (S, x_S, r)
    scheme : CommitmentScheme
        The scheme C was computed with

    Returns
    -------
    bool
        True if the equation holds, False otherwise

    Notes
    -----
    - Empty S: the aggregate is 1_G and the check becomes C = H^r
    - A repeated index contributes once per occurrence
    - Opening the full range 0..n-1 with the true values reduces the check to
      the commitment identity itself
    """
    group = scheme.group
    n = scheme.n

    if len(proof.indices) != len(proof.values):
        logger.debug("Batch opening rejected: %d indices, %d values",
                     len(proof.indices), len(proof.values))
        return False

    for idx in proof.indices:
        if not _in_range(idx, n):
            logger.debug("Batch opening rejected: index %r outside [0, %d)", idx, n)
            return False

    beta = group.init(ZR, BATCH_WEIGHT)
    bases = [scheme.generators[idx] for idx in proof.indices]
    exponents = [beta * x for x in proof.values]
    aggregated = multiexp_g1(bases, exponents, group)

    ok = g1_div(C, aggregated) == scheme.blinding_generator ** proof.blinding
    if not ok:
        logger.debug("Batch opening rejected for %d indices", len(proof.indices))
    return ok
