"""
Utility Functions
=================

Group helpers shared by commitment and verification.

According to charm-crypto documentation:
- Group operations use * for multiplication, ** for exponentiation
- Inverse is computed as elem ** -1

In the additive notation used by the protocol description, ``a + b`` is
``a * b`` here and ``x·G`` is ``G ** x``.
"""

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1
from typing import List


def multiexp_g1(bases: List[G1], exponents: List[ZR], group: PairingGroup) -> G1:
    """
    Compute multi-exponentiation in G1: ∏ bases[i]^{exponents[i]}.

    Parameters
    ----------
    bases : List[G1]
        List of base elements in G1
    exponents : List[ZR]
        List of exponents in Z_p
    group : PairingGroup
        The pairing group

    Returns
    -------
    G1
        The product ∏ bases[i]^{exponents[i]}

    Notes
    -----
    - If bases is empty, returns the identity element 1_G
    - bases and exponents must have the same length
    - No windowing or Pippenger; each term is exponentiated directly
    """
    if len(bases) != len(exponents):
        raise ValueError(f"bases and exponents must have same length: {len(bases)} != {len(exponents)}")

    result = group.init(G1, 1)
    for base, exp in zip(bases, exponents):
        result *= base ** exp

    return result


def g1_div(numerator: G1, denominator: G1) -> G1:
    """
    Compute numerator / denominator in G1 as numerator * denominator^{-1}.

    This is the "commitment - contribution" step of every opening check.
    """
    return numerator * (denominator ** -1)
