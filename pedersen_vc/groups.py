"""
Group Initialization and Sampling
=================================

This module binds the commitment scheme to the prime-order group supplied by
charm-crypto. Only the source group G1 and the scalar field ZR are used; the
pairing itself is never evaluated.

According to charm-crypto documentation (https://jhuisi.github.io/charm/tutorial.html):
- PairingGroup('MNT224') provides asymmetric Type-3 pairings with 224-bit base field
- Alternative curves: 'BN254', 'SS512'
- G1 is a cyclic group of prime order group.order()
- Group law is written multiplicatively: a * b, a ** x, a ** -1
"""

import logging
from typing import Callable, Optional

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1

from .config import config, check_seed_bytes, GENERATOR_DOMAIN
from .errors import EntropyError

logger = logging.getLogger(__name__)

# An entropy source returns exactly nbytes fresh random bytes
EntropySource = Callable[[int], bytes]

FALLBACK_CURVES = ('BN254', 'SS512')


def setup(group_name: str = None) -> dict:
    """
    Initialize the pairing group whose G1 hosts commitments.

    Parameters
    ----------
    group_name : str, optional
        The pairing curve identifier. Defaults to ``config.pairing_curve``
        ('MNT224'). If the curve is unavailable, 'BN254' and then 'SS512'
        are tried.

    Returns
    -------
    dict
        A dictionary containing:
        - 'group': The PairingGroup object
        - 'group_name': The name of the curve used
        - 'G1': The G1 group type constant
        - 'ZR': The ZR (scalar field) type constant

    Examples
    --------
    >>> params = setup('MNT224')
    >>> group = params['group']
    >>> H = group.random(G1)
    """
    if group_name is None:
        group_name = config.pairing_curve

    group = None
    last_error = None
    for name in (group_name,) + tuple(c for c in FALLBACK_CURVES if c != group_name):
        if last_error is not None:
            logger.warning("Curve not available (%s), falling back to %s", last_error, name)
        try:
            group = PairingGroup(name)
            group_name = name
            break
        except Exception as e:
            last_error = e
    if group is None:
        raise RuntimeError(f"No pairing curve could be initialized: {last_error}") from last_error

    logger.info("Initialized pairing group %s", group_name)
    return {
        'group': group,
        'group_name': group_name,
        'G1': G1,
        'ZR': ZR,
    }


def _draw(entropy: EntropySource, nbytes: int) -> bytes:
    """Read nbytes from the entropy source, failing loudly on any shortfall."""
    check_seed_bytes(nbytes)
    try:
        data = entropy(nbytes)
    except Exception as e:
        raise EntropyError(f"Entropy source failed: {e}") from e
    if not isinstance(data, (bytes, bytearray)):
        raise EntropyError(f"Entropy source returned {type(data).__name__}, expected bytes")
    if len(data) != nbytes:
        raise EntropyError(f"Entropy source returned {len(data)} bytes, expected {nbytes}")
    return bytes(data)


def random_point(group: PairingGroup, entropy: Optional[EntropySource] = None) -> G1:
    """
    Sample a uniformly random element of G1.

    Parameters
    ----------
    group : PairingGroup
        The initialized pairing group
    entropy : EntropySource, optional
        Explicit randomness source. If None, charm-crypto's internal RNG
        is used via group.random(G1).

    Returns
    -------
    G1
        A random group element

    Notes
    -----
    With an explicit source the bytes are hashed onto the curve rather than
    used as an exponent of a fixed base, so nobody (including the caller)
    learns a discrete-log relation between two sampled points. A seeded
    source therefore gives reproducible generators that are still
    independent.
    """
    if entropy is None:
        try:
            return group.random(G1)
        except Exception as e:
            raise EntropyError(f"Group RNG failed: {e}") from e
    seed = _draw(entropy, config.seed_bytes)
    return group.hash(GENERATOR_DOMAIN + seed, G1)


def random_scalar(group: PairingGroup, entropy: Optional[EntropySource] = None) -> ZR:
    """
    Sample a uniformly random scalar in Z_p.

    With an explicit source, twice the configured seed length is drawn and
    reduced modulo the group order to keep the bias negligible.
    """
    if entropy is None:
        try:
            return group.random(ZR)
        except Exception as e:
            raise EntropyError(f"Group RNG failed: {e}") from e
    p = int(group.order())
    seed = _draw(entropy, 2 * config.seed_bytes)
    return group.init(ZR, int.from_bytes(seed, 'big') % p)


def scalar_from_int(group: PairingGroup, k: int) -> ZR:
    """Map a small integer to the scalar k mod p."""
    return group.init(ZR, k)


def identity(group: PairingGroup) -> G1:
    """Return the identity element 1_G of G1."""
    return group.init(G1, 1)
