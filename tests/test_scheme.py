"""
Test Suite for Commitment Scheme Setup and Commit
=================================================

Covers generator sampling (random and seeded), the commitment formula and
the typed errors raised on precondition violations.
"""

import random

import pytest
from charm.toolbox.pairinggroup import ZR, G1

from pedersen_vc import setup, CommitmentScheme
from pedersen_vc.config import Config, config, MIN_SEED_BYTES
from pedersen_vc.errors import VectorLengthMismatch, EntropyError, CommitmentError
from pedersen_vc.groups import random_point, random_scalar, scalar_from_int, identity


def seeded_entropy(seed):
    """Deterministic stand-in for os.urandom."""
    return random.Random(seed).randbytes


# Fixtures for common setup
@pytest.fixture(scope="module")
def pairing_params():
    """Initialize pairing group."""
    return setup('MNT224')


@pytest.fixture(scope="module")
def group(pairing_params):
    return pairing_params['group']


@pytest.fixture(scope="module")
def scheme(group):
    """Scheme for vector dimension n=8."""
    return CommitmentScheme.setup(8, group)


# ============================================================================
# Setup
# ============================================================================

def test_setup_dimension(scheme):
    assert scheme.n == 8
    assert len(scheme.generators) == 8
    assert scheme.validate()


def test_setup_default_group():
    """Without an explicit group the configured curve is used."""
    s = CommitmentScheme.setup(2)
    assert s.n == 2
    assert s.validate()


@pytest.mark.parametrize("n", [0, -1, 2.0, True])
def test_setup_rejects_bad_dimension(group, n):
    with pytest.raises(ValueError):
        CommitmentScheme.setup(n, group)


def test_generators_are_immutable(scheme):
    assert isinstance(scheme.generators, tuple)
    with pytest.raises(AttributeError):
        scheme.generators = ()
    with pytest.raises(AttributeError):
        scheme.blinding_generator = scheme.generators[0]


def test_seeded_setup_is_reproducible(group):
    """The same seeded entropy source yields the same generators."""
    a = CommitmentScheme.setup(4, group, entropy=seeded_entropy(7))
    b = CommitmentScheme.setup(4, group, entropy=seeded_entropy(7))
    c = CommitmentScheme.setup(4, group, entropy=seeded_entropy(8))

    assert a.generators == b.generators
    assert a.blinding_generator == b.blinding_generator
    assert a.generators != c.generators
    assert a.validate()


def test_setup_draws_configured_seed_length(group, monkeypatch):
    monkeypatch.setattr(config, 'seed_bytes', 16)
    requested = []
    source = seeded_entropy(1)

    def recording(nbytes):
        requested.append(nbytes)
        return source(nbytes)

    CommitmentScheme.setup(3, group, entropy=recording)
    # n vector generators plus the blinding generator
    assert requested == [16] * 4


def test_setup_entropy_failure(group):
    def broken(nbytes):
        raise OSError("no entropy")

    with pytest.raises(EntropyError):
        CommitmentScheme.setup(3, group, entropy=broken)


def test_setup_entropy_short_read(group):
    with pytest.raises(EntropyError):
        CommitmentScheme.setup(3, group, entropy=lambda nbytes: b"\x00")


def test_validate_detects_degenerate_scheme(group):
    g = random_point(group)
    assert not CommitmentScheme(group, [g, g], random_point(group)).validate()
    assert not CommitmentScheme(group, [identity(group)], g).validate()
    assert not CommitmentScheme(group, [g], g).validate()


def test_empty_generators_rejected(group):
    with pytest.raises(ValueError):
        CommitmentScheme(group, [], random_point(group))


# ============================================================================
# Commit
# ============================================================================

def test_commit_formula(group, scheme):
    """C = H^r · ∏ G_i^{x_i}."""
    values = [group.random(ZR) for _ in range(scheme.n)]
    r = group.random(ZR)

    C = scheme.commit(values, r)

    expected = scheme.blinding_generator ** r
    for G_i, x_i in zip(scheme.generators, values):
        expected *= G_i ** x_i
    assert C == expected


def test_commit_is_deterministic(group, scheme):
    values = [scalar_from_int(group, i + 1) for i in range(scheme.n)]
    r = random_scalar(group)
    assert scheme.commit(values, r) == scheme.commit(values, r)


def test_commit_zero_vector_is_blinding_only(group, scheme):
    values = [group.init(ZR, 0) for _ in range(scheme.n)]
    r = group.random(ZR)
    assert scheme.commit(values, r) == scheme.blinding_generator ** r


def test_commit_binds_values(group, scheme):
    values = [scalar_from_int(group, i) for i in range(scheme.n)]
    r = group.random(ZR)
    other = list(values)
    other[3] = other[3] + group.init(ZR, 1)
    assert scheme.commit(values, r) != scheme.commit(other, r)


def test_commit_blinding_changes_commitment(group, scheme):
    values = [scalar_from_int(group, i) for i in range(scheme.n)]
    assert scheme.commit(values, group.random(ZR)) != scheme.commit(values, group.random(ZR))


@pytest.mark.parametrize("length", [0, 7, 9])
def test_commit_length_mismatch(group, scheme, length):
    values = [group.random(ZR) for _ in range(length)]
    with pytest.raises(VectorLengthMismatch) as excinfo:
        scheme.commit(values, group.random(ZR))

    err = excinfo.value
    assert err.expected == 8
    assert err.actual == length
    assert isinstance(err, CommitmentError)
    assert isinstance(err, ValueError)


def test_seeded_scalars_are_reproducible(group):
    a = random_scalar(group, seeded_entropy(3))
    b = random_scalar(group, seeded_entropy(3))
    assert a == b
    assert random_scalar(group, seeded_entropy(4)) != a


# ============================================================================
# Seed length and degenerate generators
# ============================================================================

@pytest.mark.parametrize("seed_bytes", [0, 1, 15])
def test_setup_rejects_short_seed_length(group, monkeypatch, seed_bytes):
    """Short seeds would collapse generators onto few points; refuse them."""
    monkeypatch.setattr(config, 'seed_bytes', seed_bytes)
    with pytest.raises(ValueError):
        CommitmentScheme.setup(3, group, entropy=seeded_entropy(1))


@pytest.mark.parametrize("seed_bytes", [0, 8, '32', True])
def test_config_rejects_short_seed_length(seed_bytes):
    c = Config()
    with pytest.raises(ValueError):
        c.update_from_dict({'seed_bytes': seed_bytes})
    assert c.seed_bytes >= MIN_SEED_BYTES


def test_setup_rejects_repeated_generators(group):
    """A source that repeats itself yields identical generators."""
    with pytest.raises(EntropyError):
        CommitmentScheme.setup(3, group, entropy=lambda nbytes: b"\x00" * nbytes)


def test_setup_minimum_seed_length_is_accepted(group, monkeypatch):
    monkeypatch.setattr(config, 'seed_bytes', MIN_SEED_BYTES)
    s = CommitmentScheme.setup(4, group, entropy=seeded_entropy(5))
    assert s.validate()
