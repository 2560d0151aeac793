"""
Pedersen VC configuration
Defaults are read from the environment at import time
"""

import os

# Curve used by groups.setup() when no name is given
DEFAULT_PAIRING_CURVE = os.getenv('PEDERSEN_PAIRING_CURVE', 'MNT224')

# Bytes drawn from an explicit entropy source for every sampled element
DEFAULT_SEED_BYTES = int(os.getenv('PEDERSEN_SEED_BYTES', 32))

# Shorter seeds make generator collisions likely
MIN_SEED_BYTES = 16

DEFAULT_LOG_LEVEL = os.getenv('PEDERSEN_LOG_LEVEL', 'WARNING')

# Domain tag mixed into hash-to-curve sampling of generators
GENERATOR_DOMAIN = b"PEDERSEN-VC-GEN"


def check_seed_bytes(seed_bytes) -> int:
    """Reject seed lengths below MIN_SEED_BYTES."""
    if not isinstance(seed_bytes, int) or isinstance(seed_bytes, bool) or seed_bytes < MIN_SEED_BYTES:
        raise ValueError(f"seed_bytes={seed_bytes!r} must be an integer >= {MIN_SEED_BYTES}")
    return seed_bytes


class Config:
    """Configuration object"""

    def __init__(self):
        self.pairing_curve = DEFAULT_PAIRING_CURVE
        self.seed_bytes = DEFAULT_SEED_BYTES
        self.log_level = DEFAULT_LOG_LEVEL
        check_seed_bytes(self.seed_bytes)

    def update_from_dict(self, d: dict):
        for key, value in d.items():
            if not hasattr(self, key):
                raise KeyError(f"Unknown config key: {key}")
            if key == 'seed_bytes':
                check_seed_bytes(value)
            setattr(self, key, value)

    def __repr__(self):
        return (f"Config(pairing_curve={self.pairing_curve!r}, "
                f"seed_bytes={self.seed_bytes}, log_level={self.log_level!r})")


# Global config instance
config = Config()
