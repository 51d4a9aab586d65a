"""
Derivation Path Constants

CIP-1852 key paths used by the wallet. Every role derives exactly one key,
so the address index is always 0.
"""

HARDENED_OFFSET = 0x80000000

PURPOSE = 1852
COIN_TYPE = 1815
ACCOUNT_INDEX = 0

# Role (chain) values, CIP-1852 and CIP-105
PAYMENT_ROLE = 0
STAKE_ROLE = 2
DREP_ROLE = 3

ADDRESS_INDEX = 0


def harden(index: int) -> int:
    """Return the hardened form of a derivation index"""
    if index < 0 or index >= HARDENED_OFFSET:
        raise ValueError(f"Derivation index out of range: {index}")
    return index + HARDENED_OFFSET


def _role_prefix(role: int) -> tuple[int, ...]:
    return (harden(PURPOSE), harden(COIN_TYPE), harden(ACCOUNT_INDEX), role)


DEFAULT_PAYMENT_KEY_DERIVATION_PATH = _role_prefix(PAYMENT_ROLE)
DEFAULT_STAKE_KEY_DERIVATION_PATH = _role_prefix(STAKE_ROLE)
DEFAULT_DREP_KEY_DERIVATION_PATH = _role_prefix(DREP_ROLE)

DEFAULT_ERA = "conway"
