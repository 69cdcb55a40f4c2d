"""
Quantum Random Number Generator (QRNG)

Each bit stands in for measuring a qubit in |+⟩: 0 or 1 with
probability ½. The source underneath is a uniform pseudo-random
generator, so none of this is suitable for real cryptography.

Usage:
    from quantum_demos.apps import QuantumRandom, generate_password

    qrng = QuantumRandom(seed=42)

    bits = qrng.generate_bits(16)        # [0, 1, 1, ...]
    n = qrng.generate_number(1, 6)       # Dice roll in [1, 6]
    pw = qrng.generate_password(12)      # 12 chars from PASSWORD_ALPHABET

    # Module functions draw from a fresh generator per call
    print(generate_password())
"""
import logging
import string
import numpy as np
from typing import List, Optional, Sequence

from ..core.rng import make_rng

logger = logging.getLogger(__name__)

DEFAULT_BIT_COUNT = 8
DEFAULT_NUMBER_RANGE = (0, 100)
DEFAULT_PASSWORD_LENGTH = 12

PASSWORD_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits + "!@#$%^&*"


def bits_to_int(bits: Sequence[int]) -> int:
    """Pack bits into an integer, most significant bit first."""
    value = 0
    for b in bits:
        value = (value << 1) | int(b)
    return value


def generate_bits(count: int = DEFAULT_BIT_COUNT,
                  rng: Optional[np.random.Generator] = None) -> List[int]:
    """Generate ``count`` independent fair bits."""
    if count < 0:
        raise ValueError(f"Bit count must be non-negative, got {count}")
    rng = make_rng(rng)
    if count == 0:
        return []
    return [0 if r < 0.5 else 1 for r in rng.random(count)]


def generate_bitstring(count: int = DEFAULT_BIT_COUNT,
                       rng: Optional[np.random.Generator] = None) -> str:
    """Generate a random bitstring of length ``count``."""
    return ''.join(str(b) for b in generate_bits(count, rng))


def generate_number(min_value: int = DEFAULT_NUMBER_RANGE[0],
                    max_value: int = DEFAULT_NUMBER_RANGE[1],
                    rng: Optional[np.random.Generator] = None) -> int:
    """
    Generate an integer in [min_value, max_value] (both inclusive).

    Draws twice the ⌈log2(range)⌉ bits needed, packs the first half and
    reduces modulo the range. The modulo biases ranges that are not a
    power of two slightly toward low values.
    """
    min_value, max_value = int(min_value), int(max_value)
    range_size = max_value - min_value + 1
    if range_size <= 0:
        raise ValueError(f"max_value ({max_value}) must be >= min_value ({min_value})")

    bits_needed = (range_size - 1).bit_length()  # ⌈log2(range_size)⌉
    bits = generate_bits(bits_needed * 2, rng)
    value = bits_to_int(bits[:bits_needed])
    return (value % range_size) + min_value


def generate_password(length: int = DEFAULT_PASSWORD_LENGTH,
                      rng: Optional[np.random.Generator] = None) -> str:
    """Generate a password of ``length`` characters from PASSWORD_ALPHABET."""
    if length <= 0:
        raise ValueError(f"Password length must be positive, got {length}")
    rng = make_rng(rng)
    last = len(PASSWORD_ALPHABET) - 1
    password = ''.join(
        PASSWORD_ALPHABET[generate_number(0, last, rng)] for _ in range(length)
    )
    logger.debug("generated %d-character password", length)
    return password


class QuantumRandom:
    """
    The QRNG functions bound to one generator.

    Holds no state beyond the generator itself; pass ``seed`` (or a
    stub ``rng``) to make outcomes reproducible in tests.

    Example:
        >>> qrng = QuantumRandom(seed=3)
        >>> len(qrng.generate_password(16))
        16
    """

    def __init__(self, rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None):
        self._rng = make_rng(rng, seed)

    def generate_bits(self, count: int = DEFAULT_BIT_COUNT) -> List[int]:
        return generate_bits(count, self._rng)

    def generate_bitstring(self, count: int = DEFAULT_BIT_COUNT) -> str:
        return generate_bitstring(count, self._rng)

    def generate_number(self, min_value: int = DEFAULT_NUMBER_RANGE[0],
                        max_value: int = DEFAULT_NUMBER_RANGE[1]) -> int:
        return generate_number(min_value, max_value, self._rng)

    def generate_password(self, length: int = DEFAULT_PASSWORD_LENGTH) -> str:
        return generate_password(length, self._rng)
