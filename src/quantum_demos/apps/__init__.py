"""
Practical quantum-flavoured utilities.

- QRNG: random bits, bounded integers and passwords
"""
from .qrng import (
    QuantumRandom,
    generate_bits, generate_bitstring, generate_number, generate_password,
    bits_to_int, PASSWORD_ALPHABET,
)

__all__ = [
    'QuantumRandom',
    'generate_bits', 'generate_bitstring', 'generate_number', 'generate_password',
    'bits_to_int', 'PASSWORD_ALPHABET',
]
