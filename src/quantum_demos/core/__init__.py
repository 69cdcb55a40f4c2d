"""Core quantum state components."""
from .qubit import SingleQubit
from .entangled import EntangledPair, BELL_STATE
from .rng import make_rng
from . import gates

__all__ = [
    'SingleQubit',
    'EntangledPair',
    'BELL_STATE',
    'make_rng',
    'gates',
]
