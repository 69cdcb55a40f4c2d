"""
quantum-demos: Educational simulations of elementary quantum computing.

Features:
- Single qubit: Hadamard, Pauli-X, Pauli-Z and measurement collapse
- Entangled pair: perfectly correlated Bell-state measurements
- Grover search: classical linear scan vs ⌈√N⌉ quantum iterations
- QRNG: random bits, bounded integers and passwords
- ASCII visualization: probability bars, Bloch circle, comparisons

Quick Start:
    >>> from quantum_demos import SingleQubit, EntangledPair
    >>> q = SingleQubit().hadamard()
    >>> print(q.get_state_string())
    50.0% |0⟩, 50.0% |1⟩
    >>> pair = EntangledPair()
    >>> pair.measure_a() == pair.measure_b()
    True

Every random component takes ``rng`` or ``seed`` for reproducible runs.
"""
__version__ = "1.0.0"

# Core components
from .core import SingleQubit, EntangledPair, BELL_STATE, make_rng, gates

# Algorithms
from .algorithms import GroverSearch, SearchComparison, grover_iterations

# Apps
from .apps import (
    QuantumRandom,
    generate_bits,
    generate_bitstring,
    generate_number,
    generate_password,
    PASSWORD_ALPHABET,
)

# Visualization
from .visualization import (
    show_qubit,
    show_bloch,
    show_pair,
    show_search,
    show_bits,
    StateVisualizer,
    BlochSphere,
)

__all__ = [
    # Core
    'SingleQubit',
    'EntangledPair',
    'BELL_STATE',
    'make_rng',
    'gates',
    # Algorithms
    'GroverSearch',
    'SearchComparison',
    'grover_iterations',
    # Apps
    'QuantumRandom',
    'generate_bits',
    'generate_bitstring',
    'generate_number',
    'generate_password',
    'PASSWORD_ALPHABET',
    # Visualization
    'show_qubit',
    'show_bloch',
    'show_pair',
    'show_search',
    'show_bits',
    'StateVisualizer',
    'BlochSphere',
]
