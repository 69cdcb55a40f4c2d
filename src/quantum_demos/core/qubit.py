"""
Single-qubit state simulation.

The state |ψ⟩ = a|0⟩ + b|1⟩ is held as a real 2-vector (a, b) with
a² + b² = 1. Gates are applied in place; measurement samples an outcome
and collapses the state onto it.

Usage:
    from quantum_demos import SingleQubit

    q = SingleQubit(seed=7)
    q.hadamard()
    print(q.get_state_string())  # 50.0% |0⟩, 50.0% |1⟩
    print(q.measure())           # 0 or 1, state collapses
"""
import logging
import numpy as np
from typing import Optional, Tuple

from . import gates
from .rng import make_rng

logger = logging.getLogger(__name__)


class SingleQubit:
    """
    One qubit with real amplitudes.

    Starts in |0⟩ = (1, 0). ``hadamard``, ``pauli_x`` and ``pauli_z``
    are unitary and keep the state normalized; ``measure`` is the only
    random operation.

    Example:
        >>> q = SingleQubit(seed=1).hadamard().pauli_z()
        >>> q.state
        array([ 0.70710678, -0.70710678])
    """

    def __init__(self, rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None):
        self._rng = make_rng(rng, seed)
        self._data = np.array([1.0, 0.0])

    def reset(self) -> "SingleQubit":
        """Reset to |0⟩."""
        self._data = np.array([1.0, 0.0])
        return self

    @property
    def state(self) -> np.ndarray:
        """Return a copy of the amplitudes (a, b)."""
        return self._data.copy()

    def apply_gate(self, name: str) -> "SingleQubit":
        """Apply a gate by registry name, e.g. ``"h"`` or ``"pauli_x"``."""
        self._data = gates.get_matrix(name) @ self._data
        return self

    def hadamard(self) -> "SingleQubit":
        """(a, b) -> ((a+b)/√2, (a-b)/√2)"""
        self._data = gates.H @ self._data
        return self

    def pauli_x(self) -> "SingleQubit":
        """(a, b) -> (b, a)"""
        self._data = gates.X @ self._data
        return self

    def pauli_z(self) -> "SingleQubit":
        """(a, b) -> (a, -b)"""
        self._data = gates.Z @ self._data
        return self

    def measure(self) -> int:
        """
        Measure in the computational basis and collapse.

        Draws one uniform r in [0, 1); the outcome is 0 iff r < a².
        A collapsed state therefore always reproduces its own outcome.
        """
        prob0 = min(max(float(self._data[0] ** 2), 0.0), 1.0)
        result = 0 if self._rng.random() < prob0 else 1

        if result == 0:
            self._data = np.array([1.0, 0.0])
        else:
            self._data = np.array([0.0, 1.0])

        logger.debug("qubit measured %d (p0=%.4f)", result, prob0)
        return result

    def get_probability0(self) -> float:
        """Probability of measuring |0⟩."""
        return float(self._data[0] ** 2)

    def get_probability1(self) -> float:
        """Probability of measuring |1⟩."""
        return float(self._data[1] ** 2)

    def probabilities(self) -> Tuple[float, float]:
        return self.get_probability0(), self.get_probability1()

    def get_state_string(self) -> str:
        p0, p1 = self.probabilities()
        return f"{p0 * 100:.1f}% |0⟩, {p1 * 100:.1f}% |1⟩"

    def __repr__(self) -> str:
        a, b = self._data
        return f"SingleQubit(a={a:.4f}, b={b:.4f})"
