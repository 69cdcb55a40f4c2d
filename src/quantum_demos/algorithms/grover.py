"""
Grover search, classical vs quantum comparison
================================================
Grover's algorithm finds a marked item among N in about √N oracle
queries, where a linear scan needs up to N.

This module does not simulate amplitude amplification. ``quantum_search``
reports the theoretical iteration count ⌈√N⌉ and returns the target
directly, i.e. the result the algorithm reaches with probability ≈ 1.

Usage:
    from quantum_demos.algorithms import GroverSearch

    search = GroverSearch(8)
    result = search.compare()
    print(result)  # Grover N=8: classical 6 checks, quantum 3 iterations
"""
import logging
import math
import numpy as np
from typing import Optional
from dataclasses import dataclass

from ..core.rng import make_rng

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_SIZE = 8


def grover_iterations(size: int) -> int:
    """Theoretical Grover iteration bound ⌈√N⌉."""
    return math.ceil(math.sqrt(size))


@dataclass
class SearchComparison:
    """Result of running both searches on the same target."""
    size: int
    target: int
    classical_result: int
    classical_attempts: int
    quantum_result: int
    quantum_attempts: int

    def __post_init__(self):
        if self.quantum_attempts < 1:
            raise ValueError(
                f"quantum_attempts must be at least 1, got {self.quantum_attempts}"
            )

    @property
    def speedup(self) -> float:
        return self.classical_attempts / self.quantum_attempts

    def __str__(self) -> str:
        return (f"Grover N={self.size}: classical {self.classical_attempts} checks, "
                f"quantum {self.quantum_attempts} iterations")


class GroverSearch:
    """
    Unsorted search over ``size`` items with one hidden target.

    Attributes:
        size: Number of items
        target: Index of the marked item, uniform in [0, size)
        classical_attempts: Checks used by the last classical search
        quantum_attempts: Iterations reported by the last quantum search
    """

    def __init__(self, size: int = DEFAULT_SEARCH_SIZE,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None):
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise ValueError(f"Search size must be an integer, got {size!r}")
        if size <= 0:
            raise ValueError(f"Search size must be positive, got {size}")

        self.size = int(size)
        self._rng = make_rng(rng, seed)
        self.target = self._draw_target()
        self.classical_attempts = 0
        self.quantum_attempts = 0

    def _draw_target(self) -> int:
        target = int(self._rng.integers(0, self.size))
        logger.debug("new search target %d of %d", target, self.size)
        return target

    def classical_search(self) -> int:
        """Check each index in order until the target is found."""
        self.classical_attempts = 0
        for i in range(self.size):
            self.classical_attempts += 1
            if i == self.target:
                return i
        return -1

    def quantum_search(self) -> int:
        """Report ⌈√N⌉ Grover iterations and return the target."""
        self.quantum_attempts = grover_iterations(self.size)
        return self.target

    def compare(self) -> SearchComparison:
        """Run both searches and collect the attempt counts."""
        classical = self.classical_search()
        quantum = self.quantum_search()
        result = SearchComparison(
            size=self.size,
            target=self.target,
            classical_result=classical,
            classical_attempts=self.classical_attempts,
            quantum_result=quantum,
            quantum_attempts=self.quantum_attempts,
        )
        logger.debug("%s", result)
        return result

    def set_new_target(self) -> int:
        """Re-roll the target and clear both counters."""
        self.target = self._draw_target()
        self.classical_attempts = 0
        self.quantum_attempts = 0
        return self.target

    def get_target(self) -> int:
        return self.target

    def __repr__(self) -> str:
        return f"GroverSearch(size={self.size})"
