"""
Two-qubit Bell pair with perfectly correlated measurement.

This is not a general two-qubit simulator. The pair is a fixed table of
four joint amplitudes starting in |Φ+⟩ = (|00⟩ + |11⟩)/√2, and
measuring either member collapses the whole table onto |00⟩ or |11⟩.
The |01⟩ and |10⟩ amplitudes stay 0 throughout, and the two recorded
outcomes are always equal.
"""
import logging
import numpy as np
from typing import Dict, Optional

from .rng import make_rng

logger = logging.getLogger(__name__)

OUTCOMES = ("00", "01", "10", "11")

BELL_STATE: Dict[str, float] = {
    "00": 1 / np.sqrt(2),
    "01": 0.0,
    "10": 0.0,
    "11": 1 / np.sqrt(2),
}


class EntangledPair:
    """
    Bell pair shared by two parties, A and B.

    Attributes:
        state: Joint amplitude per outcome label ("00", "01", "10", "11")
        measured: True once either member has been measured
        measurement_a: A's outcome, or None before measurement
        measurement_b: B's outcome, or None before measurement
    """

    def __init__(self, rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None):
        self._rng = make_rng(rng, seed)
        self.reset()

    def reset(self) -> "EntangledPair":
        """Restore |Φ+⟩ and forget any recorded outcomes."""
        self.state = dict(BELL_STATE)
        self.measured = False
        self.measurement_a: Optional[int] = None
        self.measurement_b: Optional[int] = None
        return self

    def _collapse(self, outcome: int) -> None:
        label = "00" if outcome == 0 else "11"
        self.state = {key: (1.0 if key == label else 0.0) for key in OUTCOMES}
        self.measurement_a = outcome
        self.measurement_b = outcome
        self.measured = True
        logger.debug("pair collapsed to |%s⟩", label)

    def measure_a(self) -> int:
        """Measure A. The first measurement of either member fixes both."""
        if self.measured:
            return self.measurement_a

        # prob0 sums the |00⟩ and |11⟩ weights of the table
        prob0 = abs(self.state["00"]) ** 2 + abs(self.state["11"]) ** 2
        outcome = 0 if self._rng.random() < prob0 else 1
        self._collapse(outcome)
        return self.measurement_a

    def measure_b(self) -> int:
        """Measure B; an unmeasured pair collapses exactly as for A."""
        if self.measured:
            return self.measurement_b
        self.measure_a()
        return self.measurement_b

    def are_correlated(self) -> bool:
        return self.measured and self.measurement_a == self.measurement_b

    def probabilities(self) -> Dict[str, float]:
        """Probability of each joint outcome."""
        return {key: abs(amp) ** 2 for key, amp in self.state.items()}

    def get_state_string(self) -> str:
        probs = self.probabilities()
        return ", ".join(f"{probs[key] * 100:.1f}% |{key}⟩" for key in OUTCOMES)

    def __repr__(self) -> str:
        if self.measured:
            return f"EntangledPair(measured, A={self.measurement_a}, B={self.measurement_b})"
        return "EntangledPair(unmeasured)"
