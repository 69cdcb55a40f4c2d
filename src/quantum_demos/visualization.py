"""
ASCII rendering of demo state for terminal front ends.

Features:
- Qubit probability bars and state string
- Bloch circle for real amplitudes (x-z plane)
- Bell pair joint-outcome bars and recorded outcomes
- Classical vs Grover attempt comparison
- Random bit strings
"""
import numpy as np
from typing import List, Sequence, Tuple

BAR_WIDTH = 40


def _bar(fraction: float, width: int = BAR_WIDTH) -> str:
    return '█' * int(round(fraction * width))


class StateVisualizer:
    """
    Visualize demo states.
    """

    @staticmethod
    def qubit_ascii(qubit) -> str:
        """Probability bars for a SingleQubit."""
        lines = []
        lines.append("Qubit State:")
        lines.append("─" * 50)
        for label, prob in zip(("0", "1"), qubit.probabilities()):
            lines.append(f"|{label}⟩: {_bar(prob):{BAR_WIDTH}s} {prob*100:5.1f}%")
        lines.append(qubit.get_state_string())
        return '\n'.join(lines)

    @staticmethod
    def pair_ascii(pair) -> str:
        """Joint-outcome bars for an EntangledPair, plus outcomes once measured."""
        lines = []
        lines.append("Entangled Pair:")
        lines.append("─" * 50)
        for label, prob in pair.probabilities().items():
            lines.append(f"|{label}⟩: {_bar(prob):{BAR_WIDTH}s} {prob*100:5.1f}%")

        if pair.measured:
            verdict = "correlated" if pair.are_correlated() else "NOT correlated"
            lines.append(f"A = {pair.measurement_a}, B = {pair.measurement_b} ({verdict})")
        else:
            lines.append("Not measured yet")
        return '\n'.join(lines)

    @staticmethod
    def search_ascii(comparison) -> str:
        """Attempt bars for a SearchComparison."""
        scale = max(comparison.size, 1)
        lines = []
        lines.append(f"Search for item {comparison.target} of {comparison.size}:")
        lines.append("─" * 50)
        lines.append(f"Classical: {_bar(comparison.classical_attempts / scale):{BAR_WIDTH}s} "
                     f"{comparison.classical_attempts:3d} checks")
        lines.append(f"Quantum:   {_bar(comparison.quantum_attempts / scale):{BAR_WIDTH}s} "
                     f"{comparison.quantum_attempts:3d} iterations")
        lines.append(f"Speedup: {comparison.speedup:.2f}x")
        return '\n'.join(lines)

    @staticmethod
    def bits_ascii(bits: Sequence[int]) -> str:
        """Bit string with its big-endian integer value."""
        bitstring = ''.join(str(b) for b in bits)
        value = int(bitstring, 2) if bitstring else 0
        return f"{bitstring} (= {value})"


class BlochSphere:
    """
    Bloch circle for single-qubit states with real amplitudes.

    Real amplitudes keep the state on the x-z great circle (y = 0).
    """

    @staticmethod
    def state_to_bloch(a: float, b: float) -> Tuple[float, float, float]:
        """Convert real amplitudes to Bloch sphere coordinates."""
        norm = np.sqrt(a**2 + b**2)
        a, b = a/norm, b/norm

        x = 2 * a * b
        y = 0.0
        z = a**2 - b**2

        return (float(x), float(y), float(z))

    @staticmethod
    def polar_angle(z: float) -> float:
        """Angle θ from |0⟩ (north pole)."""
        return float(np.arccos(np.clip(z, -1, 1)))

    @staticmethod
    def ascii_bloch(a: float, b: float) -> str:
        """ASCII x-z circle with the state marked."""
        x, y, z = BlochSphere.state_to_bloch(a, b)
        theta = BlochSphere.polar_angle(z)

        lines = []
        lines.append("Bloch Circle (x-z plane):")
        lines.append("─" * 40)
        lines.append(f"  Coordinates: x={x:.3f}, z={z:.3f}")
        lines.append(f"  Angle: θ={theta:.3f} rad")
        lines.append("")

        grid_size = 11
        center = grid_size // 2

        grid = [[' ' for _ in range(grid_size)] for _ in range(grid_size)]

        for angle in np.linspace(0, 2*np.pi, 40):
            gx = int(round(center + center * 0.9 * np.cos(angle)))
            gz = int(round(center + center * 0.9 * np.sin(angle)))
            grid[gz][gx] = '·'

        for i in range(grid_size):
            if grid[center][i] == ' ':
                grid[center][i] = '─'
            if grid[i][center] == ' ':
                grid[i][center] = '│'
        grid[center][center] = '┼'

        state_gx = int(round(center + center * 0.9 * x))
        state_gz = int(round(center - center * 0.9 * z))
        grid[state_gz][state_gx] = '●'

        lines.append("     |0⟩")
        for row in grid:
            lines.append("    " + ''.join(row))
        lines.append("     |1⟩")

        return '\n'.join(lines)


def show_qubit(qubit) -> str:
    """Quick qubit display."""
    return StateVisualizer.qubit_ascii(qubit)


def show_bloch(qubit) -> str:
    """Quick Bloch circle display."""
    a, b = qubit.state
    return BlochSphere.ascii_bloch(a, b)


def show_pair(pair) -> str:
    """Quick entangled pair display."""
    return StateVisualizer.pair_ascii(pair)


def show_search(comparison) -> str:
    """Quick search comparison display."""
    return StateVisualizer.search_ascii(comparison)


def show_bits(bits: List[int]) -> str:
    """Quick bit string display."""
    return StateVisualizer.bits_ascii(bits)
