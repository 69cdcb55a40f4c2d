"""Tests for ASCII rendering of demo state."""

import numpy as np
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from quantum_demos import (
    SingleQubit, EntangledPair, GroverSearch,
    show_qubit, show_bloch, show_pair, show_search, show_bits, BlochSphere,
)
from stubs import StubRng


# ---------------------------------------------------------------------------
# Bloch coordinates
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("a,b,expected", [
    (1.0, 0.0, (0.0, 0.0, 1.0)),                            # |0⟩ north pole
    (0.0, 1.0, (0.0, 0.0, -1.0)),                           # |1⟩ south pole
    (1 / np.sqrt(2), 1 / np.sqrt(2), (1.0, 0.0, 0.0)),      # |+⟩
    (1 / np.sqrt(2), -1 / np.sqrt(2), (-1.0, 0.0, 0.0)),    # |−⟩
])
def test_state_to_bloch(a, b, expected):
    np.testing.assert_allclose(BlochSphere.state_to_bloch(a, b), expected, atol=1e-12)


def test_bloch_normalizes():
    np.testing.assert_allclose(BlochSphere.state_to_bloch(2.0, 0.0), (0.0, 0.0, 1.0))


def test_polar_angle():
    assert BlochSphere.polar_angle(1.0) == pytest.approx(0.0)
    assert BlochSphere.polar_angle(0.0) == pytest.approx(np.pi / 2)
    assert BlochSphere.polar_angle(-1.0) == pytest.approx(np.pi)


@pytest.mark.parametrize("gates", ["", "h", "x", "hz", "hx"])
def test_show_bloch_marks_state(gates):
    q = SingleQubit(seed=0)
    for name in gates:
        q.apply_gate(name)
    text = show_bloch(q)
    assert text.count('●') == 1
    assert "Bloch Circle" in text


# ---------------------------------------------------------------------------
# Text panels
# ---------------------------------------------------------------------------

def test_show_qubit():
    text = show_qubit(SingleQubit(seed=0).hadamard())
    assert "|0⟩:" in text and "|1⟩:" in text
    assert text.endswith("50.0% |0⟩, 50.0% |1⟩")


def test_show_pair_before_and_after():
    pair = EntangledPair(rng=StubRng([0.2]))
    assert "Not measured yet" in show_pair(pair)
    pair.measure_a()
    text = show_pair(pair)
    assert "A = 0, B = 0 (correlated)" in text
    assert "|00⟩:" in text and "|11⟩:" in text


def test_show_search():
    comparison = GroverSearch(8, rng=StubRng(integer=5)).compare()
    text = show_search(comparison)
    assert "Search for item 5 of 8" in text
    assert "6 checks" in text
    assert "3 iterations" in text
    assert "Speedup: 2.00x" in text


def test_show_bits():
    assert show_bits([1, 0, 1, 1]) == "1011 (= 11)"
    assert show_bits([]) == " (= 0)"
