"""Tests for single-qubit simulation."""

import logging
import numpy as np
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from quantum_demos import SingleQubit
from stubs import StubRng


@pytest.fixture
def qubit():
    return SingleQubit(seed=42)


SQRT2 = np.sqrt(2)


# ---------------------------------------------------------------------------
# Gate action
# ---------------------------------------------------------------------------

def test_initial_state(qubit):
    np.testing.assert_allclose(qubit.state, [1, 0], atol=1e-12)
    assert qubit.get_probability0() == 1.0
    assert qubit.get_probability1() == 0.0


def test_hadamard_superposition(qubit):
    qubit.hadamard()
    np.testing.assert_allclose(qubit.state, [1 / SQRT2, 1 / SQRT2], atol=1e-12)
    assert qubit.get_probability0() == pytest.approx(0.5)


def test_hadamard_formula():
    q = SingleQubit(seed=0).pauli_x().hadamard()  # (0, 1) → (1/√2, -1/√2)
    np.testing.assert_allclose(q.state, [1 / SQRT2, -1 / SQRT2], atol=1e-12)


def test_pauli_x_swaps(qubit):
    qubit.hadamard().pauli_z().pauli_x()  # (1/√2, -1/√2) → (-1/√2, 1/√2)
    np.testing.assert_allclose(qubit.state, [-1 / SQRT2, 1 / SQRT2], atol=1e-12)


def test_pauli_z_negates_second(qubit):
    qubit.hadamard().pauli_z()
    np.testing.assert_allclose(qubit.state, [1 / SQRT2, -1 / SQRT2], atol=1e-12)


@pytest.mark.parametrize("gate", ["hadamard", "pauli_x", "pauli_z"])
def test_gate_applied_twice_is_identity(gate):
    q = SingleQubit(seed=0).hadamard().pauli_z().hadamard().pauli_x()
    before = q.state
    getattr(q, gate)()
    getattr(q, gate)()
    np.testing.assert_allclose(q.state, before, atol=1e-12)


@pytest.mark.parametrize("sequence", [
    "h", "x", "z", "hz", "hzh", "xhz", "hxzhx", "hhhhh", "zxhzxhzxh",
])
def test_norm_preserved(sequence):
    q = SingleQubit(seed=0)
    for name in sequence:
        q.apply_gate(name)
    a, b = q.state
    assert a**2 + b**2 == pytest.approx(1.0, abs=1e-12)


def test_apply_gate_matches_methods():
    by_name = SingleQubit(seed=0).apply_gate("h").apply_gate("pauli_z")
    by_method = SingleQubit(seed=0).hadamard().pauli_z()
    np.testing.assert_allclose(by_name.state, by_method.state, atol=1e-12)


def test_apply_gate_unknown(qubit):
    with pytest.raises(KeyError):
        qubit.apply_gate("y")


def test_reset(qubit):
    qubit.hadamard().pauli_z().reset()
    np.testing.assert_allclose(qubit.state, [1, 0])


def test_state_is_copy(qubit):
    state = qubit.state
    state[0] = 0.0
    assert qubit.get_probability0() == 1.0


# ---------------------------------------------------------------------------
# Measurement
# ---------------------------------------------------------------------------

def test_measure_below_threshold_gives_zero():
    q = SingleQubit(rng=StubRng([0.49])).hadamard()
    assert q.measure() == 0
    np.testing.assert_array_equal(q.state, [1.0, 0.0])


def test_measure_above_threshold_gives_one():
    q = SingleQubit(rng=StubRng([0.51])).hadamard()
    assert q.measure() == 1
    np.testing.assert_array_equal(q.state, [0.0, 1.0])


def test_measure_draws_once():
    rng = StubRng([0.2])
    q = SingleQubit(rng=rng).hadamard()
    q.measure()
    assert rng.random_calls == 1


@pytest.mark.parametrize("seed", range(20))
def test_measure_collapses_fully(seed):
    q = SingleQubit(seed=seed).hadamard()
    result = q.measure()
    probs = (q.get_probability0(), q.get_probability1())
    assert probs in [(1.0, 0.0), (0.0, 1.0)]
    assert probs[result] == 1.0


@pytest.mark.parametrize("seed", range(10))
def test_repeated_measurement_is_stable(seed):
    q = SingleQubit(seed=seed).hadamard()
    first = q.measure()
    for _ in range(20):
        assert q.measure() == first


def test_definite_states_are_deterministic():
    # Edge draws must not flip a collapsed state
    assert SingleQubit(rng=StubRng([0.999999])).measure() == 0
    assert SingleQubit(rng=StubRng([0.0])).pauli_x().measure() == 1


def test_double_hadamard_stays_zero():
    # HH|0⟩ may carry rounding error, but still measures 0
    q = SingleQubit(rng=StubRng([0.9999999999])).hadamard().hadamard()
    assert q.measure() == 0


def test_superposition_statistics():
    q = SingleQubit(seed=123)
    ones = 0
    for _ in range(2000):
        ones += q.reset().hadamard().measure()
    assert 0.45 < ones / 2000 < 0.55


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

def test_state_string_initial(qubit):
    assert qubit.get_state_string() == "100.0% |0⟩, 0.0% |1⟩"


def test_state_string_superposition(qubit):
    qubit.hadamard()
    assert qubit.get_state_string() == "50.0% |0⟩, 50.0% |1⟩"


def test_repr(qubit):
    assert repr(qubit) == "SingleQubit(a=1.0000, b=0.0000)"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def test_measurement_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="quantum_demos")
    SingleQubit(rng=StubRng([0.9])).pauli_x().measure()
    assert caplog.messages == ["qubit measured 1 (p0=0.0000)"]
    assert caplog.records[0].levelno == logging.DEBUG


def test_nothing_logged_above_debug(caplog):
    caplog.set_level(logging.INFO, logger="quantum_demos")
    SingleQubit(seed=0).hadamard().measure()
    assert caplog.records == []
