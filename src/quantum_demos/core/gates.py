"""
Single-qubit gates as real numpy arrays.

Only gates with real entries are needed: every amplitude in the demos
stays real, so matrices are float64 rather than complex.
"""
import numpy as np


# =============================================================================
# SINGLE-QUBIT GATES (2x2 matrices)
# =============================================================================

I = np.array([[1, 0], [0, 1]], dtype=np.float64)

# Pauli gates
X = np.array([[0, 1], [1, 0]], dtype=np.float64)   # bit flip
Z = np.array([[1, 0], [0, -1]], dtype=np.float64)  # phase flip

# Hadamard
H = np.array([[1, 1], [1, -1]], dtype=np.float64) / np.sqrt(2)


# =============================================================================
# GATE REGISTRY
# =============================================================================

GATE_REGISTRY = {
    "i": I,
    "id": I,
    "x": X,
    "pauli_x": X,
    "not": X,
    "z": Z,
    "pauli_z": Z,
    "h": H,
    "hadamard": H,
}


def get_matrix(name: str) -> np.ndarray:
    """
    Look up a gate matrix by name.

    Parameters
    ----------
    name : str
        Gate name (case-insensitive).

    Returns
    -------
    numpy.ndarray
        2x2 real unitary matrix for the gate.

    Raises
    ------
    KeyError
        If gate name is not found.
    """
    key = name.strip().lower()
    if key not in GATE_REGISTRY:
        raise KeyError(f"Unknown gate: '{name}'. Available: {sorted(GATE_REGISTRY.keys())}")
    return GATE_REGISTRY[key]


def is_unitary(m, tol=1e-9):
    product = m @ m.conj().T
    return np.allclose(product, np.eye(len(m)), atol=tol)
