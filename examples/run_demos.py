"""Example: Walk through every demo in quantum-demos."""
import sys
sys.path.insert(0, 'src')

from quantum_demos import (
    SingleQubit, EntangledPair, GroverSearch, QuantumRandom,
    show_qubit, show_pair, show_search,
)

print("=" * 50)
print("quantum-demos: Superposition")
print("=" * 50)

qubit = SingleQubit().hadamard()
print(show_qubit(qubit))
print(f"\nMeasured |{qubit.measure()}⟩ → {qubit.get_state_string()}")

print("\n" + "=" * 50)
print("quantum-demos: Entanglement")
print("=" * 50)

pair = EntangledPair()
pair.measure_a()
print(show_pair(pair))

print("\n" + "=" * 50)
print("quantum-demos: Grover Search")
print("=" * 50)

print(show_search(GroverSearch(64).compare()))

print("\n" + "=" * 50)
print("quantum-demos: Quantum Randomness")
print("=" * 50)

qrng = QuantumRandom()
print(f"Bits:     {qrng.generate_bitstring(16)}")
print(f"Dice:     {qrng.generate_number(1, 6)}")
print(f"Password: {qrng.generate_password()}")
