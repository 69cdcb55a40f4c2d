"""
Command-line interface for quantum-demos.

Usage:
    quantum-demos qubit --gates h,z --measure
    quantum-demos bell --trials 10
    quantum-demos grover --size 16
    quantum-demos qrng --password 16
"""
import argparse
import logging
import sys


def cmd_qubit(args):
    """Apply gates to a single qubit and optionally measure it."""
    from ..core import SingleQubit
    from ..visualization import show_qubit, show_bloch

    qubit = SingleQubit(seed=args.seed)
    names = [name.strip() for name in args.gates.split(',') if name.strip()]
    for name in names:
        qubit.apply_gate(name)

    print(f"Gates: {' → '.join(names) if names else '(none)'}")
    print(show_qubit(qubit))

    if args.bloch:
        print()
        print(show_bloch(qubit))

    if args.measure:
        result = qubit.measure()
        print(f"\nMeasured: |{result}⟩")
        print(f"After collapse: {qubit.get_state_string()}")


def cmd_bell(args):
    """Measure fresh Bell pairs and check correlation."""
    from ..core import EntangledPair
    from ..core.rng import make_rng
    from ..visualization import show_pair

    if args.trials < 0:
        raise ValueError(f"Trial count must be non-negative, got {args.trials}")

    rng = make_rng(seed=args.seed)
    pair = EntangledPair(rng=rng)
    print(show_pair(pair))
    print()

    correlated = 0
    for trial in range(args.trials):
        pair.reset()
        # Alternate who measures first
        if trial % 2 == 0:
            a = pair.measure_a()
            b = pair.measure_b()
        else:
            b = pair.measure_b()
            a = pair.measure_a()
        correlated += pair.are_correlated()
        print(f"  Trial {trial + 1:3d}: A={a} B={b}")

    print(f"\nCorrelated: {correlated}/{args.trials}")


def cmd_grover(args):
    """Compare classical search with Grover's iteration count."""
    from ..algorithms import GroverSearch
    from ..visualization import show_search

    search = GroverSearch(args.size, seed=args.seed)
    print(show_search(search.compare()))


def cmd_qrng(args):
    """Generate quantum random bits, numbers or passwords."""
    from ..apps import QuantumRandom
    from ..visualization import show_bits

    qrng = QuantumRandom(seed=args.seed)

    if args.bits is not None:
        print(show_bits(qrng.generate_bits(args.bits)))
    elif args.int:
        low, high = args.int
        print(qrng.generate_number(low, high))
    elif args.password is not None:
        print(qrng.generate_password(args.password))
    else:
        # Default: one byte
        print(show_bits(qrng.generate_bits()))


def cmd_info(args):
    """Show quantum-demos information."""
    from .. import __version__

    print(f"""
quantum-demos v{__version__}
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

Educational simulations of elementary quantum computing.

Demos:
  • qubit   - Superposition, gates and measurement collapse
  • bell    - Entangled pair correlation
  • grover  - Classical vs quantum search
  • qrng    - Random bits, numbers and passwords

Usage:
  quantum-demos qubit --gates h --measure
  quantum-demos bell --trials 10
  quantum-demos grover --size 64
  quantum-demos qrng --password 16
""")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='quantum-demos',
        description='Interactive quantum computing demos'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Qubit command
    qubit_parser = subparsers.add_parser('qubit', help='Single-qubit gates and measurement')
    qubit_parser.add_argument('--gates', default='', help='Comma-separated gates, e.g. "h,x,z"')
    qubit_parser.add_argument('--measure', action='store_true', help='Measure after the gates')
    qubit_parser.add_argument('--bloch', action='store_true', help='Show the Bloch circle')
    qubit_parser.add_argument('--seed', type=int, help='Random seed')
    qubit_parser.set_defaults(func=cmd_qubit)

    # Bell command
    bell_parser = subparsers.add_parser('bell', help='Entangled pair measurements')
    bell_parser.add_argument('--trials', type=int, default=10, help='Number of pairs')
    bell_parser.add_argument('--seed', type=int, help='Random seed')
    bell_parser.set_defaults(func=cmd_bell)

    # Grover command
    grover_parser = subparsers.add_parser('grover', help='Classical vs Grover search')
    grover_parser.add_argument('--size', type=int, default=8, help='Number of items')
    grover_parser.add_argument('--seed', type=int, help='Random seed')
    grover_parser.set_defaults(func=cmd_grover)

    # QRNG command
    qrng_parser = subparsers.add_parser('qrng', help='Quantum random numbers')
    qrng_output = qrng_parser.add_mutually_exclusive_group()
    qrng_output.add_argument('--bits', type=int, help='Generate N random bits')
    qrng_output.add_argument('--int', type=int, nargs=2, metavar=('MIN', 'MAX'),
                             help='Random int in [MIN, MAX]')
    qrng_output.add_argument('--password', type=int, metavar='LEN',
                             help='Random password of LEN characters')
    qrng_parser.add_argument('--seed', type=int, help='Random seed')
    qrng_parser.set_defaults(func=cmd_qrng)

    # Info command
    info_parser = subparsers.add_parser('info', help='Show quantum-demos info')
    info_parser.set_defaults(func=cmd_info)

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )
    logging.getLogger('quantum_demos').setLevel(level)

    if args.command is None:
        parser.print_help()
        return

    try:
        args.func(args)
    except (ValueError, KeyError) as e:
        parser.error(str(e))


if __name__ == '__main__':
    main()
