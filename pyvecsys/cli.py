"""
Demo driver for pyvecsys.

Prints an independence verdict for the built-in sample systems, or for a
system passed on the command line as JSON.

Usage:
    python -m pyvecsys
    python -m pyvecsys --vectors "[[1, 2], [2, 4]]"
    python -m pyvecsys --vectors "[[1, 0, 0], [0, 1, 0]]" --method svd --summary
    python -m pyvecsys --vectors "[[1, 2, 3], [4, 5, 6]]" --square
"""

import argparse
import json
import sys

from pyvecsys.core.exceptions import PyVecSysError
from pyvecsys.independence.design import VectorSystem
from pyvecsys.independence.solvers import check_independence


SAMPLE_SYSTEMS = {
    '2D': [[1.0, 2.0], [3.0, 4.0]],
    '3D': [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 10.0]],
}


def format_verdict(label: str, is_independent: bool) -> str:
    kind = "linearly independent" if is_independent else "linearly dependent"
    return f"{label} vectors are {kind}."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pyvecsys',
        description='Check whether a system of vectors is linearly independent',
    )
    parser.add_argument(
        '--vectors', '-v',
        help='JSON list of vectors, e.g. "[[1, 2], [3, 4]]" (default: built-in samples)',
    )
    parser.add_argument(
        '--method', '-m',
        choices=['auto', 'elimination', 'cofactor', 'svd'],
        default='auto',
        help='Algorithm used to decide independence',
    )
    parser.add_argument(
        '--square',
        action='store_true',
        help='Require exactly as many vectors as coordinates',
    )
    parser.add_argument(
        '--summary', '-s',
        action='store_true',
        help='Print the full report instead of a one-line verdict',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.vectors is None:
        systems = dict(SAMPLE_SYSTEMS)
    else:
        try:
            systems = {'Input': json.loads(args.vectors)}
        except json.JSONDecodeError as e:
            print(f"Error: --vectors is not valid JSON: {e}", file=sys.stderr)
            return 1

    try:
        for label, vectors in systems.items():
            if args.square:
                system = VectorSystem.square(vectors)
            else:
                system = VectorSystem.from_vectors(vectors)
            solution = check_independence(system, method=args.method)

            if args.summary:
                print(f"[{label}]")
                print(solution.summary())
                print()
            else:
                print(format_verdict(label, solution.is_independent))
    except PyVecSysError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
