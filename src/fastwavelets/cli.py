"""
Command line demo of the transforms.

Runs a forward and a reverse transform over the signal ``[1, 1, 1, 1, 1, 1,
1, 1]`` and prints the time domain, transform domain and reconstruction:

    fastwavelets fwt haar 2
    python -m fastwavelets "Wavelet Packet Transform" "Daubechies 2"
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

import numpy as np

from .exceptions import TransformError
from .numpy import DiscreteFourierTransform, create_transform
from .wavelets import list_wavelets

DEMO_SIGNAL = (1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0)

# historical short names of the wavelets
_WAVELET_ALIASES = {
    "haar02": "Haar",
    "daub02": "Daubechies 2",
    "daub03": "Daubechies 3",
    "daub04": "Daubechies 4",
    "lege02": "Legendre 1",
}


def _format_row(values: np.ndarray) -> str:
    # rounding noise such as -2e-16 would print as a glued "-0.000000"
    values = np.round(values, 6) + 0.0
    return "".join(f"{value:9.6f}" for value in values)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fastwavelets",
        description="Transform a demo signal forward and back and print every stage.",
        epilog=f"available wavelets: {', '.join(list_wavelets())}",
    )
    parser.add_argument(
        "transform",
        help="transform type: DFT, FWT, WPT or the full transform name",
    )
    parser.add_argument("wavelet", help="wavelet name, e.g. Haar or 'Daubechies 4'")
    parser.add_argument(
        "steps",
        nargs="?",
        type=int,
        default=None,
        help="number of steps forward and reverse; all possible steps if omitted",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log debug messages"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return int(exc.code or 0)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    wavelet = _WAVELET_ALIASES.get(args.wavelet.lower(), args.wavelet)
    try:
        transform = create_transform(args.transform, wavelet)
        level = None if isinstance(transform, DiscreteFourierTransform) else args.steps
        signal = np.array(DEMO_SIGNAL)
        coefficients = transform.forward(signal, level)
        reconstruction = transform.reverse(coefficients, level)
    except TransformError as exc:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 2

    print()
    print("time domain:")
    print(_format_row(signal))
    if isinstance(transform, DiscreteFourierTransform):
        print("frequency domain:")
    else:
        print("Hilbert domain:")
    print(_format_row(coefficients))
    print("reconstruction:")
    print(_format_row(reconstruction))
    return 0


if __name__ == "__main__":
    sys.exit(main())
