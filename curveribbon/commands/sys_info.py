import argparse

from .. import sys_info


def run():
    """Print platform, hardware and dependency versions for bug reports.

    Entry point of the ``curveribbon-sys_info`` console script; see
    :func:`curveribbon.sys_info`.
    """
    parser = argparse.ArgumentParser(
        prog="curveribbon-sys_info",
        description="Show system and dependency information for curveribbon.",
    )
    parser.add_argument(
        "--developer",
        help="also list test dependencies",
        action="store_true",
    )
    args = parser.parse_args()

    sys_info(developer=args.developer)
