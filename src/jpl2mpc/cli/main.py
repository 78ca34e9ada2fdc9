"""CLI entry point: jpl2mpc INPUT [OUTPUT]."""

from __future__ import annotations

import argparse
import contextlib
import io
import logging
import sys
from typing import NoReturn, TextIO

from jpl2mpc.config import get_log_level
from jpl2mpc.converter import FrameError, TruncatedInputError, convert
from jpl2mpc.request import build_request_url

logger = logging.getLogger(__name__)

EXIT_USAGE = -1

USAGE_TEXT = """
JPL2MPC takes input ephemeri(de)s generated by HORIZONS  and,
produces file(s) suitable for use in DASO or eph2tle.  The name of
the input ephemeris must be provided as a command-line argument.
For example:

jpl2mpc gaia.txt

The JPL ephemeris must be in text form (can use the 'download/save'
option for this).
   'jpl2mpc --request COMMAND --start START --stop STOP --step STEP'
prints a Horizons batch URL that will get you an ephemeris in the
necessary format (add --vectors for state vectors).
"""


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or JPL2MPC_LOG)."""
    level = get_log_level('DEBUG' if verbose else 'WARNING')
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


class UsageError(Exception):
    """Command line could not be parsed."""


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that reports errors to the caller instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog='jpl2mpc',
        description='Convert a JPL Horizons vector table to DASO / eph2tle format.',
    )
    parser.add_argument('input', nargs='?', default=None, help='Horizons text ephemeris')
    parser.add_argument(
        'output', nargs='?', default=None, help='Output file (default: standard output)'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    parser.add_argument(
        '--request',
        metavar='COMMAND',
        default=None,
        help='Print a Horizons batch URL for COMMAND instead of converting',
    )
    parser.add_argument('--start', default='', help='Start time for --request')
    parser.add_argument('--stop', default='', help='Stop time for --request')
    parser.add_argument('--step', default='1 day', help='Step size for --request')
    parser.add_argument(
        '--vectors', action='store_true', help='Request state vectors with --request'
    )
    return parser


def _request_cmd(args: argparse.Namespace) -> int:
    """Print the Horizons batch URL (--request).

    Returns:
        0 on success, EXIT_USAGE if start or stop is missing.
    """
    if not args.start or not args.stop:
        print('--request needs --start and --stop')
        return EXIT_USAGE
    print(
        build_request_url(
            args.request, args.start, args.stop, args.step, state_vectors=args.vectors
        )
    )
    return 0


def _convert(source: TextIO, dest: TextIO) -> int:
    """Run the converter, reporting failures on standard output.

    Returns:
        0 on success, or the error's exit code.
    """
    try:
        convert(source, dest)
    except (FrameError, TruncatedInputError) as e:
        logger.error('%s', e)
        print(e)
        return e.exit_code
    return 0


def _write_stdout(text: str) -> None:
    """Write text to standard output, restoring undecodable input bytes as-is."""
    raw = getattr(sys.stdout, 'buffer', None)
    if raw is None:
        sys.stdout.write(text)
        return
    sys.stdout.flush()
    raw.write(text.encode('utf-8', errors='surrogateescape'))
    raw.flush()


def main(argv: list[str] | None = None) -> int:
    """Entry point for jpl2mpc CLI.

    Returns:
        Exit code 0 on success; -1 on argument, open, or frame errors;
        -2 on truncated input.
    """
    try:
        args, extra = _build_parser().parse_known_args(argv)
    except UsageError as e:
        print(f'\n{e}')
        print(USAGE_TEXT)
        return EXIT_USAGE
    _configure_logging(args.verbose)
    if extra:
        logger.warning('Ignoring extra arguments: %s', ' '.join(extra))

    if args.request is not None:
        return _request_cmd(args)

    with contextlib.ExitStack() as stack:
        source = None
        dest = None
        if args.input is not None:
            try:
                source = stack.enter_context(
                    open(args.input, encoding='utf-8', errors='surrogateescape', newline='')
                )
            except OSError as e:
                logger.debug('open(%r) failed: %s', args.input, e)
                print(f"\nCouldn't open the Horizons file '{args.input}'")
        if args.output is not None:
            try:
                dest = stack.enter_context(
                    open(args.output, 'w', encoding='utf-8', errors='surrogateescape', newline='')
                )
            except OSError as e:
                logger.debug('open(%r) failed: %s', args.output, e)
                print(f"\nCouldn't open the output file '{args.output}'")
        if source is None or (args.output is not None and dest is None):
            print(USAGE_TEXT)
            return EXIT_USAGE

        if dest is not None:
            return _convert(source, dest)
        # Standard output cannot be rewound; patch in memory, then write once.
        buffer = io.StringIO(newline='')
        rc = _convert(source, buffer)
        if rc == 0:
            _write_stdout(buffer.getvalue())
        return rc


def cli_main() -> NoReturn:
    """Entry point for console_scripts; calls main() and exits with its return code."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
