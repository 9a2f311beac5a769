# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""Command-line entry point for bannerkit.

Usage::

    bannerkit [-w WIDTH] [-r RANK] [-p PAD] [-m CHAR] TITLE...
    echo 'the end' | bannerkit -w 21 -

Exit codes::

    0  banner, help or manual printed
    1  title does not fit the requested width
    2  bad command-line option
"""

from __future__ import annotations

import argparse
import importlib.resources
import sys
from collections.abc import Callable, Sequence
from typing import NoReturn, TextIO

from rich.console import Console
from rich.markup import escape

from bannerkit._types import DEFAULT_MARKER, DEFAULT_PAD, DEFAULT_RANK, DEFAULT_WIDTH, BannerParameters
from bannerkit.errors import BannerKitError, OptionError
from bannerkit.formatter import format_banner
from bannerkit.logging import configure_logging, get_logger

logger = get_logger(__name__)

# A lone positional equal to this reads the title from stdin.
STDIN_SENTINEL = '-'

# Everything after this word is a title word, even if it starts with a dash.
END_OF_OPTIONS = '--'

_HELP_HINT = "Try 'bannerkit --help' for more information."


class _Parser(argparse.ArgumentParser):
    """Argument parser that raises :class:`OptionError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        """Raise instead of printing usage and calling ``sys.exit(2)``."""
        raise OptionError(message, hint=_HELP_HINT)


def _int_at_least(minimum: int, label: str) -> Callable[[str], int]:
    """Return an argparse ``type`` callable enforcing ``value >= minimum``."""

    def convert(raw: str) -> int:
        try:
            value = int(raw)
        except ValueError:
            raise argparse.ArgumentTypeError(f'invalid integer value: {raw!r}') from None
        if value < minimum:
            raise argparse.ArgumentTypeError(f'must be a {label} integer, got {value}')
        return value

    return convert


def build_parser() -> argparse.ArgumentParser:
    """Build the bannerkit argument parser."""
    parser = _Parser(
        prog='bannerkit',
        description='Print a centered, letter-spaced comment banner for TITLE.',
        epilog="Use '-' as the only TITLE to read the title from the first line of stdin.",
        add_help=False,
    )
    parser.add_argument('title', nargs='*', metavar='TITLE', help='Title words, or - for stdin.')
    parser.add_argument(
        '-w',
        '--width',
        type=_int_at_least(1, 'positive'),
        default=DEFAULT_WIDTH,
        help='Banner width (default: %(default)s).',
    )
    parser.add_argument(
        '-r',
        '--rank',
        type=_int_at_least(0, 'non-negative'),
        default=DEFAULT_RANK,
        help='Blank bordered lines above and below the title (default: %(default)s).',
    )
    parser.add_argument(
        '-p',
        '--pad',
        type=_int_at_least(0, 'non-negative'),
        default=DEFAULT_PAD,
        help='Fully filled lines at top and bottom (default: %(default)s).',
    )
    parser.add_argument(
        '-m',
        '--marker',
        default=DEFAULT_MARKER,
        help='Border character (default: %(default)r).',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug output to stderr.')
    parser.add_argument('--json-log', action='store_true', help='Log as JSON lines.')
    parser.add_argument('-h', '--help', action='store_true', help='Show this help and exit.')
    parser.add_argument('--manual', action='store_true', help='Show the full manual and exit.')
    return parser


def parse_command_line(parser: argparse.ArgumentParser, argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse ``argv``, allowing options between title words.

    ``parse_intermixed_args`` does not honor ``--``, so words after the
    first ``--`` are split off and appended to the title unparsed.
    """
    words = list(sys.argv[1:] if argv is None else argv)
    trailing: list[str] = []
    if END_OF_OPTIONS in words:
        cut = words.index(END_OF_OPTIONS)
        words, trailing = words[:cut], words[cut + 1 :]
    args = parser.parse_intermixed_args(words)
    args.title = [*args.title, *trailing]
    return args


def read_manual() -> str:
    """Return the bundled manual text."""
    return (importlib.resources.files('bannerkit') / 'data' / 'manual.txt').read_text(encoding='utf-8')


def acquire_title(words: Sequence[str], stdin: TextIO | None = None) -> str:
    """Return the title from command-line words or standard input.

    A single ``-`` word reads exactly one line from ``stdin`` (its
    trailing newline removed). Anything else is joined with spaces.

    Raises:
        OptionError: If no words were given.
    """
    if not words:
        raise OptionError('a title is required', hint=_HELP_HINT)
    if len(words) == 1 and words[0] == STDIN_SENTINEL:
        stream = stdin if stdin is not None else sys.stdin
        line = stream.readline()
        logger.debug('read title from stdin', length=len(line))
        return line.removesuffix('\n')
    return ' '.join(words)


def _report(console: Console, err: BannerKitError) -> None:
    console.print(f'[bold red]bannerkit:[/] {escape(str(err))}', highlight=False)
    if err.hint:
        console.print(f'[dim]{escape(err.hint)}[/]', highlight=False)


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    console: Console | None = None,
) -> int:
    """Run the CLI and return the process exit status.

    Args:
        argv: Arguments without the program name. Defaults to
            ``sys.argv[1:]``.
        stdin: Stream the ``-`` title is read from.
        stdout: Stream the banner, help and manual are written to.
        console: Rich console used for error messages. Defaults to one
            writing to stderr.
    """
    out = stdout if stdout is not None else sys.stdout
    console = console or Console(stderr=True)
    parser = build_parser()

    configure_logging()
    try:
        args = parse_command_line(parser, argv)
        if args.verbose or args.json_log:
            configure_logging(verbose=args.verbose, json_log=args.json_log)

        if args.help:
            out.write(parser.format_help())
            return 0
        if args.manual:
            out.write(read_manual())
            return 0

        params = BannerParameters(
            width=args.width,
            rank=args.rank,
            pad=args.pad,
            marker=args.marker,
        )
        title = acquire_title(args.title, stdin)
        banner = format_banner(title, params)
    except BannerKitError as err:
        if isinstance(err, OptionError) and not err.hint:
            err.hint = _HELP_HINT
        logger.debug('banner failed', error=str(err), exit_code=err.exit_code)
        _report(console, err)
        return err.exit_code

    out.write(banner.render())
    return 0


if __name__ == '__main__':
    sys.exit(main())
