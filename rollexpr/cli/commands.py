#!/usr/bin/env python3
"""
Command-line interface for rollexpr.

    $ rollexpr 3d12 - 8 + 10d8
    47
    $ rollexpr
    4
    $ rollexpr --show 2d20 + 3
    2d20 + 3 = 25
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from rollexpr.core.config import VALID_LOG_LEVELS, get_config
from rollexpr.core.logging_config import setup_logging
from rollexpr.rng import DiceRoller, Expression, parse

logger = logging.getLogger(__name__)

VALUE_OPTIONS = ('--seed', '--times', '--log-level')
FLAG_OPTIONS = ('--show', '--range', '-h', '--help')


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog='rollexpr',
        description='Roll dice written in notation such as "3d12 - 8 + 10d8"',
        epilog='Anything that is not one of the options below is notation, so "d20 -d4" works.'
    )
    parser.add_argument('notation', nargs='*',
                        help='Dice notation; multiple arguments are joined with spaces')
    parser.add_argument('--seed', type=int, help='Seed for repeatable rolls')
    parser.add_argument('--times', type=int, default=1,
                        help='Roll the expression this many times, one total per line')
    parser.add_argument('--show', action='store_true',
                        help='Print the canonical notation alongside each total')
    parser.add_argument('--range', action='store_true', dest='show_range',
                        help='Print the lowest and highest possible totals instead of rolling')
    parser.add_argument('--log-level', type=str.upper, choices=VALID_LOG_LEVELS,
                        help='Logging level')
    return parser


def split_arguments(argv: List[str]) -> Tuple[List[str], List[str]]:
    """
    Separate option tokens from notation tokens, keeping notation order.

    Only the options build_parser() defines are treated as options, so
    notation such as "-d4" or "-2d6" is never mistaken for one. A "--"
    token ends option handling.

    Returns:
        (option tokens, notation tokens)
    """
    options: List[str] = []
    notation: List[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token == '--':
            notation.extend(tokens)
            break
        name = token.split('=', 1)[0]
        if token in VALUE_OPTIONS:
            options.append(token)
            value = next(tokens, None)
            if value is not None:
                options.append(value)
        elif name in VALUE_OPTIONS or token in FLAG_OPTIONS:
            options.append(token)
        else:
            notation.append(token)
    return options, notation


def cmd_range(expression: Expression):
    """Print the bounds of an expression."""
    print(f"{expression} : {expression.min_value()}..{expression.max_value()}")


def cmd_roll(expression: Expression, roller: DiceRoller, times: int, show: bool):
    """Evaluate an expression and print each total."""
    for _ in range(times):
        total = expression.evaluate(roller)
        if show:
            print(f"{expression} = {total}")
        else:
            print(total)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    config = get_config()
    options, notation = split_arguments(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(options + ['--'] + notation)

    setup_logging(level=args.log_level or config.log_level, log_file=config.log_file)

    if args.times < 1:
        print("ERROR: --times must be at least 1")
        return 1

    request = ' '.join(args.notation) if args.notation else config.default_roll
    logger.debug(f"Rolling {request!r}")

    result = parse(request)
    if not result:
        print(f"ERROR: {result.error}")
        return 1

    if args.show_range:
        cmd_range(result.data)
        return 0

    seed = args.seed if args.seed is not None else config.seed
    cmd_roll(result.data, DiceRoller(seed=seed), args.times, args.show)
    return 0


if __name__ == '__main__':
    sys.exit(main())
