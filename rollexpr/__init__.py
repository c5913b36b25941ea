"""
rollexpr - dice notation parsing, rolling and canonical rendering.

Usage:
    from rollexpr import parse

    result = parse("3d12 - 8 + 10d8")
    if result:
        print(result.data)             # 3d12 - 8 + 10d8
        print(result.data.evaluate())  # e.g. 41
    else:
        print(f"ERROR: {result.error}")
"""

from rollexpr.core.result import ErrorCode, Result
from rollexpr.rng import (
    Add,
    DiceParser,
    DiceRoll,
    DiceRoller,
    Expression,
    ParseError,
    Scalar,
    Subtract,
    parse,
    roll,
)

__version__ = "0.1.0"

__all__ = [
    'Add',
    'DiceParser',
    'DiceRoll',
    'DiceRoller',
    'ErrorCode',
    'Expression',
    'ParseError',
    'Result',
    'Scalar',
    'Subtract',
    'parse',
    'roll',
]
