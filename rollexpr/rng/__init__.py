"""
RNG - dice notation parsing and evaluation.

Provides:
- Dice notation parsing ("d", "3d12 - 8 + 10d8", ...)
- Expression tree with evaluation and canonical rendering
- Seedable dice roller for deterministic rolls
"""

from .dice_parser import DiceParser, ParseError, parse, roll
from .expressions import Add, BinaryOperation, DiceRoll, Expression, Scalar, Subtract
from .roller import DiceRoller, get_default_roller, reset_default_roller, roll_die

__all__ = [
    'Add',
    'BinaryOperation',
    'DiceParser',
    'DiceRoll',
    'DiceRoller',
    'Expression',
    'ParseError',
    'Scalar',
    'Subtract',
    'get_default_roller',
    'parse',
    'reset_default_roller',
    'roll',
    'roll_die',
]
