"""
Dice notation parser.

Grammar (flat, left-associative, no precedence, no parentheses):

    roll_def := ws* operand (ws* operator ws* operand)* ws*
    operand  := [digits] 'd' [digits]     (count defaults to 1, sides to 6)
              | digits                    (flat integer)
    operator := '+' | '-'

Examples:
    "d"              -> d6
    "3d"             -> 3d6
    "3d12 - 8 + 10d8" -> Add(Subtract(3d12, 8), 10d8)
"""

import logging
from typing import Optional

from rollexpr.core.result import ErrorCode, Result
from .expressions import Add, DiceRoll, Expression, Scalar, Subtract
from .roller import DiceRoller

logger = logging.getLogger(__name__)

DEFAULT_DIE_COUNT = 1
DEFAULT_DIE_SIDES = 6

INVALID_ROLL_DEFINITION = "Invalid roll definition"
MISSING_OPERAND = "Missing operand"
ZERO_SIDED_DIE = "Die must have at least one side"


class ParseError(Exception):
    """Raised when dice notation cannot be parsed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_ROLL_DEFINITION):
        super().__init__(message)
        self.message = message
        self.code = code


class _Cursor:
    """Character cursor with one character of lookahead."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def next(self) -> Optional[str]:
        ch = self.peek()
        if ch is not None:
            self.pos += 1
        return ch

    def skip_whitespace(self):
        while self.peek() is not None and self.peek().isspace():
            self.pos += 1


def _is_digit(ch: Optional[str]) -> bool:
    # ASCII only; str.isdigit() would accept superscripts and other scripts
    return ch is not None and '0' <= ch <= '9'


class DiceParser:
    """Parser for flat dice notation."""

    @classmethod
    def parse(cls, notation: str) -> Expression:
        """
        Parse dice notation into an expression tree.

        Args:
            notation: Dice notation string, e.g. "3d12 - 8 + 10d8"

        Returns:
            Root Expression of the parsed tree

        Raises:
            ParseError: If notation is invalid
        """
        cursor = _Cursor(notation)
        cursor.skip_whitespace()

        result = cls._read_operand(cursor)
        if result is None:
            raise ParseError(INVALID_ROLL_DEFINITION, ErrorCode.INVALID_ROLL_DEFINITION)

        while True:
            cursor.skip_whitespace()
            operator = cursor.next()
            if operator is None:
                return result

            cursor.skip_whitespace()
            rhs = cls._read_operand(cursor)
            if rhs is None:
                raise ParseError(MISSING_OPERAND, ErrorCode.MISSING_OPERAND)

            if operator == '+':
                result = Add(result, rhs)
            elif operator == '-':
                result = Subtract(result, rhs)
            else:
                raise ParseError(INVALID_ROLL_DEFINITION, ErrorCode.INVALID_ROLL_DEFINITION)

    @classmethod
    def validate(cls, notation: str) -> bool:
        """
        Check if notation is valid.

        Args:
            notation: Dice notation string

        Returns:
            True if valid, False otherwise
        """
        try:
            cls.parse(notation)
            return True
        except ParseError:
            return False

    @staticmethod
    def _read_number(cursor: _Cursor, default: int) -> int:
        """Read a run of digits, or return default if there is none."""
        digits = ''
        while _is_digit(cursor.peek()):
            digits += cursor.next()
        return int(digits) if digits else default

    @classmethod
    def _read_operand(cls, cursor: _Cursor) -> Optional[Expression]:
        """Read a die roll or scalar. Returns None if no operand starts here."""
        ch = cursor.peek()
        if not _is_digit(ch) and ch != 'd':
            return None

        die_count = cls._read_number(cursor, DEFAULT_DIE_COUNT)
        if cursor.peek() == 'd':
            cursor.next()
            sides = cls._read_number(cursor, DEFAULT_DIE_SIDES)
            if sides < 1:
                raise ParseError(ZERO_SIDED_DIE, ErrorCode.INVALID_ROLL_DEFINITION)
            return DiceRoll(die_count, sides)

        return Scalar(die_count)


def parse(notation: str) -> Result:
    """
    Parse dice notation without raising.

    Args:
        notation: Dice notation string

    Returns:
        Result.ok(Expression) on success, otherwise Result.fail with the
        error message and an ErrorCode value
    """
    try:
        return Result.ok(DiceParser.parse(notation))
    except ParseError as e:
        logger.debug(f"Failed to parse {notation!r}: {e.message}")
        return Result.fail(e.message, e.code)


def roll(notation: str, roller: Optional[DiceRoller] = None) -> Result:
    """
    Parse notation and evaluate it once.

    Args:
        notation: Dice notation string
        roller: Optional roller for deterministic results

    Returns:
        Result.ok(total) on success, otherwise the parse failure
    """
    parsed = parse(notation)
    if not parsed:
        return parsed
    return Result.ok(parsed.data.evaluate(roller))


__all__ = ['ParseError', 'DiceParser', 'parse', 'roll']
