"""
Result object for error handling throughout rollexpr.

Operations that can fail on user input return a Result object instead of
raising exceptions. The caller decides what to do with a failure.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorCode(Enum):
    """
    Standard error codes for Result objects.

    Provides machine-readable error classification for better error handling.
    """

    # Parse errors
    INVALID_ROLL_DEFINITION = "invalid_roll_definition"
    MISSING_OPERAND = "missing_operand"

    # Request errors
    INVALID_INPUT = "invalid_input"

    # Generic errors
    UNEXPECTED_ERROR = "unexpected_error"

    def __str__(self) -> str:
        """Return the error code value."""
        return self.value


@dataclass
class Result:
    """
    Represents the result of an operation that can succeed or fail.

    Attributes:
        success: Whether the operation succeeded
        data: The result data if successful
        error: Error message if failed
        error_code: Machine-readable error code if failed

    Examples:
        >>> result = Result.ok(17)
        >>> if result.success:
        ...     print(result.data)

        >>> result = Result.fail("Missing operand", ErrorCode.MISSING_OPERAND)
        >>> if not result.success:
        ...     print(f"ERROR: {result.error}")
    """
    success: bool
    data: Any = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @staticmethod
    def ok(data: Any = None) -> 'Result':
        """
        Create a successful result.

        Args:
            data: Optional data to return

        Returns:
            Result with success=True
        """
        return Result(success=True, data=data)

    @staticmethod
    def fail(error: str, code: Optional[str | ErrorCode] = None) -> 'Result':
        """
        Create a failed result.

        Args:
            error: Human-readable error message
            code: Machine-readable error code (ErrorCode enum or string)

        Returns:
            Result with success=False
        """
        error_code_str = code.value if isinstance(code, ErrorCode) else code
        return Result(success=False, error=error, error_code=error_code_str)

    def __bool__(self) -> bool:
        """Allow using Result in boolean context: if result: ..."""
        return self.success
