"""
Integer calculator.

Provides two pure operations, add and multiply. Python integers never
overflow, so by default results are returned as-is. A bounded overflow
policy models fixed-width signed integers:

- wrap: two's-complement wraparound
- saturate: clamp to the representable range
- checked: raise IntegerOverflowError
"""

import logging
from typing import Optional

from targetapp.src.config import (
    Config,
    UNBOUNDED,
    WRAP,
    SATURATE,
    CHECKED,
    DEFAULT_BIT_WIDTH,
)

logger = logging.getLogger(__name__)


class OperandError(TypeError):
    """Raised when an operand is not an integer or does not fit the bit width."""


class IntegerOverflowError(ArithmeticError):
    """Raised under the 'checked' policy when a result is out of range."""


def int_range(bit_width: int) -> tuple[int, int]:
    """Return the (min, max) of a signed integer of the given width."""
    half = 1 << (bit_width - 1)
    return -half, half - 1


class Calculator:
    """
    Stateless integer calculator.

    Instances only hold their overflow settings, so a single instance can be
    shared freely.
    """

    def __init__(self, overflow_policy: str = UNBOUNDED, bit_width: int = DEFAULT_BIT_WIDTH):
        self._config = Config(overflow_policy=overflow_policy, bit_width=bit_width).validate()
        self._min, self._max = int_range(self._config.bit_width)

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "Calculator":
        config = config or Config()
        return cls(overflow_policy=config.overflow_policy, bit_width=config.bit_width)

    @property
    def overflow_policy(self) -> str:
        return self._config.overflow_policy

    @property
    def bit_width(self) -> int:
        return self._config.bit_width

    def add(self, a: int, b: int) -> int:
        """Return a + b."""
        self._check_operands(a, b)
        return self._apply_policy("add", a + b)

    def multiply(self, a: int, b: int) -> int:
        """Return a * b."""
        self._check_operands(a, b)
        return self._apply_policy("multiply", a * b)

    def _check_operands(self, *operands) -> None:
        for value in operands:
            # bool is an int subclass but never a meaningful operand
            if isinstance(value, bool) or not isinstance(value, int):
                raise OperandError(
                    f"Operand must be an integer, got {type(value).__name__}: {value!r}"
                )
            if self._config.is_bounded and not self._min <= value <= self._max:
                raise OperandError(
                    f"Operand {value} does not fit in a signed "
                    f"{self.bit_width}-bit integer [{self._min}, {self._max}]"
                )

    def _apply_policy(self, operation: str, result: int) -> int:
        policy = self._config.overflow_policy
        if policy == UNBOUNDED or self._min <= result <= self._max:
            return result

        if policy == WRAP:
            span = 1 << self.bit_width
            wrapped = (result - self._min) % span + self._min
            logger.debug(f"{operation}: {result} wrapped to {wrapped} ({self.bit_width}-bit)")
            return wrapped

        if policy == SATURATE:
            clamped = self._max if result > self._max else self._min
            logger.debug(f"{operation}: {result} saturated to {clamped} ({self.bit_width}-bit)")
            return clamped

        if policy == CHECKED:
            raise IntegerOverflowError(
                f"{operation} overflow: result {result} does not fit in a signed "
                f"{self.bit_width}-bit integer [{self._min}, {self._max}]"
            )

        raise AssertionError(f"Unhandled overflow policy: {policy}")
