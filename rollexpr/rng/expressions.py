"""
Expression tree for parsed dice notation.

A parsed roll such as "3d12 - 8 + 10d8" becomes a left-leaning chain:

    Add(Subtract(DiceRoll(3, 12), Scalar(8)), DiceRoll(10, 8))

Every node can evaluate itself (rolling any dice it holds) and render
itself back to canonical notation. Nodes are immutable; evaluation is not
cached, so evaluating the same tree twice rolls the dice twice.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .roller import DiceRoller, get_default_roller


class Expression(ABC):
    """Base class for all expression nodes."""

    @abstractmethod
    def evaluate(self, roller: Optional[DiceRoller] = None) -> int:
        """
        Compute the value of this expression.

        Args:
            roller: Source of randomness for dice. Defaults to the
                    process-wide roller.

        Returns:
            Integer total
        """

    @abstractmethod
    def render(self) -> str:
        """Render canonical notation. Never rolls dice."""

    @abstractmethod
    def min_value(self) -> int:
        """Smallest value evaluate() can return."""

    @abstractmethod
    def max_value(self) -> int:
        """Largest value evaluate() can return."""

    def iter_dice(self) -> Iterator['DiceRoll']:
        """Yield the dice leaves of this tree, left to right."""
        return iter(())

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Scalar(Expression):
    """A flat integer term."""
    value: int

    def evaluate(self, roller: Optional[DiceRoller] = None) -> int:
        return self.value

    def render(self) -> str:
        return str(self.value)

    def min_value(self) -> int:
        return self.value

    def max_value(self) -> int:
        return self.value


@dataclass(frozen=True)
class DiceRoll(Expression):
    """`count` dice with `sides` faces each, summed."""
    count: int
    sides: int

    def __post_init__(self):
        if self.count < 0:
            raise ValueError(f"Dice count cannot be negative, got {self.count}")
        if self.sides < 1:
            raise ValueError(f"Die must have at least one side, got {self.sides}")

    def evaluate(self, roller: Optional[DiceRoller] = None) -> int:
        roller = roller or get_default_roller()
        return sum(roller.roll_die(self.sides) for _ in range(self.count))

    def render(self) -> str:
        if self.count == 1:
            return f"d{self.sides}"
        return f"{self.count}d{self.sides}"

    def min_value(self) -> int:
        return self.count

    def max_value(self) -> int:
        return self.count * self.sides

    def iter_dice(self) -> Iterator['DiceRoll']:
        yield self


@dataclass(frozen=True, eq=False, repr=False)
class BinaryOperation(Expression):
    """
    Shared shape of Add and Subtract: two exclusively owned children.

    Parsed trees lean left, one node per term, so a long roll is a deep
    chain of lhs links. Every tree operation walks that chain in a loop
    rather than recursing into lhs.
    """
    lhs: Expression
    rhs: Expression

    operator = '?'

    def apply(self, left: int, right: int) -> int:
        raise NotImplementedError

    def apply_bounds(self, low: int, high: int, rhs: Expression) -> Tuple[int, int]:
        raise NotImplementedError

    def chain(self) -> Tuple[Expression, List['BinaryOperation']]:
        """Return the leftmost operand and the operations above it, innermost first."""
        nodes = []
        node: Expression = self
        while isinstance(node, BinaryOperation):
            nodes.append(node)
            node = node.lhs
        nodes.reverse()
        return node, nodes

    def evaluate(self, roller: Optional[DiceRoller] = None) -> int:
        first, nodes = self.chain()
        total = first.evaluate(roller)
        for node in nodes:
            total = node.apply(total, node.rhs.evaluate(roller))
        return total

    def render(self) -> str:
        first, nodes = self.chain()
        parts = [first.render()]
        for node in nodes:
            parts.append(node.operator)
            parts.append(node.rhs.render())
        return ' '.join(parts)

    def bounds(self) -> Tuple[int, int]:
        first, nodes = self.chain()
        low, high = first.min_value(), first.max_value()
        for node in nodes:
            low, high = node.apply_bounds(low, high, node.rhs)
        return low, high

    def min_value(self) -> int:
        return self.bounds()[0]

    def max_value(self) -> int:
        return self.bounds()[1]

    def iter_dice(self) -> Iterator['DiceRoll']:
        first, nodes = self.chain()
        yield from first.iter_dice()
        for node in nodes:
            yield from node.rhs.iter_dice()

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        first, nodes = self.chain()
        other_first, other_nodes = other.chain()
        return (
            first == other_first
            and len(nodes) == len(other_nodes)
            and all(type(a) is type(b) and a.rhs == b.rhs for a, b in zip(nodes, other_nodes))
        )

    def __hash__(self):
        first, nodes = self.chain()
        return hash((first, tuple((node.operator, node.rhs) for node in nodes)))

    def __repr__(self) -> str:
        first, nodes = self.chain()
        text = repr(first)
        for node in nodes:
            text = f"{type(node).__name__}(lhs={text}, rhs={node.rhs!r})"
        return text


class Add(BinaryOperation):
    operator = '+'

    def apply(self, left: int, right: int) -> int:
        return left + right

    def apply_bounds(self, low: int, high: int, rhs: Expression) -> Tuple[int, int]:
        return low + rhs.min_value(), high + rhs.max_value()


class Subtract(BinaryOperation):
    operator = '-'

    def apply(self, left: int, right: int) -> int:
        return left - right

    def apply_bounds(self, low: int, high: int, rhs: Expression) -> Tuple[int, int]:
        return low - rhs.max_value(), high - rhs.min_value()


__all__ = ['Expression', 'Scalar', 'DiceRoll', 'BinaryOperation', 'Add', 'Subtract']
