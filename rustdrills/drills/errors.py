"""Error handling drills: nametags, token purchases and validated integers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import IO, Any

_DIGITS = frozenset("0123456789")
_I32 = 32
_I64 = 64

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, strictly.

    No surrounding whitespace, underscores or non-ASCII digits are accepted;
    the messages match those of the standard integer parser.
    """
    if not text:
        raise ValueError("cannot parse integer from empty string")
    sign, digits = (text[0], text[1:]) if text[0] in "+-" else ("+", text)
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(digits) if sign == "+" else -int(digits)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a nametag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed to buy the typed-in quantity of items, fee included."""
    qty = _parse_int(item_quantity, _I32)
    cost = qty * COST_PER_ITEM + PROCESSING_FEE
    limit = 1 << (_I32 - 1)
    if not -limit <= cost < limit:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def purchase_message(tokens: int, item_quantity: str) -> str:
    """What the player is told after trying to buy ``item_quantity`` items."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


def pop_report(items: list[Any]) -> list[str]:
    """Describe the last two items of ``items``, skipping those that are missing."""
    remaining = list(items)
    labels = ("The last item in the list is", "The second-to-last item in the list is")
    report = []
    for label in labels:
        if not remaining:
            break
        report.append(f"{label} {remaining.pop()!r}")
    return report


class CreationKind(Enum):
    """Why a positive nonzero integer could not be made."""

    NEGATIVE = "Negative"
    ZERO = "Zero"


class CreationError(ValueError):
    """A value was not a positive nonzero integer."""

    def __init__(self, kind: CreationKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise CreationError(CreationKind.ZERO)
        if self.value < 0:
            raise CreationError(CreationKind.NEGATIVE)


def read_and_validate(stream: IO[Any]) -> PositiveNonzeroInteger:
    """Read one line from ``stream`` and turn it into a positive nonzero integer.

    Reading errors, parse errors and validation errors all propagate.
    """
    line = stream.readline()
    if isinstance(line, (bytes, bytearray)):
        line = bytes(line).decode("utf-8")
    num = _parse_int(line.strip(), _I64)
    return PositiveNonzeroInteger(num)