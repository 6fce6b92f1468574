"""Struct drills: a named-field record, a tuple record and a unit value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass
class ColorClassicStruct:
    """A colour with named fields."""

    name: str
    hex: str


class ColorTupleStruct(NamedTuple):
    """A colour addressed by position: name, then hex code."""

    name: str
    hex: str


class UnitStruct:
    """A value carrying no data."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitStruct):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(UnitStruct)

    def __repr__(self) -> str:
        return "UnitStruct"