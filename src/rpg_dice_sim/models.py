from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, TypeAlias


Mode: TypeAlias = Literal["none", "advantage", "disadvantage"]
Sign: TypeAlias = Literal[1, -1]

MODES: tuple[Mode, ...] = ("none", "advantage", "disadvantage")


@dataclass(frozen=True)
class DiceTerm:
    count: int
    sides: int
    sign: Sign = 1

    def __str__(self) -> str:
        return f"{'+' if self.sign >= 0 else '-'}{self.count}d{self.sides}"


@dataclass(frozen=True)
class FlatMod:
    value: int
    sign: Sign = 1

    @property
    def signed_value(self) -> int:
        return self.sign * self.value


@dataclass(frozen=True)
class Expression:
    dice: tuple[DiceTerm, ...]
    flats: tuple[FlatMod, ...]


@dataclass(frozen=True)
class RollDetail:
    term: DiceTerm
    rolls: tuple[int, ...]
    subtotal: int

    def __str__(self) -> str:
        return f"{self.term}: {list(self.rolls)} = {self.subtotal}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "sign": self.term.sign,
            "count": self.term.count,
            "sides": self.term.sides,
            "rolls": list(self.rolls),
            "subtotal": self.subtotal,
        }


@dataclass(frozen=True)
class RollResult:
    details: tuple[RollDetail, ...]
    flat_total: int
    total: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "details": [d.to_dict() for d in self.details],
            "flat_total": self.flat_total,
            "total": self.total,
        }


@dataclass(frozen=True)
class Stats:
    count: int
    min: int
    max: int
    mean: float

    def to_dict(self) -> dict[str, Any]:
        return {"count": self.count, "min": self.min, "max": self.max, "mean": self.mean}
