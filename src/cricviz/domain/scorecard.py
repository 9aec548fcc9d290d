from dataclasses import dataclass, fields
from typing import Self

MIN_BATTERS = 2
MAX_BATTERS = 11


def _check_non_negative(row: object) -> None:
    for f in fields(row):  # type: ignore[arg-type]
        value = getattr(row, f.name)
        if isinstance(value, int) and not isinstance(value, bool) and value < 0:
            raise ValueError(f"{type(row).__name__}.{f.name} must be non-negative, got {value}")


@dataclass(frozen=True)
class BattingRow:
    name: str
    dismissed: bool
    runs: int
    balls_faced: int
    fours: int = 0
    sixes: int = 0

    def __post_init__(self) -> None:
        _check_non_negative(self)

    @classmethod
    def from_tuple(cls, row: tuple[str, bool, int, int, int, int]) -> Self:
        name, dismissed, runs, balls_faced, fours, sixes = row
        return cls(
            name=name,
            dismissed=dismissed,
            runs=runs,
            balls_faced=balls_faced,
            fours=fours,
            sixes=sixes,
        )


@dataclass(frozen=True)
class BowlingRow:
    name: str
    balls_bowled: int
    maidens: int
    runs_given: int
    wickets: int

    def __post_init__(self) -> None:
        _check_non_negative(self)

    @classmethod
    def from_tuple(cls, row: tuple[str, int, int, int, int]) -> Self:
        name, balls_bowled, maidens, runs_given, wickets = row
        return cls(
            name=name,
            balls_bowled=balls_bowled,
            maidens=maidens,
            runs_given=runs_given,
            wickets=wickets,
        )


@dataclass(frozen=True)
class InningsSummary:
    batting_rows_applied: int
    bowling_rows_applied: int
