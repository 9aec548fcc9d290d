import csv
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from cricviz.domain.scorecard import MAX_BATTERS, MIN_BATTERS, BattingRow, BowlingRow
from cricviz.exceptions import CricvizException

logger = logging.getLogger(__name__)

BATTING_COLUMNS = ("name", "dismissed", "runs", "balls_faced", "fours", "sixes")
BOWLING_COLUMNS = ("name", "balls_bowled", "maidens", "runs_given", "wickets")

_TRUE = frozenset({"true", "yes", "y", "1", "out"})
_FALSE = frozenset({"false", "no", "n", "0", "not out"})


class ScorecardFormatError(CricvizException):
    def __init__(self, path: Path, line: int, column: str, reason: str) -> None:
        self.path = path
        self.line = line
        self.column = column
        super().__init__(f"{path}:{line}: column {column!r}: {reason}")


def read_batting_scorecard(path: str | Path, *, encoding: str = "utf-8") -> list[BattingRow]:
    rows = [
        BattingRow(
            name=fields["name"],
            dismissed=fields["dismissed"],
            runs=fields["runs"],
            balls_faced=fields["balls_faced"],
            fours=fields["fours"],
            sixes=fields["sixes"],
        )
        for fields in _read(Path(path), BATTING_COLUMNS, _parse_batting_value, encoding)
    ]
    if not MIN_BATTERS <= len(rows) <= MAX_BATTERS:
        logger.warning("Batting scorecard %s has %d rows, expected %d-%d", path, len(rows), MIN_BATTERS, MAX_BATTERS)
    return rows


def read_bowling_scorecard(path: str | Path, *, encoding: str = "utf-8") -> list[BowlingRow]:
    return [
        BowlingRow(
            name=fields["name"],
            balls_bowled=fields["balls_bowled"],
            maidens=fields["maidens"],
            runs_given=fields["runs_given"],
            wickets=fields["wickets"],
        )
        for fields in _read(Path(path), BOWLING_COLUMNS, _parse_bowling_value, encoding)
    ]


def _read(
    path: Path,
    columns: tuple[str, ...],
    parse: Callable[[str, str], Any],
    encoding: str,
) -> list[dict[str, Any]]:
    logger.debug("Reading scorecard %s", path)
    parsed: list[dict[str, Any]] = []
    with open(path, encoding=encoding, newline="") as f:
        reader = csv.DictReader(f)
        missing = [c for c in columns if c not in (reader.fieldnames or [])]
        if missing:
            raise ScorecardFormatError(path, 1, missing[0], "missing column")
        for record in reader:
            fields: dict[str, Any] = {}
            for column in columns:
                raw = (record.get(column) or "").strip()
                try:
                    fields[column] = parse(column, raw)
                except ValueError as e:
                    raise ScorecardFormatError(path, reader.line_num, column, str(e)) from e
            parsed.append(fields)
    logger.debug("Read %d rows from %s", len(parsed), path)
    return parsed


def _parse_batting_value(column: str, raw: str) -> Any:
    if column == "name":
        return _parse_name(raw)
    if column == "dismissed":
        return _parse_bool(raw)
    return _parse_count(raw)


def _parse_bowling_value(column: str, raw: str) -> Any:
    if column == "name":
        return _parse_name(raw)
    return _parse_count(raw)


def _parse_name(raw: str) -> str:
    if not raw:
        raise ValueError("empty player name")
    return raw


def _parse_bool(raw: str) -> bool:
    value = raw.lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"expected a yes/no value, got {raw!r}")


def _parse_count(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"expected a whole number, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"expected a non-negative number, got {value}")
    return value
