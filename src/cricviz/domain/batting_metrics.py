"""Derived batting statistics computed from a player's aggregate counters.

Both functions return ``None`` when the stored counters are incomplete, so
callers can tell "no data" apart from a genuine zero.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cricviz.domain.cricketer import Cricketer


def compute_batting_average(record: Cricketer) -> float | int | None:
    """Runs scored per dismissal.

    A player who has never been dismissed has no defined average; by
    convention their raw run total is returned instead. More not-outs than
    innings (left by not-out rows with no balls faced) also gives ``None``.
    """
    if record.runs_scored is None or record.innings_batted is None or record.not_out is None:
        return None

    if record.not_out > record.innings_batted:
        return None

    if record.innings_batted == record.not_out:
        return record.runs_scored

    return record.runs_scored / (record.innings_batted - record.not_out)


def compute_batting_strike_rate(record: Cricketer) -> float | None:
    """Runs scored per 100 balls faced."""
    if record.runs_scored is None or record.balls_faced is None or record.balls_faced == 0:
        return None

    return (record.runs_scored * 100) / record.balls_faced
