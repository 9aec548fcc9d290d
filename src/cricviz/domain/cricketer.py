from dataclasses import dataclass

from cricviz.domain.batting_metrics import compute_batting_average, compute_batting_strike_rate

ROLES = ("Batter", "Bowler", "Wicketkeeper", "All-rounder")


@dataclass(frozen=True)
class Cricketer:
    name: str
    id: int | None = None
    country: str | None = None
    role: str | None = None
    matches: int | None = None
    innings_batted: int | None = None
    not_out: int | None = None
    runs_scored: int | None = None
    balls_faced: int | None = None
    high_score: int | None = None
    centuries: int | None = None
    half_centuries: int | None = None
    fours_scored: int | None = None
    sixes_scored: int | None = None
    innings_bowled: int | None = None
    balls_bowled: int | None = None
    runs_given: int | None = None
    wickets_taken: int | None = None

    @property
    def batting_average(self) -> float | int | None:
        return compute_batting_average(self)

    @property
    def batting_strike_rate(self) -> float | None:
        return compute_batting_strike_rate(self)
