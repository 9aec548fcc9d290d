import sqlite3

from cricviz.domain.cricketer import Cricketer
from cricviz.repos.cricketer_repo import SqliteCricketerRepo


def make_cricketer(name: str = "Test Player", **overrides: object) -> Cricketer:
    """Build a cricketer with every counter populated.

    Counters default to a mid-career batter who also bowls occasionally;
    pass keyword overrides to change individual fields.
    """
    defaults: dict[str, object] = {
        "country": "India",
        "role": "Batter",
        "matches": 50,
        "innings_batted": 80,
        "not_out": 10,
        "runs_scored": 1000,
        "balls_faced": 2000,
        "high_score": 150,
        "centuries": 5,
        "half_centuries": 3,
        "fours_scored": 100,
        "sixes_scored": 10,
        "innings_bowled": 5,
        "balls_bowled": 300,
        "runs_given": 200,
        "wickets_taken": 4,
    }
    defaults.update(overrides)
    return Cricketer(name=name, **defaults)  # type: ignore[arg-type]


def seed_cricketer(conn: sqlite3.Connection, name: str = "Test Player", **overrides: object) -> Cricketer:
    return SqliteCricketerRepo(conn).create(make_cricketer(name, **overrides))
