import dataclasses
import logging
from collections.abc import Iterable

from cricviz.domain.batting_metrics import compute_batting_average, compute_batting_strike_rate
from cricviz.domain.cricketer import Cricketer
from cricviz.domain.scorecard import BattingRow, BowlingRow, InningsSummary
from cricviz.repos.errors import PlayerNotFoundError
from cricviz.repos.protocols import CricketerRepo
from cricviz.services.reference_players import CLASSICAL_BATTERS

logger = logging.getLogger(__name__)


class StatisticsEngine:
    """Maintains a player's aggregate counters and derives batting metrics from them.

    Every row is saved as soon as it is applied. A missing player aborts the
    remaining rows of the call but leaves earlier rows in place.
    """

    def __init__(self, repo: CricketerRepo) -> None:
        self._repo = repo

    def batting_average(self, name: str) -> float | int | None:
        return compute_batting_average(self._find(name))

    def batting_strike_rate(self, name: str) -> float | None:
        return compute_batting_strike_rate(self._find(name))

    def apply_innings(
        self,
        batting_rows: Iterable[BattingRow],
        bowling_rows: Iterable[BowlingRow] = (),
    ) -> InningsSummary:
        batted = 0
        for row in batting_rows:
            self._repo.save(_apply_batting_row(self._find(row.name), row))
            logger.debug("Applied batting row for %s: %d (%d)", row.name, row.runs, row.balls_faced)
            batted += 1

        bowled = 0
        for row in bowling_rows:
            self._repo.save(_apply_bowling_row(self._find(row.name), row))
            logger.debug("Applied bowling row for %s: %d/%d", row.name, row.wickets, row.runs_given)
            bowled += 1

        logger.info("Applied innings: %d batting rows, %d bowling rows", batted, bowled)
        return InningsSummary(batting_rows_applied=batted, bowling_rows_applied=bowled)

    def remove_player(self, name: str) -> None:
        self._repo.destroy(self._find(name))
        logger.info("Removed player %s", name)

    def seed_reference_players(self) -> list[Cricketer]:
        created = [self._repo.create(player) for player in CLASSICAL_BATTERS]
        logger.info("Seeded %d reference players", len(created))
        return created

    def _find(self, name: str) -> Cricketer:
        player = self._repo.find_by_name(name)
        if player is None:
            raise PlayerNotFoundError(name)
        return player


def _apply_batting_row(player: Cricketer, row: BattingRow) -> Cricketer:
    not_out = _count(player.not_out)
    if not row.dismissed:
        not_out += 1

    centuries = _count(player.centuries)
    half_centuries = _count(player.half_centuries)
    if row.runs >= 100:
        centuries += 1
    elif row.runs >= 50:
        half_centuries += 1

    innings_batted = _count(player.innings_batted)
    # an innings counts only once the batter has faced a ball
    if row.balls_faced:
        innings_batted += 1

    return dataclasses.replace(
        player,
        not_out=not_out,
        runs_scored=_count(player.runs_scored) + row.runs,
        high_score=max(_count(player.high_score), row.runs),
        centuries=centuries,
        half_centuries=half_centuries,
        innings_batted=innings_batted,
        balls_faced=_count(player.balls_faced) + row.balls_faced,
        fours_scored=_count(player.fours_scored) + row.fours,
        sixes_scored=_count(player.sixes_scored) + row.sixes,
    )


def _apply_bowling_row(player: Cricketer, row: BowlingRow) -> Cricketer:
    return dataclasses.replace(
        player,
        innings_bowled=_count(player.innings_bowled) + 1,
        balls_bowled=_count(player.balls_bowled) + row.balls_bowled,
        runs_given=_count(player.runs_given) + row.runs_given,
        wickets_taken=_count(player.wickets_taken) + row.wickets,
    )


def _count(value: int | None) -> int:
    return value if value is not None else 0
