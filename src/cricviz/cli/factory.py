from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from cricviz.config import create_config, resolve_db_path
from cricviz.db.connection import create_connection
from cricviz.repos.cricketer_repo import SqliteCricketerRepo
from cricviz.repos.student_repo import SqliteStudentRepo
from cricviz.services.statistics_engine import StatisticsEngine
from cricviz.services.student_registry import StudentRegistry


@dataclass(frozen=True)
class CricvizContext:
    engine: StatisticsEngine
    cricketer_repo: SqliteCricketerRepo
    registry: StudentRegistry
    scorecard_encoding: str = "utf-8"


@contextmanager
def build_context(db_path: str | None = None) -> Iterator[CricvizContext]:
    """Composition root: opens the DB, wires repos and services, yields context, closes DB."""
    cfg = create_config(db_path=db_path)
    conn = create_connection(resolve_db_path(cfg))
    try:
        cricketer_repo = SqliteCricketerRepo(conn)
        yield CricvizContext(
            engine=StatisticsEngine(cricketer_repo),
            cricketer_repo=cricketer_repo,
            registry=StudentRegistry(SqliteStudentRepo(conn)),
            scorecard_encoding=str(cfg["scorecard.encoding"]),
        )
    finally:
        conn.close()
