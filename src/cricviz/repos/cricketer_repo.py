import dataclasses
import sqlite3

from cricviz.domain.cricketer import Cricketer

_COLUMNS = (
    "name",
    "country",
    "role",
    "matches",
    "innings_batted",
    "not_out",
    "runs_scored",
    "balls_faced",
    "high_score",
    "centuries",
    "half_centuries",
    "fours_scored",
    "sixes_scored",
    "innings_bowled",
    "balls_bowled",
    "runs_given",
    "wickets_taken",
)


class SqliteCricketerRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def create(self, cricketer: Cricketer) -> Cricketer:
        placeholders = ", ".join("?" * len(_COLUMNS))
        cursor = self._conn.execute(
            f"INSERT INTO cricketer ({', '.join(_COLUMNS)}) VALUES ({placeholders})",
            self._values(cricketer),
        )
        self._conn.commit()
        return dataclasses.replace(cricketer, id=cursor.lastrowid)

    def find_by_name(self, name: str) -> Cricketer | None:
        row = self._conn.execute("SELECT * FROM cricketer WHERE name = ?", (name,)).fetchone()
        return self._row_to_cricketer(row) if row else None

    def save(self, cricketer: Cricketer) -> Cricketer:
        if cricketer.id is None:
            return self.create(cricketer)
        assignments = ", ".join(f"{col}=?" for col in _COLUMNS)
        self._conn.execute(
            f"UPDATE cricketer SET {assignments} WHERE id = ?",
            (*self._values(cricketer), cricketer.id),
        )
        self._conn.commit()
        return cricketer

    def destroy(self, cricketer: Cricketer) -> None:
        self._conn.execute("DELETE FROM cricketer WHERE id = ?", (cricketer.id,))
        self._conn.commit()

    def all(self) -> list[Cricketer]:
        return self.query()

    def by_country(self, country: str) -> list[Cricketer]:
        return self.query(country=country)

    def by_role(self, role: str) -> list[Cricketer]:
        return self.query(role=role)

    def descending_by_matches(self) -> list[Cricketer]:
        return self.query(by_matches=True)

    def query(
        self,
        *,
        country: str | None = None,
        role: str | None = None,
        by_matches: bool = False,
    ) -> list[Cricketer]:
        clauses: list[str] = []
        params: list[str] = []
        if country is not None:
            clauses.append("country = ?")
            params.append(country)
        if role is not None:
            clauses.append("role = ?")
            params.append(role)
        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""
        order = "matches DESC, id" if by_matches else "id"
        rows = self._conn.execute(f"SELECT * FROM cricketer{where} ORDER BY {order}", params).fetchall()
        return [self._row_to_cricketer(row) for row in rows]

    @staticmethod
    def _values(cricketer: Cricketer) -> tuple[object, ...]:
        return tuple(getattr(cricketer, col) for col in _COLUMNS)

    @staticmethod
    def _row_to_cricketer(row: sqlite3.Row) -> Cricketer:
        return Cricketer(id=row["id"], **{col: row[col] for col in _COLUMNS})
