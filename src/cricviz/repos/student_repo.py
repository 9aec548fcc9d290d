import dataclasses
import sqlite3

from cricviz.domain.student import Student


class SqliteStudentRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def create(self, student: Student) -> Student:
        cursor = self._conn.execute(
            "INSERT INTO student (name, cgpa) VALUES (?, ?)",
            (student.name, student.cgpa),
        )
        self._conn.commit()
        return dataclasses.replace(student, id=cursor.lastrowid)

    def get_by_id(self, student_id: int) -> Student | None:
        row = self._conn.execute("SELECT * FROM student WHERE id = ?", (student_id,)).fetchone()
        return self._row_to_student(row) if row else None

    def save(self, student: Student) -> Student:
        if student.id is None:
            return self.create(student)
        self._conn.execute(
            "UPDATE student SET name = ?, cgpa = ? WHERE id = ?",
            (student.name, student.cgpa, student.id),
        )
        self._conn.commit()
        return student

    def destroy(self, student: Student) -> None:
        self._conn.execute("DELETE FROM student WHERE id = ?", (student.id,))
        self._conn.commit()

    def all(self) -> list[Student]:
        rows = self._conn.execute("SELECT * FROM student ORDER BY id").fetchall()
        return [self._row_to_student(row) for row in rows]

    @staticmethod
    def _row_to_student(row: sqlite3.Row) -> Student:
        return Student(id=row["id"], name=row["name"], cgpa=row["cgpa"])
