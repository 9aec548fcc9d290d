from typing import Protocol, runtime_checkable

from cricviz.domain.cricketer import Cricketer
from cricviz.domain.student import Student


@runtime_checkable
class CricketerRepo(Protocol):
    def create(self, cricketer: Cricketer) -> Cricketer: ...

    def find_by_name(self, name: str) -> Cricketer | None: ...

    def save(self, cricketer: Cricketer) -> Cricketer: ...

    def destroy(self, cricketer: Cricketer) -> None: ...

    def all(self) -> list[Cricketer]: ...

    def by_country(self, country: str) -> list[Cricketer]: ...

    def by_role(self, role: str) -> list[Cricketer]: ...

    def descending_by_matches(self) -> list[Cricketer]: ...

    def query(
        self,
        *,
        country: str | None = None,
        role: str | None = None,
        by_matches: bool = False,
    ) -> list[Cricketer]: ...


@runtime_checkable
class StudentRepo(Protocol):
    def create(self, student: Student) -> Student: ...

    def get_by_id(self, student_id: int) -> Student | None: ...

    def save(self, student: Student) -> Student: ...

    def destroy(self, student: Student) -> None: ...

    def all(self) -> list[Student]: ...
