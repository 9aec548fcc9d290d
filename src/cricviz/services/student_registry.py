import dataclasses
import logging

from cricviz.domain.errors import ValidationError
from cricviz.domain.result import Err, Ok, Result
from cricviz.domain.student import Student, validate_student
from cricviz.repos.errors import StudentNotFoundError
from cricviz.repos.protocols import StudentRepo

logger = logging.getLogger(__name__)


class StudentRegistry:
    def __init__(self, repo: StudentRepo) -> None:
        self._repo = repo

    def enroll(self, name: str, cgpa: float | None) -> Result[Student, ValidationError]:
        match validate_student(Student(name=name, cgpa=cgpa)):
            case Ok(student):
                created = self._repo.create(student)
                logger.info("Enrolled student %s (id=%s)", created.name, created.id)
                return Ok(created)
            case Err(e):
                logger.debug("Rejected enrolment for %s: %s", name, e.message)
                return Err(e)

    def update_cgpa(self, student_id: int, cgpa: float | None) -> Result[Student, ValidationError]:
        existing = self._get(student_id)
        match validate_student(dataclasses.replace(existing, cgpa=cgpa)):
            case Ok(student):
                return Ok(self._repo.save(student))
            case Err(e):
                return Err(e)

    def withdraw(self, student_id: int) -> None:
        self._repo.destroy(self._get(student_id))
        logger.info("Withdrew student id=%d", student_id)

    def list_students(self) -> list[Student]:
        return self._repo.all()

    def _get(self, student_id: int) -> Student:
        student = self._repo.get_by_id(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        return student
