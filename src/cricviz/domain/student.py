import math
from dataclasses import dataclass

from cricviz.domain.errors import ValidationError
from cricviz.domain.result import Err, Ok, Result

CGPA_MIN = 0.0
CGPA_MAX = 10.0


@dataclass(frozen=True)
class Student:
    name: str
    cgpa: float | None
    id: int | None = None


def validate_student(student: Student) -> Result[Student, ValidationError]:
    """Check that the student's CGPA is a number on the 0-10 scale."""
    cgpa = student.cgpa
    if cgpa is None or isinstance(cgpa, bool) or not isinstance(cgpa, int | float) or math.isnan(cgpa):
        return Err(ValidationError(message="cgpa is not a number", field="cgpa"))
    if cgpa < CGPA_MIN or cgpa > CGPA_MAX:
        return Err(
            ValidationError(
                message=f"cgpa must be between {CGPA_MIN} and {CGPA_MAX}, got {cgpa}",
                field="cgpa",
            )
        )
    return Ok(student)
