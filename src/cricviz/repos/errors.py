from cricviz.exceptions import CricvizException


class PlayerNotFoundError(CricvizException):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)


class StudentNotFoundError(CricvizException):
    def __init__(self, student_id: int) -> None:
        self.student_id = student_id
        super().__init__(f"No student with id {student_id}")
