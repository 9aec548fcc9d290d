from dataclasses import dataclass


@dataclass(frozen=True)
class CricvizError:
    message: str


@dataclass(frozen=True)
class ValidationError(CricvizError):
    field: str
