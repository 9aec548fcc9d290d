from cricviz.services.statistics_engine import StatisticsEngine
from cricviz.services.student_registry import StudentRegistry

__all__ = ["StatisticsEngine", "StudentRegistry"]
