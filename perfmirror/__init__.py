"""IOOI performance scoring: weekly logs to scores, bands and insights."""

from .evaluation import EvaluationInput, EvaluationReport, build_evaluation_input, evaluate

__all__ = [
    "EvaluationInput",
    "EvaluationReport",
    "build_evaluation_input",
    "evaluate",
]
