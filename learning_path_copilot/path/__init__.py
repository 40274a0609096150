"""
Learning path generation: request building, the generation client and the
view-state that tracks the rendered path.
"""

from learning_path_copilot.path.schemas import (
    Language,
    ProficiencyLevel,
    LearningPathInput,
    Step,
    LearningPath,
)
from learning_path_copilot.path.request_builder import PathRequest, build_path_request, LEARNING_PATH_SCHEMA
from learning_path_copilot.path.parsers import parse_learning_path
from learning_path_copilot.path.generator import PathGenerator
from learning_path_copilot.path.view_state import LearningPathViewState, PathStatus, compute_progress

__all__ = [
    "Language",
    "ProficiencyLevel",
    "LearningPathInput",
    "Step",
    "LearningPath",
    "PathRequest",
    "build_path_request",
    "LEARNING_PATH_SCHEMA",
    "parse_learning_path",
    "PathGenerator",
    "LearningPathViewState",
    "PathStatus",
    "compute_progress",
]
