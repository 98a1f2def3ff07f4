"""Pipeline stage models."""

from enum import StrEnum


class PipelineStage(StrEnum):
    """Stages of a render run, in execution order."""

    VALIDATION = "validation"
    CAPTIONS = "captions"
    PERSISTENCE = "persistence"
    RENDERING = "rendering"
