"""
Pydantic models for learning path requests and responses.

Wire field names follow the JSON the model is asked to produce (camelCase);
Python attributes are snake_case and both spellings are accepted on input.
"""
from enum import Enum
from typing import Any, Dict, List
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Language(str, Enum):
    """Display and response languages."""
    EN = "en"
    AR = "ar"


class ProficiencyLevel(str, Enum):
    """Learner's self-assessed starting level."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class LearningPathInput(BaseModel):
    """Form values submitted for one generation request."""
    model_config = ConfigDict(frozen=True)

    goal: str = Field(description="What the learner wants to achieve")
    deadline: str = Field("", description="Target date, passed through as typed")
    level: ProficiencyLevel = ProficiencyLevel.BEGINNER
    availability: int = Field(10, ge=1, le=40, description="Hours per week")

    @field_validator("goal")
    @classmethod
    def goal_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("goal must not be empty")
        return value


class Step(BaseModel):
    """One unit of the curriculum, tied to an external course or module."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    description: str
    duration: str
    academy_name: str = Field(alias="academyName")
    course_link: str = Field(alias="courseLink")
    is_university_module: bool = Field(alias="isUniversityModule")


class LearningPath(BaseModel):
    """Structured curriculum generated for one goal."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    summary: str
    steps: List[Step] = Field(min_length=1)
    forward_looking_sentence: str = Field(alias="forwardLookingSentence")

    @model_validator(mode="after")
    def step_ids_unique(self) -> "LearningPath":
        seen = set()
        for step in self.steps:
            if step.id in seen:
                raise ValueError(f"duplicate step id: {step.id!r}")
            seen.add(step.id)
        return self

    def step_ids(self) -> List[str]:
        """Step identifiers in curriculum order."""
        return [step.id for step in self.steps]

    def to_wire(self) -> Dict[str, Any]:
        """Serialize using the camelCase field names of the response schema."""
        return self.model_dump(by_alias=True, mode="json")
