"""
Domain models for the quiz service.

These are the business entities around a graded submission: quiz
templates, attempts and the result returned after submitting.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from quizgrade import QuestionResult, ScoreSummary


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AttemptStatus(str, Enum):
    """Attempt lifecycle states"""
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class QuizTemplate(BaseModel):
    """Quiz configuration: which questions, how long, what counts as a pass"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(..., description="Template identifier")
    name: str = Field(..., description="Quiz title")
    status: str = "active"
    passing_score: Optional[float] = Field(default=None, ge=0, le=100, alias="passingScore")
    max_attempts: int = Field(default=0, ge=0, alias="maxAttempts", description="0 means unlimited")
    duration_minutes: Optional[int] = Field(default=None, alias="durationMinutes")
    reveal_answers_after_submission: Optional[bool] = Field(default=None, alias="revealAnswersAfterSubmission")
    question_ids: List[str] = Field(default_factory=list, alias="questionIds")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        """Accept integer IDs"""
        return str(v) if isinstance(v, int) else v

    @field_validator("question_ids", mode="before")
    @classmethod
    def coerce_question_ids(cls, v):
        """Question IDs are compared as strings"""
        if v is None:
            return []
        return [str(item) for item in v]

    @property
    def is_active(self) -> bool:
        return self.status == "active"


class Attempt(BaseModel):
    """A user's attempt at a quiz"""
    id: str = Field(default_factory=lambda: uuid4().hex)
    user_id: Optional[str] = None
    template_id: str
    question_ids: List[str] = Field(default_factory=list)
    status: AttemptStatus = AttemptStatus.IN_PROGRESS
    started_at: datetime = Field(default_factory=utcnow)
    submitted_at: Optional[datetime] = None
    time_spent_seconds: Optional[int] = Field(default=None, ge=0)

    answers: Dict[str, Any] = Field(default_factory=dict)
    results: List[QuestionResult] = Field(default_factory=list)
    summary: Optional[ScoreSummary] = None
    passed: Optional[bool] = None

    @field_validator("id", "template_id", mode="before")
    @classmethod
    def coerce_ids(cls, v):
        return str(v) if isinstance(v, int) else v

    @field_validator("question_ids", mode="before")
    @classmethod
    def coerce_question_ids(cls, v):
        return [str(item) for item in v or []]

    @property
    def is_completed(self) -> bool:
        return self.status == AttemptStatus.COMPLETED

    @property
    def duration_minutes(self) -> Optional[int]:
        """Whole minutes between start and submission"""
        if self.submitted_at is None:
            return None
        elapsed = (self.submitted_at - self.started_at).total_seconds()
        return int(elapsed / 60 + 0.5)

    def record_submission(
        self,
        answers: Dict[str, Any],
        results: List[QuestionResult],
        summary: ScoreSummary,
        passed: bool,
        time_spent_seconds: Optional[int] = None,
    ):
        """Record a graded submission and close the attempt"""
        self.answers = answers
        self.results = results
        self.summary = summary
        self.passed = passed
        self.time_spent_seconds = time_spent_seconds
        self.submitted_at = utcnow()
        self.status = AttemptStatus.COMPLETED


class SubmissionResult(BaseModel):
    """Outcome of a submitted attempt as shown to the quiz taker"""
    attempt_id: str
    quiz_title: str
    total_score: float
    max_score: float
    percentage: float
    pass_percentage: float
    correct_count: int
    total_questions: int
    passing_score: float
    passed: bool
    duration_minutes: Optional[int] = None
    started_at: datetime
    submitted_at: Optional[datetime] = None
    results: Optional[List[QuestionResult]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with camelCase result entries"""
        data = self.model_dump(exclude={"results"}, mode="json")
        if self.results is not None:
            data["results"] = [result.to_dict() for result in self.results]
        return data
