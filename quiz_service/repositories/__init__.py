"""Repositories package"""

from .question_repository import (
    QuestionRepositoryInterface,
    JsonQuestionRepository,
    get_question_repository,
)
from .template_repository import (
    TemplateRepositoryInterface,
    JsonTemplateRepository,
    get_template_repository,
)

__all__ = [
    "QuestionRepositoryInterface",
    "JsonQuestionRepository",
    "get_question_repository",
    "TemplateRepositoryInterface",
    "JsonTemplateRepository",
    "get_template_repository",
]
