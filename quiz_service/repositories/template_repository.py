"""
Quiz template repository for data access.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from ..core.config import settings
from ..core.errors import TemplateNotFoundError
from ..core.logging import get_logger
from ..models.domain import QuizTemplate

logger = get_logger(__name__)


class TemplateRepositoryInterface(ABC):
    """Abstract interface for quiz template repository"""

    @abstractmethod
    async def get(self, template_id: str) -> QuizTemplate:
        """Get an active template by ID"""
        pass

    @abstractmethod
    async def list(self) -> List[QuizTemplate]:
        """List all templates"""
        pass


class JsonTemplateRepository(TemplateRepositoryInterface):
    """JSON file-based quiz template repository"""

    def __init__(self, templates_file: Optional[Path] = None):
        self.templates_file = templates_file or Path(settings.DATA_DIR) / settings.TEMPLATES_FILE
        self._templates: Optional[dict[str, QuizTemplate]] = None

    def _load(self) -> dict[str, QuizTemplate]:
        if self._templates is None:
            data = []
            if self.templates_file.exists():
                with open(self.templates_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
            else:
                logger.warning(
                    "Templates file not found",
                    extra_data={"templates_file": str(self.templates_file)}
                )

            templates = [QuizTemplate.model_validate(entry) for entry in data]
            self._templates = {template.id: template for template in templates}

        return self._templates

    async def get(self, template_id: str) -> QuizTemplate:
        """Get an active template by ID"""
        template = self._load().get(str(template_id))

        if template is None or not template.is_active:
            raise TemplateNotFoundError(str(template_id))

        return template

    async def list(self) -> List[QuizTemplate]:
        """List all templates"""
        return list(self._load().values())


_template_repository: Optional[JsonTemplateRepository] = None


def get_template_repository() -> JsonTemplateRepository:
    """Get template repository instance (singleton)"""
    global _template_repository

    if _template_repository is None:
        _template_repository = JsonTemplateRepository()

    return _template_repository
