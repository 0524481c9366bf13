"""Static model catalog grouped by capability category."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import structlog
from pydantic import BaseModel, ConfigDict

from shared.errors import ModelNotFoundError

logger = structlog.get_logger()


class ModelInfo(BaseModel):
    """A known model identifier and a short description."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str


class ModelCatalog:
    """Read-only lookup over category -> ordered models.

    The first model of each category is that category's default. Defaults
    can only be changed at construction time through ``defaults``.
    """

    def __init__(
        self,
        categories: Mapping[str, Sequence[ModelInfo]],
        defaults: Mapping[str, str] | None = None,
    ):
        self._categories: dict[str, tuple[ModelInfo, ...]] = {}
        for category, models in categories.items():
            if not models:
                raise ValueError(f"Category '{category}' has no models")
            self._categories[category] = tuple(models)

        for category, name in (defaults or {}).items():
            self._apply_default(category, name)

    def _apply_default(self, category: str, name: str) -> None:
        if category not in self._categories:
            raise ValueError(
                f"Unknown model category '{category}', expected one of: "
                f"{', '.join(self._categories)}"
            )
        models = self._categories[category]
        for index, info in enumerate(models):
            if info.name.lower() == name.lower():
                self._categories[category] = (info,) + models[:index] + models[index + 1:]
                break
        else:
            # Not in the table: trust the operator and prepend it
            info = ModelInfo(name=name, description="Configured default")
            self._categories[category] = (info,) + models
        logger.info("catalog_default_override", category=category, model=name)

    def list_categories(self) -> list[str]:
        return list(self._categories)

    def models_of(self, category: str) -> list[ModelInfo]:
        return list(self._categories[category])

    def default_of(self, category: str) -> ModelInfo:
        return self._categories[category][0]

    def find(self, name: str) -> ModelInfo:
        """Case-insensitive exact lookup across all categories.

        Raises:
            ModelNotFoundError: when no category lists the name.
        """
        wanted = name.lower()
        for models in self._categories.values():
            for info in models:
                if info.name.lower() == wanted:
                    return info
        raise ModelNotFoundError(name)

    def category_of(self, name: str) -> str | None:
        wanted = name.lower()
        for category, models in self._categories.items():
            if any(info.name.lower() == wanted for info in models):
                return category
        return None

    def resolve(self, category: str, requested: str | None = None) -> str:
        """Effective model id for a call.

        No request means the category default. A requested name is
        normalized to the catalog spelling when known and passed through
        verbatim otherwise.
        """
        if not requested:
            return self.default_of(category).name
        try:
            return self.find(requested).name
        except ModelNotFoundError:
            return requested

    def as_dict(self) -> dict[str, list[dict[str, str]]]:
        return {
            category: [info.model_dump() for info in models]
            for category, models in self._categories.items()
        }
