"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable; changes are made with ``model_copy(update=...)``
    and saved back through a repository.
    """

    model_config = ConfigDict(frozen=True)
