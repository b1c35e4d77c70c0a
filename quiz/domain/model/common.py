"""Domain model base."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base for aggregates and entities.

    Instances are frozen; changes go through ``model_copy(update=...)`` or a
    repository mutation, never through attribute assignment.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
