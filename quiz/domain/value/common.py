"""Value object base."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base for entries owned by an aggregate.

    Frozen and compared field by field; two equal entries are interchangeable.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
