"""Base model for journal entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for comments, subscribers and posts.

    Entities are frozen: a state change (approving a comment) produces a new
    instance through ``model_copy`` and is persisted by the repository.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # Value objects wrap primitives
    )
