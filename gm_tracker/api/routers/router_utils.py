"""Shared helpers for the entity routers."""

from typing import TypeVar

from gm_tracker.core.exceptions import NotFoundError
from gm_tracker.models.common import TrackedEntity

E = TypeVar("E", bound=TrackedEntity)


def find_by_id(items: list[E], entity_id: str, entity: str) -> E:
    """
    Find an entity by id.

    Raises:
        NotFoundError: If no item carries the id
    """
    for item in items:
        if item.id == entity_id:
            return item
    raise NotFoundError(entity, entity_id)


def as_update(incoming: E, existing: E) -> E:
    """Carry the stored id and identity onto an incoming edit."""
    return incoming.model_copy(update={"id": existing.id, "identity": existing.identity})
