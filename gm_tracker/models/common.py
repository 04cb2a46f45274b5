"""
Shared model building blocks.

Camel-case aware base model, the tri-state entity identity and the
result type returned by every data gateway call.

Dependencies: pydantic
System role: Foundation for all domain models
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """
    Base model whose JSON representation uses camelCase keys.

    Attributes are snake_case in Python; both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=False,
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Dump as a JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class IdentityState(str, Enum):
    """Where an entity's id came from."""

    UNASSIGNED = "unassigned"
    LOCAL_PENDING = "local_pending"
    PERSISTED = "persisted"


class TrackedEntity(CamelModel):
    """
    Base for entities owned by the data gateway.

    Carries an optional id and an explicit identity state. When the caller
    does not state the identity, it is derived from id presence only:
    no id means unassigned, any id means a local placeholder.

    Attributes:
        id: Entity id, None until assigned
        identity: Identity state of the id
    """

    id: str | None = None
    identity: IdentityState = IdentityState.UNASSIGNED

    @model_validator(mode="before")
    @classmethod
    def _derive_identity(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if not data.get("id"):
            data["id"] = None
            data["identity"] = IdentityState.UNASSIGNED
        elif data.get("identity") is None:
            data["identity"] = IdentityState.LOCAL_PENDING
        return data

    @property
    def is_persisted(self) -> bool:
        """True when the id was issued by the remote backend."""
        return self.identity == IdentityState.PERSISTED


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """
    Outcome of a data gateway call.

    Failed reads carry a safe default value (an empty list) so callers
    that ignore the failure still render an empty view.

    Attributes:
        ok: Whether the backend call succeeded
        value: Payload (or safe default on failure)
        error: Failure description when ok is False
    """

    ok: bool
    value: T | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: T | None = None) -> "StoreResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str, default: T | None = None) -> "StoreResult[T]":
        return cls(ok=False, value=default, error=error)

    def unwrap_or(self, default: T) -> T:
        """Return the value on success, otherwise ``default``."""
        if self.ok and self.value is not None:
            return self.value
        return default
