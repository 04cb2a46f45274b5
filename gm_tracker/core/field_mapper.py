"""
Bidirectional field mapping between storage rows and domain models.

Storage rows use snake_case column names; the application uses the
pydantic models (camelCase on the wire). Mapping is total: rows with
missing optional columns get empty-string or empty-list defaults, and
status/type/role strings are passed through without enum checks.

A round trip preserves every field except identity: any row read back
with an id is PERSISTED, whatever state the entity had when written.

Dependencies: gm_tracker.models
System role: Translation layer of the data gateway
"""

import logging
from typing import Any

from gm_tracker.models.common import IdentityState
from gm_tracker.models.customer import Customer
from gm_tracker.models.employee import Employee
from gm_tracker.models.project import Project, TeamMember

logger = logging.getLogger(__name__)


def _text(record: dict[str, Any], key: str) -> str:
    value = record.get(key)
    return "" if value is None else str(value)


def _enum_value(value: Any) -> Any:
    return getattr(value, "value", value)


def to_number(value: Any) -> float:
    """
    Coerce a monetary value to float.

    The remote store may return numeric columns as text.

    Args:
        value: Raw column value

    Returns:
        float: Parsed value, 0.0 when missing or unparseable
    """
    if value is None or value == "":
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning("Unparseable numeric value", extra={"raw_value": str(value)[:50]})
        return 0.0


def _with_id(entity_id: str | None, payload: dict[str, Any]) -> dict[str, Any]:
    if entity_id:
        return {"id": entity_id, **payload}
    return payload


def _identity_for(record: dict[str, Any]) -> dict[str, Any]:
    entity_id = record.get("id")
    if not entity_id:
        return {"id": None}
    return {"id": str(entity_id), "identity": IdentityState.PERSISTED}


def team_to_storage(team: list[TeamMember]) -> list[dict[str, Any]]:
    """Serialize team snapshots for the JSON team column."""
    return [member.to_json_dict() for member in team]


def team_from_storage(raw: Any) -> list[TeamMember]:
    """Parse the JSON team column; anything that is not a list yields []."""
    if not isinstance(raw, list):
        return []
    members = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        members.append(
            TeamMember(
                role=_text(item, "role"),
                name=_text(item, "name"),
                employee_id=item.get("employeeId") or item.get("employee_id"),
            )
        )
    return members


def project_to_storage(project: Project) -> dict[str, Any]:
    """
    Map a Project to a storage row.

    The id key is omitted entirely when the project has no id.

    Args:
        project: Project model

    Returns:
        dict: Row keyed by storage column names
    """
    return _with_id(
        project.id,
        {
            "name": project.name,
            "customer_id": project.customer_id,
            "customer_name": project.customer_name,
            "location": project.location,
            "start_date": project.start_date,
            "end_date": project.end_date or None,
            "status": _enum_value(project.status),
            "value": project.value,
            "type": _enum_value(project.type),
            "description": project.description,
            "notes": project.notes,
            "team": team_to_storage(project.team),
            "updated_at": project.updated_at,
        },
    )


def project_from_storage(record: dict[str, Any]) -> Project:
    """
    Map a storage row to a Project.

    Args:
        record: Row keyed by storage column names

    Returns:
        Project: Model with persisted identity when the row has an id
    """
    return Project(
        **_identity_for(record),
        name=_text(record, "name"),
        customer_id=_text(record, "customer_id"),
        customer_name=_text(record, "customer_name"),
        location=_text(record, "location"),
        start_date=_text(record, "start_date"),
        end_date=record.get("end_date") or None,
        status=_text(record, "status"),
        value=to_number(record.get("value")),
        type=_text(record, "type"),
        description=_text(record, "description"),
        notes=_text(record, "notes"),
        team=team_from_storage(record.get("team")),
        updated_at=record.get("updated_at"),
    )


def customer_to_storage(customer: Customer) -> dict[str, Any]:
    """Map a Customer to a storage row, omitting a missing id."""
    return _with_id(
        customer.id,
        {
            "name": customer.name,
            "address": customer.address,
            "contact_person": customer.contact_person,
            "phone": customer.phone,
            "email": customer.email,
        },
    )


def customer_from_storage(record: dict[str, Any]) -> Customer:
    """Map a storage row to a Customer."""
    return Customer(
        **_identity_for(record),
        name=_text(record, "name"),
        address=_text(record, "address"),
        contact_person=_text(record, "contact_person"),
        phone=_text(record, "phone"),
        email=_text(record, "email"),
    )


def employee_to_storage(employee: Employee) -> dict[str, Any]:
    """Map an Employee to a storage row, omitting a missing id."""
    return _with_id(
        employee.id,
        {
            "name": employee.name,
            "role": _enum_value(employee.role),
            "email": employee.email,
            "phone": employee.phone,
            "status": _enum_value(employee.status),
        },
    )


def employee_from_storage(record: dict[str, Any]) -> Employee:
    """Map a storage row to an Employee."""
    return Employee(
        **_identity_for(record),
        name=_text(record, "name"),
        role=_text(record, "role"),
        email=_text(record, "email"),
        phone=_text(record, "phone"),
        status=_text(record, "status"),
    )
