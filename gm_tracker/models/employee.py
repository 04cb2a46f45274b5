"""
Employee domain models.

Staff master data and the closed role/status vocabularies. Unknown values
read from external data are kept as plain strings.

Dependencies: pydantic
System role: Staff master data shape
"""

from enum import Enum

from pydantic import Field

from gm_tracker.models.common import TrackedEntity


class EmployeeRole(str, Enum):
    """Staff roles."""

    PM = "PM"
    SALES = "Sales"
    PRESALES = "Presales"
    ENGINEER = "Engineer"


class EmployeeStatus(str, Enum):
    """Employment status."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"


class Employee(TrackedEntity):
    """Staff master record."""

    name: str
    role: EmployeeRole | str = Field(default=EmployeeRole.ENGINEER, union_mode="left_to_right")
    status: EmployeeStatus | str = Field(default=EmployeeStatus.ACTIVE, union_mode="left_to_right")
    email: str = ""
    phone: str = ""
