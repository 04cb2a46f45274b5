"""
Customer domain model.

Dependencies: pydantic
System role: Customer master data shape
"""

from gm_tracker.models.common import TrackedEntity


class Customer(TrackedEntity):
    """Customer master record. Deleting one never touches its projects."""

    name: str
    address: str = ""
    contact_person: str = ""
    phone: str = ""
    email: str = ""
