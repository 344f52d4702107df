from __future__ import annotations

import logging
from typing import Optional

from ..core.constants import DEFAULT_EMPLOYEE_NAME
from ..core.exceptions import InternalError
from ..messaging.dispatcher import ProfileProvider
from ..messaging.model import Profile
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def default_employee(user_id: str) -> Employee:
    return Employee(user_id=str(user_id), full_name=f"{DEFAULT_EMPLOYEE_NAME} {user_id}")


class EmployeeService:
    """Use case: keep the employee directory in sync with the chat backend."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def get(self, user_id: str) -> Optional[Employee]:
        return self._employees.get_by_id(str(user_id))

    def sync_on_contact(self, user_id: str, profiles: Optional[ProfileProvider] = None) -> Employee:
        """Upsert the employee record on every inbound message.

        Never raises on storage or lookup failures: a failed profile lookup
        falls back to a default name and a failed write is logged and the
        in-memory record is returned, so command processing always continues.
        """
        user_id = str(user_id)
        profile = self._lookup_profile(user_id, profiles)

        if profile and profile.full_name.strip():
            employee = Employee(user_id=user_id, full_name=profile.full_name.strip(), email=profile.email or "")
        else:
            employee = default_employee(user_id)

        try:
            self._employees.upsert(user_id=user_id, full_name=employee.full_name, email=employee.email)
            logger.info("Employee synced: %s (%s)", employee.full_name, user_id)
        except InternalError:
            logger.error("Error syncing employee %s, continuing without a stored record", user_id, exc_info=True)
        return employee

    def _lookup_profile(self, user_id: str, profiles: Optional[ProfileProvider]) -> Optional[Profile]:
        if profiles is None:
            return None
        try:
            return profiles.get_profile(user_id)
        except InternalError:
            logger.warning("Profile lookup failed for %s", user_id, exc_info=True)
            return None
