from __future__ import annotations

from typing import Optional, Protocol

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def get_by_id(self, user_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def upsert(self, *, user_id: str, full_name: str, email: str) -> None:
        raise NotImplementedError
