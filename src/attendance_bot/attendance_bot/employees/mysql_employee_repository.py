from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(row: dict) -> Employee:
    return Employee(
        user_id=str(row["user_id"]),
        full_name=row["full_name"],
        email=row.get("email") or "",
        is_active=bool(row.get("is_active", True)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, full_name, email, is_active
                FROM employees
                WHERE user_id=%s
                """,
                (str(user_id),),
            )
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def upsert(self, *, user_id: str, full_name: str, email: str) -> None:
        # is_active is left untouched on refresh so deactivated employees stay deactivated.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(user_id, full_name, email)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE full_name=VALUES(full_name), email=VALUES(email)
                """,
                (str(user_id), full_name, email or ""),
            )

