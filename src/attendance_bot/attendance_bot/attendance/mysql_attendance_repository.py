from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

from ..core.enums import EventKind, EventStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceEvent, DailyReportRow
from .repository import AttendanceRepository


def _to_event(r: dict) -> AttendanceEvent:
    return AttendanceEvent(
        event_id=int(r["event_id"]),
        user_id=str(r["user_id"]),
        kind=EventKind(r["event_type"]),
        timestamp=r["event_time"],
        lat=float(r["lat"]),
        lon=float(r["lon"]),
        status=EventStatus(r["status"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_today_events(self, user_id: str, *, today: date) -> Sequence[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT event_id, user_id, event_type, event_time, lat, lon, status
                FROM attendance_events
                WHERE user_id=%s AND work_date=%s
                ORDER BY event_time ASC, event_id ASC
                """,
                (str(user_id), today),
            )
            return [_to_event(r) for r in fetchall(cur)]

    def add_event(
        self,
        *,
        user_id: str,
        kind: EventKind,
        timestamp: datetime,
        lat: float,
        lon: float,
        status: EventStatus,
    ) -> AttendanceEvent:
        # uq_attendance_day turns a concurrent duplicate into ConflictError (see db_cursor).
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_events(user_id, event_type, event_time, work_date, lat, lon, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (str(user_id), kind.value, timestamp, timestamp.date(), lat, lon, status.value),
            )
            event_id = int(cur.lastrowid)

        return AttendanceEvent(
            event_id=event_id,
            user_id=str(user_id),
            kind=kind,
            timestamp=timestamp,
            lat=lat,
            lon=lon,
            status=status,
        )

    def get_daily_rows(self, *, work_date: date) -> Sequence[DailyReportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    e.user_id, e.full_name,
                    MIN(CASE WHEN ae.event_type = 'in' THEN ae.event_time END) AS check_in,
                    MIN(CASE WHEN ae.event_type = 'out' THEN ae.event_time END) AS check_out
                FROM employees e
                LEFT JOIN attendance_events ae ON ae.user_id = e.user_id AND ae.work_date = %s
                WHERE e.is_active = 1
                GROUP BY e.user_id, e.full_name
                ORDER BY e.full_name ASC
                """,
                (work_date,),
            )
            return [
                DailyReportRow(
                    user_id=str(r["user_id"]),
                    full_name=r["full_name"],
                    check_in=r.get("check_in"),
                    check_out=r.get("check_out"),
                )
                for r in fetchall(cur)
            ]
