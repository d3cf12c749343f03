from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.mysql_student_repository import MySQLStudentRepository
from .attendance.repository import AttendanceRepository, StudentRepository
from .attendance.service import AttendanceService
from .core.enums import DurationRule, ScheduleOrdering, TimeParserKind
from .database.connection import DBConfig, DatabaseConnection
from .timetable.duration import get_duration_calculator
from .timetable.mysql_class_repository import MySQLClassRepository
from .timetable.mysql_teacher_repository import MySQLTeacherRepository
from .timetable.repository import ClassRepository, TeacherRepository
from .timetable.service import DashboardService
from .timetable.time_parser import get_time_parser
from .users.mysql_account_repository import MySQLAccountRepository
from .users.repository import AccountRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    teachers_repo: TeacherRepository
    classes_repo: ClassRepository
    students_repo: StudentRepository
    attendance_repo: AttendanceRepository
    accounts_repo: AccountRepository

    auth_service: AuthService
    dashboard_service: DashboardService
    attendance_service: AttendanceService


def build_services(
    *,
    teachers: TeacherRepository,
    classes: ClassRepository,
    students: StudentRepository,
    attendance: AttendanceRepository,
    accounts: AccountRepository,
    settings: Any = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services over any repository implementations (MySQL or in-memory)."""
    parser = get_time_parser(getattr(settings, "TIME_PARSER", TimeParserKind.REFERENCE))
    calculator = get_duration_calculator(getattr(settings, "DURATION_CALCULATOR", DurationRule.ROLLOVER))
    ordering = ScheduleOrdering(getattr(settings, "SCHEDULE_ORDERING", ScheduleOrdering.LEXICOGRAPHIC))

    return Container(
        conn=conn,
        teachers_repo=teachers,
        classes_repo=classes,
        students_repo=students,
        attendance_repo=attendance,
        accounts_repo=accounts,
        auth_service=AuthService(accounts),
        dashboard_service=DashboardService(
            teachers,
            classes,
            parser=parser,
            calculator=calculator,
            ordering=ordering,
        ),
        attendance_service=AttendanceService(teachers, classes, students, attendance),
    )


def build_container(*, db_config: dict, settings: Any = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return build_services(
        teachers=MySQLTeacherRepository(conn),
        classes=MySQLClassRepository(conn),
        students=MySQLStudentRepository(conn),
        attendance=MySQLAttendanceRepository(conn),
        accounts=MySQLAccountRepository(conn),
        settings=settings,
        conn=conn,
    )
