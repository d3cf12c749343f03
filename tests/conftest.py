from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.class_attendance.class_attendance import create_app
from src.class_attendance.class_attendance.attendance.model import AttendanceMark, SessionKey, Student
from src.class_attendance.class_attendance.container import build_services
from src.class_attendance.class_attendance.core.exceptions import PersistenceError
from src.class_attendance.class_attendance.timetable.model import ClassDetails, Subject, TeacherProfile, TimetableEntry
from src.class_attendance.class_attendance.users.model import Identity, TeacherAccount

TEACHER_EMAIL = "teacher@example.com"
TEACHER_PASSWORD = "teacher123"


@dataclass
class InMemoryTeachers:
    teachers: dict[str, TeacherProfile]

    def get_by_id(self, teacher_id: str) -> Optional[TeacherProfile]:
        return self.teachers.get(teacher_id)

    def get_by_email(self, email: str) -> Optional[TeacherProfile]:
        for t in self.teachers.values():
            if t.email == email:
                return t
        return None


@dataclass
class InMemoryClasses:
    classes: dict[str, ClassDetails]

    def get_by_id(self, class_id: str) -> Optional[ClassDetails]:
        return self.classes.get(class_id)

    def get_many(self, class_ids):
        return {cid: self.classes[cid] for cid in class_ids if cid in self.classes}


@dataclass
class InMemoryStudents:
    by_class: dict[str, list[Student]]
    fail: bool = False

    def list_for_class(self, class_id: str):
        if self.fail:
            raise PersistenceError("Database operation failed")
        return list(self.by_class.get(class_id, []))


@dataclass
class InMemoryAttendance:
    saved: list[dict] = field(default_factory=list)
    fail: bool = False

    def save_marks(self, *, key: SessionKey, session_date: date, marks: dict[str, AttendanceMark], marked_by: str) -> int:
        if self.fail:
            raise PersistenceError("Database operation failed")
        self.saved.append({"key": key, "session_date": session_date, "marks": dict(marks), "marked_by": marked_by})
        return len(self.saved)


@dataclass
class InMemoryAccounts:
    accounts: dict[str, TeacherAccount]

    def get_by_email(self, email: str) -> Optional[TeacherAccount]:
        return self.accounts.get(email)


def make_roster(count: int = 12, class_id: str = "C001") -> list[Student]:
    names = [
        "Aarav Sharma", "Ananya Verma", "Arjun Patel", "Diya Reddy", "Ishaan Kumar", "Kavya Singh",
        "Rohan Gupta", "Saanvi Joshi", "Vihaan Mehta", "Zara Khan", "Aditya Nair", "Myra Kapoor",
    ]
    return [
        Student(
            student_id=f"2022UCS{i + 1:03d}",
            name=names[i % len(names)],
            email=f"{names[i % len(names)].split()[0].lower()}@example.com",
            branch="CSE",
            section="A",
            batch_start=2022,
            batch_end=2026,
        )
        for i in range(count)
    ]


@pytest.fixture
def subjects() -> tuple[Subject, ...]:
    return (
        Subject(subject_id="S001", code="CS201", name="Data Structures", credits=4),
        Subject(subject_id="S002", code="CS202", name="Algorithms", credits=4),
        Subject(subject_id="S003", code="CS301", name="Database Systems", credits=3),
    )


@pytest.fixture
def classes() -> dict[str, ClassDetails]:
    return {
        "C001": ClassDetails("C001", "CSE", 2022, 2026, "A"),
        "C002": ClassDetails("C002", "CSE", 2023, 2027, "B"),
        "C003": ClassDetails("C003", "CSE", 2022, 2026, "C"),
    }


@pytest.fixture
def timetable() -> tuple[TimetableEntry, ...]:
    return (
        TimetableEntry("TT001", ("Monday", "Tuesday", "Wednesday", "Friday"), "09:00", "10:00", "C001", "CS201", "Room 301"),
        TimetableEntry("TT002", ("Tuesday", "Thursday"), "10:15", "11:15", "C002", "CS202", "Room 405"),
        TimetableEntry("TT003", ("Monday", "Tuesday", "Wednesday"), "14:00", "15:00", "C003", "CS301", "Lab 2"),
        TimetableEntry("TT004", ("Friday",), "11:30", "12:30", "C001", "CS201", "Room 301"),
    )


@pytest.fixture
def teacher(subjects, timetable) -> TeacherProfile:
    return TeacherProfile(
        teacher_id="T001",
        name="Dr. Sonakshi Vij",
        phone="9876543210",
        email=TEACHER_EMAIL,
        subjects=subjects,
        timetable=timetable,
    )


@pytest.fixture
def identity() -> Identity:
    return Identity(email=TEACHER_EMAIL, name="Dr. Sonakshi Vij")


@pytest.fixture
def repos(teacher, classes):
    return {
        "teachers": InMemoryTeachers({teacher.teacher_id: teacher}),
        "classes": InMemoryClasses(classes),
        "students": InMemoryStudents({"C001": make_roster(12)}),
        "attendance": InMemoryAttendance(),
        "accounts": InMemoryAccounts(
            {
                TEACHER_EMAIL: TeacherAccount(
                    teacher_id=teacher.teacher_id,
                    email=TEACHER_EMAIL,
                    name=teacher.name,
                    password_hash=generate_password_hash(TEACHER_PASSWORD),
                )
            }
        ),
    }


@pytest.fixture
def container(repos):
    return build_services(**repos)


@pytest.fixture
def app(container):
    return create_app(settings_module="config.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in(client):
    resp = client.post("/login", json={"email": TEACHER_EMAIL, "password": TEACHER_PASSWORD})
    assert resp.status_code == 200
    return client


@pytest.fixture
def roster_factory():
    return make_roster
