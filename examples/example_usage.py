"""Example: use the service layer without Flask.

Prints the demo teacher's schedule for today and the weekly teaching load.
"""

import importlib

from config import get_settings_module

from src.class_attendance.class_attendance.container import build_container
from src.class_attendance.class_attendance.users.model import Identity


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, settings=settings)

    dashboard = container.dashboard_service.load(Identity(email="teacher@example.com"))
    print(f"{dashboard.teacher.name} - {dashboard.day}")
    for s in dashboard.sessions:
        subject = s.subject.name if s.subject else s.entry.subject_code
        print(f"  {s.entry.start_time}-{s.entry.end_time}  {subject}  ({s.attendance_path})")
    print(f"Weekly load: {dashboard.weekly_hours.label} ({dashboard.weekly_hours.hours} h)")


if __name__ == "__main__":
    main()
