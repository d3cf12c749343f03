import pytest

from src.class_attendance.class_attendance.attendance.model import AttendanceMark, Student
from src.class_attendance.class_attendance.attendance.session import AttendanceSession
from src.class_attendance.class_attendance.core.exceptions import NotFoundError, ValidationError


@pytest.fixture
def session(roster_factory):
    return AttendanceSession(roster_factory(12))


def _mark_three_present_two_absent(session):
    for sid in ("2022UCS001", "2022UCS002", "2022UCS003"):
        session.mark_one(sid, True)
    for sid in ("2022UCS004", "2022UCS005"):
        session.mark_one(sid, False)


def test_everyone_starts_unmarked(session):
    summary = session.summarize()

    assert summary.total == 12
    assert summary.marked == 0
    assert summary.unmarked == 12
    assert session.mark_for("2022UCS001") == AttendanceMark("2022UCS001", present=False, marked=False)


def test_mark_one_is_idempotent(session):
    session.mark_one("2022UCS001", True)
    session.mark_one("2022UCS001", True)

    assert session.mark_for("2022UCS001") == AttendanceMark("2022UCS001", present=True, marked=True)
    assert session.summarize().present == 1


def test_absent_is_not_unmarked(session):
    session.mark_one("2022UCS001", False)
    summary = session.summarize()

    assert summary.absent == 1
    assert summary.unmarked == 11


def test_mark_one_unknown_student(session):
    with pytest.raises(NotFoundError):
        session.mark_one("NOPE", True)


def test_mark_all_present(session):
    session.mark_one("2022UCS001", False)
    session.mark_all(True)
    summary = session.summarize()

    assert (summary.present, summary.absent, summary.unmarked, summary.marked) == (12, 0, 0, 12)
    assert len(session.roster) == 12


def test_counts_always_add_up(session):
    steps = [
        lambda: session.mark_one("2022UCS003", True),
        lambda: session.mark_all(False),
        lambda: session.mark_one("2022UCS007", True),
        lambda: session.mark_one("2022UCS007", False),
        lambda: session.mark_all(True),
    ]
    for step in steps:
        step()
        s = session.summarize()
        assert s.present + s.absent + s.unmarked == s.total == 12
        assert s.present + s.absent == s.marked


def test_filter_by_status(session):
    _mark_three_present_two_absent(session)

    assert len(session.filter(status="unmarked")) == 7
    assert len(session.filter("2022UCS", status="unmarked")) == 7
    assert [s.student_id for s in session.filter(status="absent")] == ["2022UCS004", "2022UCS005"]
    assert len(session.filter(status="present")) == 3
    assert len(session.filter()) == 12


def test_filter_query_matches_name_or_id_case_insensitive(session):
    assert [s.name for s in session.filter("kAvYa")] == ["Kavya Singh"]
    assert [s.student_id for s in session.filter("ucs012")] == ["2022UCS012"]
    assert session.filter("zzz") == []


def test_filter_does_not_mutate(session):
    _mark_three_present_two_absent(session)
    before = session.to_state()

    session.filter("a", status="present")

    assert session.to_state() == before


def test_filter_rejects_unknown_status(session):
    with pytest.raises(ValidationError):
        session.filter(status="late")


def test_submit_gate(session):
    assert not session.can_submit()
    assert session.submit_blocker() == "12 students are still unmarked"

    session.mark_all(False)
    session.mark_one("2022UCS001", True)

    assert session.can_submit()
    assert session.submit_blocker() is None


def test_single_unmarked_message(roster_factory):
    session = AttendanceSession(roster_factory(2))
    session.mark_one("2022UCS001", True)
    assert session.submit_blocker() == "1 student is still unmarked"


def test_state_round_trip_tracks_roster_changes(roster_factory):
    session = AttendanceSession(roster_factory(3))
    session.mark_one("2022UCS001", True)
    session.mark_one("2022UCS002", False)
    state = session.to_state()

    newcomer = Student(student_id="2022UCS099", name="New Student")
    restored = AttendanceSession.from_state(roster_factory(2) + [newcomer], state)

    assert restored.mark_for("2022UCS001").is_present
    assert restored.mark_for("2022UCS002").is_absent
    assert not restored.mark_for("2022UCS099").marked
    assert restored.summarize().total == 3


def test_empty_roster_can_submit():
    session = AttendanceSession([])
    assert session.summarize().total == 0
    assert session.can_submit()
