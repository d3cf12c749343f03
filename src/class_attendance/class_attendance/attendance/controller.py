from __future__ import annotations

import logging

from flask import Flask, jsonify, request, session

from ..common.http import json_error
from ..core.constants import SESSION_STATE_PREFIX
from ..core.exceptions import AuthenticationError, NotFoundError, PersistenceError, ValidationError
from ..container import Container
from ..users.guards import current_identity, login_required
from .model import SessionKey
from .service import OpenedSession

logger = logging.getLogger(__name__)


def _state_key(key: SessionKey) -> str:
    return SESSION_STATE_PREFIX + key.path


def _read_present(data: dict) -> bool:
    present = data.get("present")
    if not isinstance(present, bool):
        raise ValidationError("'present' must be true or false")
    return present


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _restore(key: SessionKey) -> OpenedSession:
        state = session.get(_state_key(key))
        if state is None:
            raise NotFoundError("No open attendance session. Reload the page to start one.")
        return service.open_session(current_identity(), key, state=state)

    def _store(opened: OpenedSession) -> None:
        session[_state_key(opened.key)] = opened.session.to_state()

    def _handle(action):
        try:
            return action()
        except AuthenticationError as e:
            return json_error(str(e), 401)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except ValidationError as e:
            return json_error(str(e), 400)
        except PersistenceError as e:
            return json_error(str(e), 503, retry=True)

    @app.route("/attendance/<timetable_id>/<class_id>/<subject_code>", methods=["GET"], endpoint="attendance_open")
    @login_required
    def attendance_open(timetable_id: str, class_id: str, subject_code: str):
        key = SessionKey(timetable_id, class_id, subject_code)

        def action():
            opened = service.open_session(current_identity(), key)
            # One open session per visit keeps the cookie bounded.
            for stale in [k for k in session if k.startswith(SESSION_STATE_PREFIX)]:
                session.pop(stale, None)
            _store(opened)
            return jsonify(service.to_ui(opened))

        return _handle(action)

    @app.route("/attendance/<timetable_id>/<class_id>/<subject_code>/mark", methods=["POST"], endpoint="attendance_mark")
    @login_required
    def attendance_mark(timetable_id: str, class_id: str, subject_code: str):
        key = SessionKey(timetable_id, class_id, subject_code)
        data = request.get_json(silent=True) or {}

        def action():
            present = _read_present(data)
            student_id = str(data.get("student_id") or "")
            opened = _restore(key)
            opened.session.mark_one(student_id, present)
            _store(opened)
            return jsonify(service.to_ui(opened))

        return _handle(action)

    @app.route(
        "/attendance/<timetable_id>/<class_id>/<subject_code>/mark-all", methods=["POST"], endpoint="attendance_mark_all"
    )
    @login_required
    def attendance_mark_all(timetable_id: str, class_id: str, subject_code: str):
        key = SessionKey(timetable_id, class_id, subject_code)
        data = request.get_json(silent=True) or {}

        def action():
            present = _read_present(data)
            opened = _restore(key)
            opened.session.mark_all(present)
            _store(opened)
            return jsonify(service.to_ui(opened))

        return _handle(action)

    @app.route(
        "/attendance/<timetable_id>/<class_id>/<subject_code>/students", methods=["GET"], endpoint="attendance_students"
    )
    @login_required
    def attendance_students(timetable_id: str, class_id: str, subject_code: str):
        key = SessionKey(timetable_id, class_id, subject_code)

        def action():
            opened = _restore(key)
            students = opened.session.filter(request.args.get("q", ""), request.args.get("status", "all"))
            return jsonify(service.to_ui(opened, students=students))

        return _handle(action)

    @app.route(
        "/attendance/<timetable_id>/<class_id>/<subject_code>/submit", methods=["POST"], endpoint="attendance_submit"
    )
    @login_required
    def attendance_submit(timetable_id: str, class_id: str, subject_code: str):
        key = SessionKey(timetable_id, class_id, subject_code)

        def action():
            opened = _restore(key)
            if not opened.session.can_submit():
                summary = opened.session.summarize()
                return json_error(opened.session.submit_blocker(), 409, unmarked=summary.unmarked)

            receipt = service.submit(current_identity(), opened)
            # A repeated submit now finds no open session.
            session.pop(_state_key(key), None)
            return jsonify(
                {
                    "success": True,
                    "message": "Attendance saved successfully!",
                    "session_id": receipt.session_id,
                    "date": receipt.session_date.strftime("%Y-%m-%d"),
                    "present": receipt.present,
                    "absent": receipt.absent,
                    "total": receipt.total,
                }
            )

        return _handle(action)
