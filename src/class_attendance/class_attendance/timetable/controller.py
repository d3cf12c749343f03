from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import json_error
from ..core.exceptions import AuthenticationError, NotFoundError, PersistenceError, ValidationError
from ..container import Container
from ..users.guards import current_identity, login_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/teacher", methods=["GET"], endpoint="api_teacher")
    def api_teacher():
        teacher_id = request.args.get("id")
        if not teacher_id:
            return json_error("Missing teacher ID", 400)

        try:
            teacher = container.dashboard_service.get_teacher(teacher_id)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("Teacher lookup failed for %s", teacher_id)
            return json_error("Internal Server Error", 500)

        return jsonify(container.dashboard_service.teacher_to_ui(teacher))

    @app.route("/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        try:
            data = container.dashboard_service.load(current_identity(), day=request.args.get("day") or None)
        except AuthenticationError as e:
            return json_error(str(e), 401)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except ValidationError as e:
            return json_error(str(e), 400)
        except PersistenceError:
            logger.exception("Dashboard load failed")
            return json_error("Failed to load your timetable. Please try again.", 503)

        return jsonify(container.dashboard_service.to_ui(data))
