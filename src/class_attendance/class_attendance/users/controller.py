from __future__ import annotations

import logging

from flask import Flask, jsonify, request, session

from ..common.http import json_error
from ..core.exceptions import AuthenticationError, PersistenceError, ValidationError
from ..container import Container
from .guards import current_identity, login_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or request.form
        email = data.get("email", "")
        password = data.get("password", "")

        try:
            identity = container.auth_service.authenticate(email, password)
        except (AuthenticationError, ValidationError) as e:
            return json_error(str(e), 401)
        except PersistenceError as e:
            return json_error(str(e), 503)

        session.clear()
        session["email"] = identity.email
        session["name"] = identity.name
        return jsonify({"success": True, "email": identity.email, "name": identity.name})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    @login_required
    def logout():
        identity = current_identity()
        session.clear()
        logger.info("Signed out %s", identity.email if identity else "-")
        return jsonify({"success": True})
