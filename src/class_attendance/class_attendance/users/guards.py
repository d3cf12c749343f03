from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import session

from ..common.http import json_error
from .model import Identity


def current_identity() -> Optional[Identity]:
    """Identity stored at login, or None when nobody is signed in."""
    email = session.get("email")
    if not email:
        return None
    return Identity(email=email, name=session.get("name"))


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "email" not in session:
            return json_error("Access denied. Please log in.", 401)
        return view(*args, **kwargs)

    return wrapper
