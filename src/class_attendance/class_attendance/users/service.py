from __future__ import annotations

import logging

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError
from .model import Identity
from .repository import AccountRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate a teacher (login)."""

    def __init__(self, accounts: AccountRepository):
        self._accounts = accounts

    def authenticate(self, email: str, password: str) -> Identity:
        email = require_non_empty(email, "Email").lower()

        account = self._accounts.get_by_email(email)
        if not account or not account.is_active:
            logger.info("Login rejected for unknown or inactive account %s", email)
            raise AuthenticationError("Wrong email or password")

        try:
            ok = check_password_hash(account.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.info("Login rejected for %s: bad password", email)
            raise AuthenticationError("Wrong email or password")

        logger.info("Teacher %s signed in", account.teacher_id)
        return Identity(email=account.email, name=account.name)


def require_identity(identity: Identity | None) -> Identity:
    """Every screen is blocked without a signed-in user."""
    if identity is None:
        raise AuthenticationError("Access denied. Please log in.")
    return identity
