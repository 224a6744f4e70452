# src/reservation_usage/core/auth.py

import hmac
import logging
from typing import Optional

from .exceptions import AuthenticationFailure

logger = logging.getLogger(__name__)


def verify_token(supplied: Optional[str], expected: Optional[str]) -> None:
    """Raise AuthenticationFailure unless ``supplied`` matches ``expected``.

    An unset expected token rejects every request.
    """
    if not expected:
        logger.warning("Rejecting request: no verification token is configured.")
        raise AuthenticationFailure("Authentication required")
    if not supplied or not hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8")):
        logger.warning("Rejecting request with a missing or invalid verification token.")
        raise AuthenticationFailure("Authentication required")
