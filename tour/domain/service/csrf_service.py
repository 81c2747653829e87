"""CSRF protection domain service.

Double-submit cookie scheme: the token is issued in a cookie and must be
echoed back in a header on every state-changing request.
"""

import hmac
import re
import secrets

import logfire

from tour.config import CSRFSettings

from .base import Service

_GUARDED_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


class CSRFService(Service):
    """Issues and validates CSRF tokens."""

    def __init__(self, csrf_settings: CSRFSettings) -> None:
        """Initialize CSRF service.

        Args:
            csrf_settings: CSRF settings (cookie/header names, token size)
        """
        self.settings = csrf_settings
        self._token_pattern = re.compile(
            rf"^[0-9a-f]{{{csrf_settings.token_bytes * 2}}}$"
        )

    def generate_token(self) -> str:
        """Generate a fresh random token (hex encoded)."""
        return secrets.token_hex(self.settings.token_bytes)

    def is_well_formed(self, token: str | None) -> bool:
        return bool(token) and bool(self._token_pattern.match(token))

    def get_or_create_token(self, existing: str | None) -> str:
        """Reuse the caller's token when it is well formed, else issue one."""
        if self.is_well_formed(existing):
            return existing
        return self.generate_token()

    def requires_check(self, method: str, path: str) -> bool:
        """Whether a request must carry a valid token.

        Only state-changing methods are checked, and paths under the exempt
        prefixes (the OTP login flow) are skipped.

        Args:
            method: HTTP method
            path: Request path

        Returns:
            True if the request must pass ``validate_token``
        """
        if method.upper() not in _GUARDED_METHODS:
            return False
        return not any(path.startswith(p) for p in self.settings.exempt_prefixes)

    def validate_token(self, cookie_token: str | None, header_token: str | None) -> bool:
        """Both tokens must be present and equal (constant-time comparison)."""
        if not cookie_token or not header_token:
            logfire.warn(
                "CSRF token missing",
                has_cookie=bool(cookie_token),
                has_header=bool(header_token),
            )
            return False

        valid = hmac.compare_digest(
            cookie_token.encode("utf-8"), header_token.encode("utf-8")
        )
        if not valid:
            logfire.warn("CSRF token mismatch")
        return valid
