"""Mail settings abstraction.

This module exposes :class:`MailSettings` which gathers the ``MAIL_*``
configuration values used when composing and sending messages.  The class
treats a mapping (the process environment by default) as the backing store and
gives precedence to the active Flask application config when an application
context exists.

No module level instance is provided: callers construct a :class:`MailSettings`
and hand it explicitly to the objects that need it, and tests can instantiate
their own with a dedicated mapping.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping, Optional, cast

from flask import current_app, has_app_context

if TYPE_CHECKING:  # pragma: no cover
    from flask import Flask


DEFAULT_SMTP_PORT = 25
DEFAULT_SSL_SMTP_PORT = 465
# milliseconds; a zero timeout would make every connect attempt fail at once
DEFAULT_SOCKET_TIMEOUT_MS = 60_000
DEFAULT_CHARSET = "utf-8"
DEFAULT_PROVIDER = "smtp"

_BOOL_TRUE = {"1", "true", "yes", "on"}
_BOOL_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class _EnvironmentFacade:
    """Thin wrapper that provides ``Mapping`` compatible access to env vars."""

    source: Mapping[str, str]

    @classmethod
    def from_environ(cls, env: Optional[Mapping[str, str]] = None) -> "_EnvironmentFacade":
        return cls(source=os.environ if env is None else env)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.source.get(key, default)


class MailSettings:
    """Domain level representation of the mail configuration values.

    Explicit properties are favoured over generic ``get`` access so callers
    operate on intent-revealing names and defaults live in one place.
    """

    def __init__(self, env: Optional[Mapping[str, str]] = None) -> None:
        self._env = _EnvironmentFacade.from_environ(env)

    # ------------------------------------------------------------------
    # Generic helpers
    # ------------------------------------------------------------------
    def _get(self, key: str, default=None):
        if has_app_context():
            app = cast("Flask", current_app)
            if key in app.config:
                return app.config.get(key)

        value = self._env.get(key)
        if value is not None:
            return value
        return default

    def get(self, key: str, default=None):
        """Return the configured value for *key* or *default* if missing."""

        value = self._get(key)
        return default if value is None else value

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Return a boolean configuration value."""

        value = self._get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            normalised = value.strip().lower()
            if normalised in _BOOL_TRUE:
                return True
            if normalised in _BOOL_FALSE:
                return False
        return default

    def get_int(self, key: str, default: int = 0) -> int:
        """Return an integer configuration value."""

        value = self._get(key)
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _optional_str(self, key: str) -> Optional[str]:
        value = self._get(key)
        if value is None:
            return None
        return str(value).strip() or None

    # ------------------------------------------------------------------
    # Mail configuration
    # ------------------------------------------------------------------
    @property
    def mail_server(self) -> Optional[str]:
        return self._optional_str("MAIL_SERVER")

    @property
    def mail_port(self) -> int:
        return self.get_int("MAIL_PORT", DEFAULT_SMTP_PORT)

    @property
    def mail_ssl_port(self) -> int:
        return self.get_int("MAIL_SSL_PORT", DEFAULT_SSL_SMTP_PORT)

    @property
    def mail_use_tls(self) -> bool:
        return self.get_bool("MAIL_USE_TLS", False)

    @property
    def mail_use_ssl(self) -> bool:
        return self.get_bool("MAIL_USE_SSL", False)

    @property
    def mail_username(self) -> Optional[str]:
        return self._optional_str("MAIL_USERNAME")

    @property
    def mail_password(self) -> Optional[str]:
        # パスワードの前後の空白は値の一部として扱う
        value = self._get("MAIL_PASSWORD")
        return str(value) if value else None

    @property
    def mail_default_sender(self) -> Optional[str]:
        return self._optional_str("MAIL_DEFAULT_SENDER")

    @property
    def mail_connection_timeout_ms(self) -> int:
        return self.get_int("MAIL_CONNECTION_TIMEOUT_MS", DEFAULT_SOCKET_TIMEOUT_MS)

    @property
    def mail_timeout_ms(self) -> int:
        return self.get_int("MAIL_TIMEOUT_MS", DEFAULT_SOCKET_TIMEOUT_MS)

    @property
    def mail_provider(self) -> str:
        return str(self.get("MAIL_PROVIDER", DEFAULT_PROVIDER)).lower().strip()

    @property
    def mail_charset(self) -> str:
        return str(self.get("MAIL_CHARSET", DEFAULT_CHARSET))


__all__ = [
    "MailSettings",
    "DEFAULT_SMTP_PORT",
    "DEFAULT_SSL_SMTP_PORT",
    "DEFAULT_SOCKET_TIMEOUT_MS",
    "DEFAULT_CHARSET",
    "DEFAULT_PROVIDER",
]
