"""Mail session configuration - Domain layer.

このモジュールは送信先エンドポイント（ホスト、ポート、プロトコル）と
タイムアウト値を表す設定オブジェクトを提供します。
タイムアウトは送信トランスポートに渡されるメタデータであり、ここでは強制しません。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Mapping

from core.settings import (
    DEFAULT_SMTP_PORT,
    DEFAULT_SOCKET_TIMEOUT_MS,
    DEFAULT_SSL_SMTP_PORT,
    MailSettings,
)

from .exceptions import IncompleteMessageError

_TRUE = {"1", "true", "yes", "on"}


def _require_non_negative(value: object, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{label} must be a non-negative integer: {value!r}")
    return value


def _require_port(value: object, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 < value < 65536:
        raise ValueError(f"{label} must be between 1 and 65535: {value!r}")
    return value


@dataclass(frozen=True, slots=True)
class MailSession:
    """解決済みの送信エンドポイントを表す値オブジェクト.

    Attributes:
        host: SMTP ホスト名
        port: 接続ポート
        protocol: トランスポートプロトコル
        connection_timeout: ソケット接続タイムアウト（ミリ秒）
        timeout: ソケット I/O タイムアウト（ミリ秒）
        use_ssl: 接続時に SSL を使用するか
        use_tls: STARTTLS を使用するか
        username: 認証ユーザー名（オプション）
        password: 認証パスワード（オプション）
    """

    host: str
    port: int = DEFAULT_SMTP_PORT
    protocol: str = "smtp"
    connection_timeout: int = DEFAULT_SOCKET_TIMEOUT_MS
    timeout: int = DEFAULT_SOCKET_TIMEOUT_MS
    use_ssl: bool = False
    use_tls: bool = False
    username: str | None = None
    password: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.host, str) or not self.host.strip():
            raise ValueError("mail session host must be a non-empty string")
        _require_port(self.port, "port")
        _require_non_negative(self.connection_timeout, "connection_timeout")
        _require_non_negative(self.timeout, "timeout")

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> "MailSession":
        """JavaMail 形式のプロパティ（mail.smtp.host 等）からセッションを生成する."""
        protocol = properties.get("mail.transport.protocol", "smtp")
        prefix = f"mail.{protocol}"

        def prop(name: str, default: str | None = None) -> str | None:
            value = properties.get(f"{prefix}.{name}", default)
            return None if value is None else str(value)

        host = prop("host")
        if not host:
            raise ValueError(f"{prefix}.host is not configured")

        return cls(
            host=host,
            port=int(prop("port", str(DEFAULT_SMTP_PORT))),
            protocol=protocol,
            connection_timeout=int(prop("connectiontimeout", str(DEFAULT_SOCKET_TIMEOUT_MS))),
            timeout=int(prop("timeout", str(DEFAULT_SOCKET_TIMEOUT_MS))),
            use_ssl=(prop("ssl.enable", "false") or "").lower() in _TRUE,
            use_tls=(prop("starttls.enable", "false") or "").lower() in _TRUE,
            username=prop("user"),
            password=prop("password"),
        )


class SessionConfiguration:
    """送信セッションの設定を保持する.

    明示的に注入された MailSession がある場合はそれを優先し、
    無い場合はホスト名・ポート・タイムアウトから都度セッションを合成します。
    """

    DEFAULT_PROTOCOL: ClassVar[str] = "smtp"

    def __init__(self, settings: MailSettings | None = None) -> None:
        self._host_name: str | None = None
        self._smtp_port = DEFAULT_SMTP_PORT
        self._ssl_smtp_port = DEFAULT_SSL_SMTP_PORT
        self._connection_timeout = DEFAULT_SOCKET_TIMEOUT_MS
        self._socket_timeout = DEFAULT_SOCKET_TIMEOUT_MS
        self._ssl_on_connect = False
        self._start_tls_enabled = False
        self._username: str | None = None
        self._password: str | None = None
        self._session: MailSession | None = None

        if settings is not None:
            self._apply_settings(settings)

    def _apply_settings(self, settings: MailSettings) -> None:
        self._host_name = settings.mail_server
        self.set_smtp_port(settings.mail_port)
        self.set_ssl_smtp_port(settings.mail_ssl_port)
        self.set_socket_connection_timeout(settings.mail_connection_timeout_ms)
        self.set_socket_timeout(settings.mail_timeout_ms)
        self._ssl_on_connect = settings.mail_use_ssl
        self._start_tls_enabled = settings.mail_use_tls
        if settings.mail_username:
            self.set_authentication(settings.mail_username, settings.mail_password)

    # ------------------------------------------------------------------
    # Endpoint
    # ------------------------------------------------------------------
    def set_host_name(self, host: str | None) -> None:
        if host is not None and (not isinstance(host, str) or not host.strip()):
            raise ValueError(f"host name must be a non-empty string: {host!r}")
        self._host_name = host

    def get_host_name(self) -> str | None:
        return self._host_name

    def set_smtp_port(self, port: int) -> None:
        self._smtp_port = _require_port(port, "smtp port")

    def get_smtp_port(self) -> int:
        return self._smtp_port

    def set_ssl_smtp_port(self, port: int) -> None:
        self._ssl_smtp_port = _require_port(port, "ssl smtp port")

    def get_ssl_smtp_port(self) -> int:
        return self._ssl_smtp_port

    def set_ssl_on_connect(self, enabled: bool) -> None:
        self._ssl_on_connect = bool(enabled)

    def is_ssl_on_connect(self) -> bool:
        return self._ssl_on_connect

    def set_start_tls_enabled(self, enabled: bool) -> None:
        self._start_tls_enabled = bool(enabled)

    def is_start_tls_enabled(self) -> bool:
        return self._start_tls_enabled

    def set_authentication(self, username: str, password: str | None) -> None:
        if not username:
            raise ValueError("username must not be empty")
        self._username = username
        self._password = password

    # ------------------------------------------------------------------
    # Timeouts (milliseconds)
    # ------------------------------------------------------------------
    def set_socket_connection_timeout(self, milliseconds: int) -> None:
        self._connection_timeout = _require_non_negative(milliseconds, "socket connection timeout")

    def get_socket_connection_timeout(self) -> int:
        return self._connection_timeout

    def set_socket_timeout(self, milliseconds: int) -> None:
        self._socket_timeout = _require_non_negative(milliseconds, "socket timeout")

    def get_socket_timeout(self) -> int:
        return self._socket_timeout

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------
    def set_mail_session(self, session: MailSession | None) -> None:
        if session is not None and not isinstance(session, MailSession):
            raise TypeError("session must be a MailSession")
        self._session = session

    def has_injected_session(self) -> bool:
        return self._session is not None

    def is_resolvable(self) -> bool:
        return self._session is not None or bool(self._host_name)

    def get_mail_session(self) -> MailSession:
        """送信に使用するセッションを返す.

        Raises:
            IncompleteMessageError: セッションもホスト名も設定されていない場合
        """
        if self._session is not None:
            return self._session
        if not self._host_name:
            raise IncompleteMessageError("no mail session injected and no host name set")

        return MailSession(
            host=self._host_name,
            port=self._ssl_smtp_port if self._ssl_on_connect else self._smtp_port,
            protocol=self.DEFAULT_PROTOCOL,
            connection_timeout=self._connection_timeout,
            timeout=self._socket_timeout,
            use_ssl=self._ssl_on_connect,
            use_tls=self._start_tls_enabled,
            username=self._username,
            password=self._password,
        )


__all__ = [
    "MailSession",
    "SessionConfiguration",
    "DEFAULT_SMTP_PORT",
    "DEFAULT_SSL_SMTP_PORT",
    "DEFAULT_SOCKET_TIMEOUT_MS",
]
