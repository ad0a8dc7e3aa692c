"""Email composer - Domain layer.

1通のメッセージ分の状態（アドレス、ヘッダー、件名、本文、送信日時、セッション設定）を
蓄積し、送信トランスポートへ渡す ComposedMessage を構築するファサードです。

Note:
    メッセージごとに生成する短命のオブジェクトです。内部でロックは行わないため、
    複数スレッドから共有する場合は呼び出し側で同期してください。
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime

from core.settings import MailSettings

from .address import Address
from .address_registry import AddressRegistry
from .body import BodyStrategy, PlainTextBody
from .composed_message import ComposedMessage
from .message_builder import MessageBuilder
from .message_metadata import MessageMetadata
from .session import MailSession, SessionConfiguration


class EmailComposer:
    """メッセージ作成のファサード.

    Addressable / Headerable / Buildable の各 Protocol に準拠します。
    本文のエンコード方法は body_strategy で差し替えます。

    Attributes:
        addresses: アドレスレジストリ
        metadata: ヘッダーとメタデータのストア
        session: セッション設定
        body_strategy: 本文の描画戦略
    """

    def __init__(
        self,
        settings: MailSettings | None = None,
        body_strategy: BodyStrategy | None = None,
        builder: MessageBuilder | None = None,
    ) -> None:
        charset = settings.mail_charset if settings is not None else None
        self.metadata = MessageMetadata(charset=charset)
        self.addresses = AddressRegistry(charset=self.metadata.get_charset())
        self.session = SessionConfiguration(settings)
        self.body_strategy: BodyStrategy = body_strategy or PlainTextBody()
        self._builder = builder or MessageBuilder()

        if settings is not None and settings.mail_default_sender:
            self.addresses.set_from(settings.mail_default_sender)

    # ------------------------------------------------------------------
    # Addresses
    # ------------------------------------------------------------------
    def set_from(self, email: str | Address, display_name: str | None = None) -> Address:
        return self.addresses.set_from(email, display_name)

    def get_from_address(self) -> Address | None:
        return self.addresses.get_from_address()

    def add_to(self, email: str | Address, display_name: str | None = None) -> Address:
        return self.addresses.add_to(email, display_name)

    def add_cc(self, email: str | Address, display_name: str | None = None) -> Address:
        return self.addresses.add_cc(email, display_name)

    def add_bcc(self, email: str | Address, display_name: str | None = None) -> Address:
        return self.addresses.add_bcc(email, display_name)

    def add_reply_to(self, email: str | Address, display_name: str | None = None) -> Address:
        return self.addresses.add_reply_to(email, display_name)

    def set_to(self, addresses: Iterable[str | Address]) -> tuple[Address, ...]:
        return self.addresses.set_to(addresses)

    def set_cc(self, addresses: Iterable[str | Address]) -> tuple[Address, ...]:
        return self.addresses.set_cc(addresses)

    def set_bcc(self, addresses: Iterable[str | Address]) -> tuple[Address, ...]:
        return self.addresses.set_bcc(addresses)

    def set_reply_to(self, addresses: Iterable[str | Address]) -> tuple[Address, ...]:
        return self.addresses.set_reply_to(addresses)

    def get_to_addresses(self) -> tuple[Address, ...]:
        return self.addresses.get_to_addresses()

    def get_cc_addresses(self) -> tuple[Address, ...]:
        return self.addresses.get_cc_addresses()

    def get_bcc_addresses(self) -> tuple[Address, ...]:
        return self.addresses.get_bcc_addresses()

    def get_reply_to_addresses(self) -> tuple[Address, ...]:
        return self.addresses.get_reply_to_addresses()

    def set_bounce_address(self, email: str | Address | None) -> Address | None:
        return self.addresses.set_bounce_address(email)

    def get_bounce_address(self) -> Address | None:
        return self.addresses.get_bounce_address()

    # ------------------------------------------------------------------
    # Headers and metadata
    # ------------------------------------------------------------------
    def add_header(self, name: str, value: str) -> None:
        self.metadata.add_header(name, value)

    def set_headers(self, headers: Mapping[str, str] | Iterable[tuple[str, str]]) -> None:
        self.metadata.set_headers(headers)

    def get_headers(self) -> tuple[tuple[str, str], ...]:
        return self.metadata.get_headers()

    def set_subject(self, text: str) -> None:
        self.metadata.set_subject(text)

    def get_subject(self) -> str | None:
        return self.metadata.get_subject()

    def set_message_body(self, text: str) -> None:
        self.metadata.set_message_body(text)

    def set_sent_date(self, timestamp: datetime | None) -> None:
        self.metadata.set_sent_date(timestamp)

    def get_sent_date(self) -> datetime | None:
        return self.metadata.get_sent_date()

    def set_charset(self, charset: str) -> None:
        """文字セットを変更する. 以降に追加されるアドレスの表示名にも適用される."""
        self.metadata.set_charset(charset)
        self.addresses.charset = charset

    def get_charset(self) -> str:
        return self.metadata.get_charset()

    # ------------------------------------------------------------------
    # Session configuration
    # ------------------------------------------------------------------
    def set_host_name(self, host: str | None) -> None:
        self.session.set_host_name(host)

    def get_host_name(self) -> str | None:
        return self.session.get_host_name()

    def set_smtp_port(self, port: int) -> None:
        self.session.set_smtp_port(port)

    def get_smtp_port(self) -> int:
        return self.session.get_smtp_port()

    def set_ssl_on_connect(self, enabled: bool) -> None:
        self.session.set_ssl_on_connect(enabled)

    def set_start_tls_enabled(self, enabled: bool) -> None:
        self.session.set_start_tls_enabled(enabled)

    def set_authentication(self, username: str, password: str | None) -> None:
        self.session.set_authentication(username, password)

    def set_mail_session(self, session: MailSession | None) -> None:
        self.session.set_mail_session(session)

    def get_mail_session(self) -> MailSession:
        return self.session.get_mail_session()

    def set_socket_connection_timeout(self, milliseconds: int) -> None:
        self.session.set_socket_connection_timeout(milliseconds)

    def get_socket_connection_timeout(self) -> int:
        return self.session.get_socket_connection_timeout()

    def set_socket_timeout(self, milliseconds: int) -> None:
        self.session.set_socket_timeout(milliseconds)

    def get_socket_timeout(self) -> int:
        return self.session.get_socket_timeout()

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------
    def build_message(self) -> ComposedMessage:
        """現在の状態から ComposedMessage を構築する.

        構築結果はキャッシュしません。呼び出すたびに最新の状態を反映した
        新しいメッセージを返します。送信日時が未設定の場合は構築時刻を保存し、
        以降の構築で同じ値を使用します。

        Raises:
            IncompleteMessageError: 送信元・宛先・送信先エンドポイントのいずれかが不足している場合
        """
        return self._builder.build(self.addresses, self.metadata, self.session, self.body_strategy)


__all__ = ["EmailComposer"]
