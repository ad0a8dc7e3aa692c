"""SMTP mail transport implementation - Infrastructure layer.

このモジュールは構築済みメッセージを SMTP で送信するトランスポートを提供します。
MIME へのエンコードと SMTP 接続は Flask-Mailman に委譲します。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from email.utils import format_datetime, make_msgid

from flask import current_app, has_app_context
from flask_mailman import EmailMessage as FlaskEmailMessage
from flask_mailman import Mail

from bounded_contexts.mail_composition.domain.composed_message import ComposedMessage
from bounded_contexts.mail_composition.domain.session import MailSession

logger = logging.getLogger(__name__)

# Flask-Mailman 側で生成・上書きするヘッダー
_MANAGED_HEADERS = frozenset({"message-id", "date"})


class ComposedMailmanMessage(FlaskEmailMessage):
    """同名ヘッダーの複数出現を書き出せる Flask-Mailman メッセージ."""

    def __init__(self, *args, header_pairs: tuple[tuple[str, str], ...] = (), **kwargs):
        super().__init__(*args, **kwargs)
        self.header_pairs = header_pairs

    def message(self):
        msg = super().message()
        for name, value in self.header_pairs:
            msg[name] = value
        return msg


@dataclass
class SmtpMailTransport:
    """SMTPを使用したメール送信トランスポート.

    メッセージに含まれる MailSession（ホスト、ポート、認証情報、TLS、タイムアウト）から
    接続を生成して送信します。送信エラーは捕捉せずに呼び出し側へ伝播します。

    Note:
        Protocol (MailTransport) の構造的部分型付けに準拠。
        明示的な継承は不要です。
    """

    mail: Mail
    _logger: logging.Logger = field(default_factory=lambda: logger)

    def send(self, message: ComposedMessage) -> str:
        """SMTPでメッセージを送信する.

        Args:
            message: 送信する構築済みメッセージ

        Returns:
            str: 送信したメッセージの Message-ID

        Raises:
            Exception: 接続・認証・送信中にエラーが発生した場合
        """
        connection = self.open_connection(message.session)
        mail_message, message_id = self.to_mailman_message(message, connection=connection)
        connection.send_messages([mail_message])

        self._logger.info(
            "Email sent successfully via SMTP",
            extra={
                "event": "mail.smtp.sent",
                "message_id": message_id,
                "host": message.session.host,
                "to": [a.email for a in message.to],
                "subject": message.subject,
            },
        )
        return message_id

    def validate_config(self) -> bool:
        """Flask-Mailman が初期化済みかどうかを検証する.

        Returns:
            bool: 送信可能な場合True、そうでない場合False
        """
        if not has_app_context():
            self._logger.warning("No Flask application context for SMTP transport")
            return False
        if "mailman" not in current_app.extensions:
            self._logger.warning("Flask-Mailman is not initialized")
            return False
        return True

    def open_connection(self, session: MailSession):
        """MailSession から Flask-Mailman の接続を生成する."""
        return self.mail.get_connection(
            fail_silently=False,
            host=session.host,
            port=session.port,
            username=session.username,
            password=session.password,
            use_tls=session.use_tls,
            use_ssl=session.use_ssl,
            timeout=self._timeout_seconds(session.connection_timeout),
        )

    @staticmethod
    def to_mailman_message(
        message: ComposedMessage,
        connection=None,
    ) -> tuple[ComposedMailmanMessage, str]:
        """構築済みメッセージを Flask-Mailman メッセージに変換."""
        explicit_ids = [v for n, v in message.headers if n.lower() == "message-id"]
        if explicit_ids:
            message_id = explicit_ids[0]
        else:
            message_id = make_msgid(domain=message.from_address.email.rpartition("@")[2])

        extra_headers = {
            "Date": format_datetime(message.sent_date),
            "Message-ID": message_id,
        }
        # エンベロープ送信者と From ヘッダーが異なる場合
        if message.bounce_address is not None:
            extra_headers["From"] = message.from_address.to_header()

        header_pairs = tuple(
            (name, value)
            for name, value in message.headers
            if name.lower() not in _MANAGED_HEADERS
        )

        mail_message = ComposedMailmanMessage(
            subject=message.subject,
            body=message.body.content,
            from_email=message.envelope_sender.to_header(),
            to=[a.to_header() for a in message.to],
            cc=[a.to_header() for a in message.cc],
            bcc=[a.to_header() for a in message.bcc],
            reply_to=[a.to_header() for a in message.reply_to],
            headers=extra_headers,
            connection=connection,
            header_pairs=header_pairs,
        )
        mail_message.content_subtype = message.body.subtype
        mail_message.encoding = message.body.charset
        return mail_message, message_id

    @staticmethod
    def _timeout_seconds(milliseconds: int) -> float | None:
        # 0 はタイムアウトなし
        if milliseconds <= 0:
            return None
        return milliseconds / 1000


__all__ = ["SmtpMailTransport", "ComposedMailmanMessage"]
