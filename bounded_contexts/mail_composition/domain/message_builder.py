"""Message builder - Domain layer.

アドレス・メタデータ・セッション設定から ComposedMessage を組み立てます。
ビルダー自身は状態を持たず、同じ入力に対して何度呼び出しても同等の結果を返します。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from core.time import utc_now

from .address import Address
from .address_registry import AddressRegistry
from .body import BodyStrategy
from .composed_message import ComposedMessage
from .exceptions import IncompleteMessageError
from .message_metadata import MessageMetadata
from .session import SessionConfiguration

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MessageBuilder:
    """状態を持たないメッセージビルダー.

    Attributes:
        clock: 送信日時が未設定の場合に使用する現在時刻の取得関数
    """

    clock: Callable[[], datetime] = field(default=utc_now)

    def build(
        self,
        addresses: AddressRegistry,
        metadata: MessageMetadata,
        session_config: SessionConfiguration,
        body_strategy: BodyStrategy,
    ) -> ComposedMessage:
        """メッセージを構築する.

        Raises:
            IncompleteMessageError: 送信元・宛先・送信先エンドポイントのいずれかが不足している場合
        """
        try:
            from_address = self._check_complete(addresses, session_config)
        except IncompleteMessageError as e:
            logger.info(
                f"Message build rejected: {e.missing}",
                extra={"event": "mail.compose.build_failed", "missing": e.missing},
            )
            raise

        session = session_config.get_mail_session()

        sent_date = metadata.get_sent_date()
        if sent_date is None:
            sent_date = self.clock()
            metadata.set_sent_date(sent_date)

        charset = metadata.get_charset()

        message = ComposedMessage(
            subject=metadata.get_subject() or "",
            from_address=from_address,
            to=addresses.get_to_addresses(),
            cc=addresses.get_cc_addresses(),
            bcc=addresses.get_bcc_addresses(),
            reply_to=addresses.get_reply_to_addresses(),
            headers=metadata.get_headers(),
            body=body_strategy.render(metadata.get_message_body() or "", charset),
            sent_date=sent_date,
            session=session,
            bounce_address=addresses.get_bounce_address(),
            charset=charset,
        )

        logger.info(
            "Message built",
            extra={
                "event": "mail.compose.built",
                "to": [a.email for a in message.to],
                "recipient_count": len(message.recipients()),
                "subject": message.subject,
                "host": session.host,
            },
        )
        return message

    @staticmethod
    def _check_complete(
        addresses: AddressRegistry,
        session_config: SessionConfiguration,
    ) -> Address:
        from_address = addresses.get_from_address()
        if from_address is None:
            raise IncompleteMessageError("From address is not set")
        if not addresses.has_recipients():
            raise IncompleteMessageError("at least one To, Cc or Bcc recipient is required")
        if not session_config.is_resolvable():
            raise IncompleteMessageError("no mail session injected and no host name set")
        return from_address


__all__ = ["MessageBuilder"]
