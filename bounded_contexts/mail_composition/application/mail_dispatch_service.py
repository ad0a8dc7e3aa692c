"""Application Service for composing and dispatching mail."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from bounded_contexts.mail_composition.domain.capabilities import Buildable
from bounded_contexts.mail_composition.domain.composed_message import ComposedMessage
from bounded_contexts.mail_composition.domain.exceptions import TransportConfigurationError
from bounded_contexts.mail_composition.domain.transport_interface import MailTransport

logger = logging.getLogger(__name__)


@runtime_checkable
class SentMailRepository(Protocol):
    """Repository for sent-mail records."""

    def save_sent_message(self, message: ComposedMessage, message_id: str) -> None:
        """Save record of a sent message."""
        ...


@dataclass(slots=True)
class MailDispatchService:
    """Build a message from a composer and hand it to a transport."""

    transport: MailTransport
    repository: SentMailRepository | None = None

    def send(self, composer: Buildable) -> str:
        """Build and send; return the Message-ID reported by the transport.

        Transport errors propagate unchanged.
        """
        message = composer.build_message()

        if not self.transport.validate_config():
            raise TransportConfigurationError("Mail transport configuration is invalid")

        message_id = self.transport.send(message)

        logger.info(
            "Message dispatched",
            extra={
                "event": "mail.dispatch.sent",
                "message_id": message_id,
                "recipient_count": len(message.recipients()),
            },
        )

        if self.repository:
            self.repository.save_sent_message(message, message_id)

        return message_id

    def can_send(self) -> bool:
        """Check if the transport is ready to send."""
        return self.transport.validate_config()
