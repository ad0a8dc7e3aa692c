"""Mail composition domain layer - DDD architecture.

このモジュールはメール作成機能のドメイン層を提供します。
ドメイン層はネットワーク I/O を行わず、送信は契約（インターフェース）のみを定義します。
"""

from .address import Address
from .address_registry import AddressRegistry
from .body import BodyStrategy, HtmlBody, MessageBody, PlainTextBody
from .capabilities import Addressable, Buildable, Headerable
from .composed_message import ComposedMessage
from .email_composer import EmailComposer
from .exceptions import (
    IncompleteMessageError,
    InvalidAddressError,
    InvalidHeaderError,
    MailCompositionError,
    TransportConfigurationError,
)
from .headers import HeaderMap
from .message_builder import MessageBuilder
from .message_metadata import MessageMetadata
from .session import MailSession, SessionConfiguration
from .transport_interface import MailTransport

__all__ = [
    "Address",
    "AddressRegistry",
    "Addressable",
    "BodyStrategy",
    "Buildable",
    "ComposedMessage",
    "EmailComposer",
    "HeaderMap",
    "Headerable",
    "HtmlBody",
    "IncompleteMessageError",
    "InvalidAddressError",
    "InvalidHeaderError",
    "MailCompositionError",
    "MailSession",
    "MailTransport",
    "MessageBody",
    "MessageBuilder",
    "MessageMetadata",
    "PlainTextBody",
    "SessionConfiguration",
    "TransportConfigurationError",
]
