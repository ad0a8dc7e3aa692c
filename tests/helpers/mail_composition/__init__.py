"""Test helpers for mail transport implementations."""

from .console_transport import ConsoleMailTransport
from .factory import TestMailTransportFactory

__all__ = ["ConsoleMailTransport", "TestMailTransportFactory"]
