"""Mail composition application layer."""

from .mail_dispatch_service import MailDispatchService, SentMailRepository

__all__ = ["MailDispatchService", "SentMailRepository"]
