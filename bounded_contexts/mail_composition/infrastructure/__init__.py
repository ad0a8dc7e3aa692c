"""Mail composition infrastructure layer - Concrete implementations.

このモジュールはメール送信トランスポートの具体的な実装を提供します。
各実装はドメイン層の MailTransport インターフェースに準拠します。

Note:
    ConsoleMailTransport はテスト専用のため、tests/helpers/mail_composition/ にあります。
"""

from .factory import MailTransportFactory
from .smtp_transport import ComposedMailmanMessage, SmtpMailTransport

__all__ = ["SmtpMailTransport", "ComposedMailmanMessage", "MailTransportFactory"]
