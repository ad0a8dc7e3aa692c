"""Mail composition bounded context.

このパッケージはメッセージの作成（宛先・ヘッダー・本文・送信日時・セッション設定の蓄積と
送信用メッセージの構築）に関する境界文脈を提供します。
"""

# Re-export key domain interfaces for convenience
from .domain.composed_message import ComposedMessage
from .domain.email_composer import EmailComposer
from .domain.transport_interface import MailTransport

__all__ = ["ComposedMessage", "EmailComposer", "MailTransport"]
