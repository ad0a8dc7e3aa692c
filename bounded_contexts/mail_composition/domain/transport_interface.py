"""Mail transport interface - Domain layer contract.

このインターフェースは構築済みメッセージを送信するトランスポートの契約を定義します。
具体的な実装（SMTP 等）は Infrastructure 層で提供されます。

Python 3.11+ の Protocol を使用し、構造的部分型付けを実現します。
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .composed_message import ComposedMessage


@runtime_checkable
class MailTransport(Protocol):
    """メール送信トランスポート（Protocol）.

    Note:
        - 接続拒否・認証失敗・プロトコルエラーなどの送信エラーは
          実装から呼び出し側へそのまま伝播させる
        - @runtime_checkable により isinstance() チェックが可能
    """

    def send(self, message: ComposedMessage) -> str:
        """メッセージを送信する.

        Args:
            message: 送信する構築済みメッセージ

        Returns:
            str: 送信したメッセージの Message-ID

        Raises:
            Exception: 送信中にエラーが発生した場合
        """
        ...

    def validate_config(self) -> bool:
        """設定が有効かどうかを検証する.

        Returns:
            bool: 設定が有効な場合True、無効な場合False
        """
        ...


__all__ = ["MailTransport"]
