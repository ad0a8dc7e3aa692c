"""メール作成ドメインに関する例外定義。"""

from __future__ import annotations

from typing import Any


class MailCompositionError(Exception):
    """メール作成処理で発生する例外の基底クラス。"""


class InvalidAddressError(MailCompositionError):
    """メールアドレスの形式が不正な場合に発生する例外。"""

    def __init__(self, value: Any, reason: str):
        super().__init__(f"Invalid email address {value!r}: {reason}")
        self.value = value
        self.reason = reason


class InvalidHeaderError(MailCompositionError):
    """ヘッダー名または値が不正な場合に発生する例外。"""

    def __init__(self, name: Any, reason: str):
        super().__init__(f"Invalid header {name!r}: {reason}")
        self.name = name
        self.reason = reason


class IncompleteMessageError(MailCompositionError):
    """メッセージ構築に必要な項目が不足している場合に発生する例外。"""

    def __init__(self, missing: str):
        super().__init__(f"Cannot build message: {missing}")
        self.missing = missing


class TransportConfigurationError(MailCompositionError):
    """送信トランスポートの設定が無効な場合に発生する例外。"""


__all__ = [
    "MailCompositionError",
    "InvalidAddressError",
    "InvalidHeaderError",
    "IncompleteMessageError",
    "TransportConfigurationError",
]
