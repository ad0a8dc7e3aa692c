"""Composed message value object - Domain layer.

このモジュールは構築済みメッセージ（送信トランスポートへ渡す成果物）を表す
値オブジェクトを提供します。値オブジェクトは不変であり、
作成元のコンポーザーを後から変更しても影響を受けません。
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .address import Address
from .body import MessageBody
from .session import MailSession


@dataclass(frozen=True, slots=True)
class ComposedMessage:
    """送信準備が完了したメッセージ.

    Attributes:
        subject: 件名
        from_address: 送信元アドレス
        to: To アドレスの並び
        cc: Cc アドレスの並び
        bcc: Bcc アドレスの並び
        reply_to: Reply-To アドレスの並び
        headers: カスタムヘッダー（名前, 値）の並び（挿入順、同名の複数出現を含む）
        body: 描画済み本文
        sent_date: 送信日時（タイムゾーン付き）
        session: 送信に使用するセッション
        bounce_address: エンベロープ送信者（オプション）
        charset: ヘッダーと本文の文字セット
    """

    subject: str
    from_address: Address
    to: tuple[Address, ...]
    cc: tuple[Address, ...]
    bcc: tuple[Address, ...]
    reply_to: tuple[Address, ...]
    headers: tuple[tuple[str, str], ...]
    body: MessageBody
    sent_date: datetime
    session: MailSession
    bounce_address: Address | None = None
    charset: str = "utf-8"

    def get_header(self, name: str) -> tuple[str, ...]:
        """指定した名前のヘッダー値を挿入順で返す（大文字小文字を区別）."""
        return tuple(value for header, value in self.headers if header == name)

    def header_names(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys(header for header, _ in self.headers))

    def recipients(self) -> tuple[Address, ...]:
        """エンベロープ宛先（To, Cc, Bcc）を返す."""
        return self.to + self.cc + self.bcc

    @property
    def envelope_sender(self) -> Address:
        return self.bounce_address or self.from_address


__all__ = ["ComposedMessage"]
