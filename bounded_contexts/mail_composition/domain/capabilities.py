"""Composer capability protocols - Domain layer.

コンポーザーの機能を「アドレス指定」「ヘッダー指定」「構築」の3つの
Protocol に分割します。構造的部分型付けにより、明示的な継承なしに準拠できます。
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .address import Address
from .composed_message import ComposedMessage


@runtime_checkable
class Addressable(Protocol):
    """宛先と送信元を設定できるオブジェクト."""

    def set_from(self, email: str, display_name: str | None = None) -> Address: ...

    def add_to(self, email: str, display_name: str | None = None) -> Address: ...

    def add_cc(self, email: str, display_name: str | None = None) -> Address: ...

    def add_bcc(self, email: str, display_name: str | None = None) -> Address: ...

    def add_reply_to(self, email: str, display_name: str | None = None) -> Address: ...


@runtime_checkable
class Headerable(Protocol):
    """ヘッダーと件名を設定できるオブジェクト."""

    def add_header(self, name: str, value: str) -> None: ...

    def set_subject(self, text: str) -> None: ...


@runtime_checkable
class Buildable(Protocol):
    """送信可能なメッセージを構築できるオブジェクト."""

    def build_message(self) -> ComposedMessage: ...


__all__ = ["Addressable", "Headerable", "Buildable"]
