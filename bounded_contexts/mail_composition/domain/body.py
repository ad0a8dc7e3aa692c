"""Message body strategies - Domain layer.

本文のエンコード方法を Strategy として差し替え可能にします。
単一パートのテキスト本文のみを扱い、マルチパートは対象外です。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class MessageBody:
    """描画済みの本文.

    Attributes:
        content: 本文テキスト
        subtype: MIME サブタイプ（plain, html）
        charset: 文字セット
    """

    content: str
    subtype: str = "plain"
    charset: str = "utf-8"

    @property
    def content_type(self) -> str:
        return f"text/{self.subtype}; charset={self.charset}"


@runtime_checkable
class BodyStrategy(Protocol):
    """本文の描画戦略（Protocol）."""

    def render(self, content: str, charset: str) -> MessageBody:
        """本文テキストから MessageBody を生成する."""
        ...


@dataclass(frozen=True, slots=True)
class PlainTextBody:
    """text/plain として本文を扱う."""

    def render(self, content: str, charset: str) -> MessageBody:
        return MessageBody(content=content, subtype="plain", charset=charset)


@dataclass(frozen=True, slots=True)
class HtmlBody:
    """text/html として本文を扱う."""

    def render(self, content: str, charset: str) -> MessageBody:
        return MessageBody(content=content, subtype="html", charset=charset)


__all__ = ["MessageBody", "BodyStrategy", "PlainTextBody", "HtmlBody"]
