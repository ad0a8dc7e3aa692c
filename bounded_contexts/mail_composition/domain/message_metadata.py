"""Header and metadata store - Domain layer.

カスタムヘッダー・件名・本文・送信日時・文字セットを保持します。
"""

from __future__ import annotations

import codecs
import re
from collections.abc import Iterable, Mapping
from datetime import datetime

from .exceptions import InvalidHeaderError
from .headers import HeaderMap

_EOL = re.compile(r"\r\n|\r|\n")
# タブ以外の C0 制御文字と DEL
_CONTROL = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")


class MessageMetadata:
    """ヘッダーとメッセージのメタデータを管理する."""

    DEFAULT_CHARSET = "utf-8"

    def __init__(self, charset: str | None = None) -> None:
        self.headers = HeaderMap()
        self._subject: str | None = None
        self._body: str | None = None
        self._sent_date: datetime | None = None
        self._charset = self.DEFAULT_CHARSET
        if charset is not None:
            self.set_charset(charset)

    def add_header(self, name: str, value: str) -> None:
        self.headers.add(name, value)

    def set_headers(self, headers: Mapping[str, str] | Iterable[tuple[str, str]]) -> None:
        self.headers.replace_all(headers)

    def get_headers(self) -> tuple[tuple[str, str], ...]:
        return self.headers.items()

    def set_subject(self, text: str) -> None:
        """件名を設定する.

        改行は空白1つに置き換えます。その他の制御文字は拒否します。
        """
        if not isinstance(text, str):
            raise InvalidHeaderError("Subject", "subject must be a string")
        folded = _EOL.sub(" ", text)
        if _CONTROL.search(folded):
            raise InvalidHeaderError("Subject", "subject contains control characters")
        self._subject = folded

    def get_subject(self) -> str | None:
        return self._subject

    def set_message_body(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError("message body must be a string")
        self._body = text

    def get_message_body(self) -> str | None:
        return self._body

    def set_sent_date(self, timestamp: datetime | None) -> None:
        if timestamp is not None:
            if not isinstance(timestamp, datetime):
                raise ValueError("sent date must be a datetime")
            if timestamp.tzinfo is None or timestamp.utcoffset() is None:
                raise ValueError("sent date must be timezone-aware")
        self._sent_date = timestamp

    def get_sent_date(self) -> datetime | None:
        return self._sent_date

    def set_charset(self, charset: str) -> None:
        try:
            codecs.lookup(charset)
        except (LookupError, TypeError) as e:
            raise ValueError(f"Unknown charset: {charset!r}") from e
        self._charset = charset

    def get_charset(self) -> str:
        return self._charset


__all__ = ["MessageMetadata"]
