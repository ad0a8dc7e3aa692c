"""Multi-valued header map - Domain layer.

同名ヘッダーを複数保持できるマップです。``add`` は既存の値を上書きせず、
新しい出現として追加します。ヘッダー名は大文字小文字を区別し、正規化しません。
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from .exceptions import InvalidHeaderError

# RFC 5322 field-name: printable US-ASCII except ":"
_FIELD_NAME_CHARS = frozenset(chr(c) for c in range(33, 127)) - {":"}


def validate_header(name: object, value: object) -> None:
    """ヘッダー名と値を検証する.

    Raises:
        InvalidHeaderError: 名前が空・不正文字を含む、または値に改行を含む場合
    """
    if not isinstance(name, str) or not name:
        raise InvalidHeaderError(name, "header name is empty")
    if not set(name) <= _FIELD_NAME_CHARS:
        raise InvalidHeaderError(name, "header name contains invalid characters")
    if not isinstance(value, str):
        raise InvalidHeaderError(name, "header value must be a string")
    if "\r" in value or "\n" in value:
        raise InvalidHeaderError(name, "header value contains CR or LF")


class HeaderMap:
    """ヘッダー名から値の並びへのマップ."""

    def __init__(self) -> None:
        self._values: dict[str, list[str]] = {}
        # 名前をまたいだ挿入順
        self._order: list[tuple[str, str]] = []

    def add(self, name: str, value: str) -> None:
        validate_header(name, value)
        self._values.setdefault(name, []).append(value)
        self._order.append((name, value))

    def replace_all(self, headers: Mapping[str, str] | Iterable[tuple[str, str]]) -> None:
        """全ヘッダーを置き換える. 全件検証後にのみ状態を変更する."""
        pairs = list(headers.items()) if isinstance(headers, Mapping) else list(headers)
        for name, value in pairs:
            validate_header(name, value)
        self._values = {}
        self._order = []
        for name, value in pairs:
            self._values.setdefault(name, []).append(value)
            self._order.append((name, value))

    def get_all(self, name: str) -> tuple[str, ...]:
        return tuple(self._values.get(name, ()))

    def names(self) -> tuple[str, ...]:
        return tuple(self._values)

    def items(self) -> tuple[tuple[str, str], ...]:
        return tuple(self._order)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._order)


__all__ = ["HeaderMap", "validate_header"]
