"""Mail address value object - Domain layer.

このモジュールはメールアドレス（アドレスと表示名の組）を表す値オブジェクトを提供します。
構文チェックには email-validator を使用し、DNS による到達性確認は行いません。
"""

from __future__ import annotations

from dataclasses import dataclass
from email.utils import formataddr
from typing import ClassVar

import email_validator
from email_validator import EmailNotValidError, validate_email

from .exceptions import InvalidAddressError

# 構文検査のみを行うため、予約済みドメイン名（localhost, .test など）も受け付ける
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


@dataclass(frozen=True, slots=True)
class Address:
    """メールアドレスを表す値オブジェクト.

    生成時に RFC 5322 のメールボックス形式として妥当かを検証し、
    不正な場合は InvalidAddressError を送出します。

    Attributes:
        email: メールアドレスのリテラル（呼び出し側が指定した文字列そのもの）
        display_name: 表示名（オプション）
        charset: 表示名をヘッダーにエンコードする際の文字セット
    """

    email: str
    display_name: str | None = None
    charset: str = "utf-8"

    _FORBIDDEN_NAME_CHARS: ClassVar[frozenset[str]] = frozenset("\r\n")

    def __post_init__(self) -> None:
        """バリデーション実行."""
        self._validate_email()
        self._validate_display_name()

    def _validate_email(self) -> None:
        if not isinstance(self.email, str):
            raise InvalidAddressError(self.email, "address must be a string")
        if not self.email.strip():
            raise InvalidAddressError(self.email, "address is empty")
        try:
            validate_email(
                self.email,
                check_deliverability=False,
                globally_deliverable=False,
                allow_quoted_local=True,
                allow_domain_literal=True,
            )
        except EmailNotValidError as e:
            raise InvalidAddressError(self.email, str(e)) from e

    def _validate_display_name(self) -> None:
        if self.display_name is None:
            return
        if not isinstance(self.display_name, str):
            raise InvalidAddressError(self.email, "display name must be a string")
        if self._FORBIDDEN_NAME_CHARS.intersection(self.display_name):
            raise InvalidAddressError(self.email, "display name contains a line break")

    def to_header(self) -> str:
        """ヘッダー用の文字列を返す.

        非ASCIIの表示名は charset を使って RFC 2047 形式にエンコードされます。
        """
        return formataddr((self.display_name or "", self.email), charset=self.charset)

    def __str__(self) -> str:
        if self.display_name:
            return f"{self.display_name} <{self.email}>"
        return self.email


__all__ = ["Address"]
