"""Address registry - Domain layer.

送信者・受信者（To, Cc, Bcc, Reply-To）のアドレスを保持します。
追加系の操作は即座に検証を行い、不正な入力では状態を一切変更しません。
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from .address import Address
from .exceptions import InvalidAddressError


class AddressRegistry:
    """メッセージ参加者のアドレスを管理する.

    各リストは挿入順を保持し、重複は許可されます。
    """

    def __init__(self, charset: str = "utf-8") -> None:
        self.charset = charset
        self._from: Address | None = None
        self._bounce: Address | None = None
        self._to: list[Address] = []
        self._cc: list[Address] = []
        self._bcc: list[Address] = []
        self._reply_to: list[Address] = []

    def _make(self, email: str | Address, display_name: str | None = None) -> Address:
        if isinstance(email, Address):
            if display_name is None:
                return email
            return replace(email, display_name=display_name)
        return Address(email=email, display_name=display_name, charset=self.charset)

    def _make_all(self, addresses: Iterable[str | Address], kind: str) -> list[Address]:
        if isinstance(addresses, (str, Address)):
            addresses = [addresses]
        created = [self._make(entry) for entry in addresses]
        if not created:
            raise InvalidAddressError(addresses, f"{kind} address list is empty")
        return created

    # ------------------------------------------------------------------
    # From / bounce
    # ------------------------------------------------------------------
    def set_from(self, email: str | Address, display_name: str | None = None) -> Address:
        address = self._make(email, display_name)
        self._from = address
        return address

    def get_from_address(self) -> Address | None:
        return self._from

    def set_bounce_address(self, email: str | Address | None) -> Address | None:
        """エンベロープ送信者（バウンス先）を設定する. None で解除."""
        self._bounce = None if email is None else self._make(email)
        return self._bounce

    def get_bounce_address(self) -> Address | None:
        return self._bounce

    # ------------------------------------------------------------------
    # Recipient lists
    # ------------------------------------------------------------------
    def add_to(self, email: str | Address, display_name: str | None = None) -> Address:
        address = self._make(email, display_name)
        self._to.append(address)
        return address

    def add_cc(self, email: str | Address, display_name: str | None = None) -> Address:
        address = self._make(email, display_name)
        self._cc.append(address)
        return address

    def add_bcc(self, email: str | Address, display_name: str | None = None) -> Address:
        address = self._make(email, display_name)
        self._bcc.append(address)
        return address

    def add_reply_to(self, email: str | Address, display_name: str | None = None) -> Address:
        address = self._make(email, display_name)
        self._reply_to.append(address)
        return address

    def set_to(self, addresses: Iterable[str | Address]) -> tuple[Address, ...]:
        self._to = self._make_all(addresses, "To")
        return tuple(self._to)

    def set_cc(self, addresses: Iterable[str | Address]) -> tuple[Address, ...]:
        self._cc = self._make_all(addresses, "Cc")
        return tuple(self._cc)

    def set_bcc(self, addresses: Iterable[str | Address]) -> tuple[Address, ...]:
        self._bcc = self._make_all(addresses, "Bcc")
        return tuple(self._bcc)

    def set_reply_to(self, addresses: Iterable[str | Address]) -> tuple[Address, ...]:
        self._reply_to = self._make_all(addresses, "Reply-To")
        return tuple(self._reply_to)

    def get_to_addresses(self) -> tuple[Address, ...]:
        return tuple(self._to)

    def get_cc_addresses(self) -> tuple[Address, ...]:
        return tuple(self._cc)

    def get_bcc_addresses(self) -> tuple[Address, ...]:
        return tuple(self._bcc)

    def get_reply_to_addresses(self) -> tuple[Address, ...]:
        return tuple(self._reply_to)

    def has_recipients(self) -> bool:
        """To / Cc / Bcc のいずれかに宛先があるか."""
        return bool(self._to or self._cc or self._bcc)


__all__ = ["AddressRegistry"]
