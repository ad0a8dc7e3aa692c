"""Tests for AddressRegistry."""

import pytest

from bounded_contexts.mail_composition.domain.address import Address
from bounded_contexts.mail_composition.domain.address_registry import AddressRegistry
from bounded_contexts.mail_composition.domain.exceptions import InvalidAddressError


@pytest.fixture
def registry():
    return AddressRegistry()


LIST_OPERATIONS = [
    ("add_to", "get_to_addresses"),
    ("add_cc", "get_cc_addresses"),
    ("add_bcc", "get_bcc_addresses"),
    ("add_reply_to", "get_reply_to_addresses"),
]


class TestAddressRegistry:
    """Test AddressRegistry."""

    def test_lists_are_empty_initially(self, registry):
        assert registry.get_to_addresses() == ()
        assert registry.get_cc_addresses() == ()
        assert registry.get_bcc_addresses() == ()
        assert registry.get_reply_to_addresses() == ()
        assert registry.get_from_address() is None
        assert registry.has_recipients() is False

    @pytest.mark.parametrize("adder, getter", LIST_OPERATIONS)
    def test_add_appends_in_order(self, registry, adder, getter):
        getattr(registry, adder)("first@example.com")
        before = len(getattr(registry, getter)())

        returned = getattr(registry, adder)("second@example.com", "Second")

        addresses = getattr(registry, getter)()
        assert len(addresses) == before + 1
        assert addresses[-1] == returned
        assert addresses[-1].email == "second@example.com"
        assert [a.email for a in addresses] == ["first@example.com", "second@example.com"]

    @pytest.mark.parametrize("adder, getter", LIST_OPERATIONS)
    def test_duplicates_are_kept(self, registry, adder, getter):
        getattr(registry, adder)("dup@example.com")
        getattr(registry, adder)("dup@example.com")

        assert len(getattr(registry, getter)()) == 2

    @pytest.mark.parametrize("adder, getter", LIST_OPERATIONS)
    def test_rejected_address_is_not_appended(self, registry, adder, getter):
        getattr(registry, adder)("ok@example.com")

        with pytest.raises(InvalidAddressError):
            getattr(registry, adder)("not-an-address")

        assert [a.email for a in getattr(registry, getter)()] == ["ok@example.com"]

    def test_add_reply_to_with_display_name(self, registry):
        registry.add_reply_to("replyto@example.com", "ReplyToName")

        replies = registry.get_reply_to_addresses()
        assert len(replies) == 1
        assert replies[0].display_name == "ReplyToName"

    def test_getters_return_snapshots(self, registry):
        snapshot = registry.get_to_addresses()
        registry.add_to("late@example.com")

        assert snapshot == ()
        assert len(registry.get_to_addresses()) == 1

    def test_set_from_overwrites(self, registry):
        registry.set_from("a@example.com")
        registry.set_from("b@example.com", "B")

        assert registry.get_from_address() == Address("b@example.com", "B")

    def test_set_from_invalid_keeps_previous(self, registry):
        registry.set_from("a@example.com")

        with pytest.raises(InvalidAddressError):
            registry.set_from("")

        assert str(registry.get_from_address()) == "a@example.com"

    def test_add_accepts_address_instance(self, registry):
        address = Address("obj@example.com", "Obj")

        assert registry.add_cc(address) is address

    @pytest.mark.parametrize("adder, getter", LIST_OPERATIONS)
    def test_display_name_applies_to_address_instance(self, registry, adder, getter):
        getattr(registry, adder)(Address("a@example.com"), "Name")

        stored = getattr(registry, getter)()[-1]
        assert stored.email == "a@example.com"
        assert stored.display_name == "Name"

    def test_set_from_display_name_applies_to_address_instance(self, registry):
        registry.set_from(Address("from@example.com", "Old"), "New")

        assert str(registry.get_from_address()) == "New <from@example.com>"

    @pytest.mark.parametrize(
        "literal",
        ["root@example", '"john doe"@example.com', "postmaster@[192.0.2.1]", "user@localhost"],
    )
    def test_add_to_accepts_every_valid_literal(self, registry, literal):
        before = len(registry.get_to_addresses())

        registry.add_to(literal)

        assert len(registry.get_to_addresses()) == before + 1
        assert registry.get_to_addresses()[-1].email == literal

    def test_addresses_use_registry_charset(self):
        registry = AddressRegistry(charset="iso-2022-jp")

        address = registry.add_to("taro@example.com", "太郎")

        assert address.charset == "iso-2022-jp"

    def test_set_to_replaces_list(self, registry):
        registry.add_to("old@example.com")

        registry.set_to(["a@example.com", Address("b@example.com", "B")])

        assert [a.email for a in registry.get_to_addresses()] == ["a@example.com", "b@example.com"]

    def test_set_bcc_with_invalid_entry_leaves_list_untouched(self, registry):
        registry.add_bcc("keep@example.com")

        with pytest.raises(InvalidAddressError):
            registry.set_bcc(["fine@example.com", "broken"])

        assert [a.email for a in registry.get_bcc_addresses()] == ["keep@example.com"]

    def test_set_cc_with_empty_list_raises(self, registry):
        with pytest.raises(InvalidAddressError, match="empty"):
            registry.set_cc([])

    def test_set_reply_to_accepts_single_string(self, registry):
        registry.set_reply_to("only@example.com")

        assert [a.email for a in registry.get_reply_to_addresses()] == ["only@example.com"]

    @pytest.mark.parametrize("adder", ["add_to", "add_cc", "add_bcc"])
    def test_any_recipient_list_counts(self, registry, adder):
        getattr(registry, adder)("r@example.com")

        assert registry.has_recipients() is True

    def test_reply_to_alone_is_not_a_recipient(self, registry):
        registry.add_reply_to("r@example.com")

        assert registry.has_recipients() is False

    def test_bounce_address(self, registry):
        registry.set_bounce_address("bounce@example.com")
        assert registry.get_bounce_address().email == "bounce@example.com"

        registry.set_bounce_address(None)
        assert registry.get_bounce_address() is None

    def test_invalid_bounce_address_raises(self, registry):
        with pytest.raises(InvalidAddressError):
            registry.set_bounce_address("bounce")
