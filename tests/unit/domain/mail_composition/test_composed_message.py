"""Tests for ComposedMessage value object."""

import pytest

from bounded_contexts.mail_composition.domain.address import Address
from bounded_contexts.mail_composition.domain.body import MessageBody
from bounded_contexts.mail_composition.domain.composed_message import ComposedMessage
from bounded_contexts.mail_composition.domain.session import MailSession


@pytest.fixture
def message(fixed_sent_date):
    return ComposedMessage(
        subject="Subject",
        from_address=Address("from@example.com"),
        to=(Address("to@example.com"),),
        cc=(Address("cc@example.com"),),
        bcc=(Address("bcc@example.com"),),
        reply_to=(),
        headers=(("X-A", "1"), ("X-B", "2"), ("X-A", "3")),
        body=MessageBody("Body"),
        sent_date=fixed_sent_date,
        session=MailSession(host="localhost"),
    )


class TestComposedMessage:
    """Test ComposedMessage value object."""

    def test_get_header_returns_all_values(self, message):
        assert message.get_header("X-A") == ("1", "3")
        assert message.get_header("X-Missing") == ()

    def test_header_names_are_unique_and_ordered(self, message):
        assert message.header_names() == ("X-A", "X-B")

    def test_recipients_cover_to_cc_bcc(self, message):
        assert [a.email for a in message.recipients()] == [
            "to@example.com",
            "cc@example.com",
            "bcc@example.com",
        ]

    def test_envelope_sender_defaults_to_from(self, message):
        assert message.envelope_sender == message.from_address

    def test_message_is_immutable(self, message):
        with pytest.raises(Exception):
            message.subject = "Modified Subject"

    def test_plain_body_content_type(self, message):
        assert message.body.content_type == "text/plain; charset=utf-8"
