import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

os.environ.setdefault("TESTING", "true")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bounded_contexts.mail_composition.domain.email_composer import EmailComposer  # noqa: E402
from core.settings import MailSettings  # noqa: E402


@pytest.fixture
def mail_settings():
    """テスト用の MAIL_* 設定を持つ MailSettings"""
    return MailSettings(
        {
            "MAIL_SERVER": "smtp.example.com",
            "MAIL_PORT": "587",
            "MAIL_USE_TLS": "true",
            "MAIL_USERNAME": "mailer",
            "MAIL_PASSWORD": "secret",
            "MAIL_CONNECTION_TIMEOUT_MS": "15000",
        }
    )


@pytest.fixture
def composer():
    """空の EmailComposer"""
    return EmailComposer()


@pytest.fixture
def ready_composer():
    """構築に必要な項目がすべて揃った EmailComposer"""
    composer = EmailComposer()
    composer.set_host_name("localhost")
    composer.set_from("from@example.com")
    composer.add_to("to@example.com")
    composer.set_subject("Test Subject")
    composer.set_message_body("Test Message")
    return composer


@pytest.fixture
def fixed_sent_date():
    return datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def mail_app():
    """Flask-Mailman を初期化したアプリケーションコンテキストを提供するfixture"""
    from flask import Flask
    from flask_mailman import Mail

    app = Flask(__name__)
    app.config.update(TESTING=True, MAIL_SERVER="localhost", MAIL_PORT=25)
    mail = Mail()
    mail.init_app(app)

    with app.app_context():
        yield app, mail
