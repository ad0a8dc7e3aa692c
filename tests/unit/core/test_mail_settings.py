"""Tests for MailSettings."""

from flask import Flask

from core.settings import DEFAULT_SOCKET_TIMEOUT_MS, MailSettings


class TestMailSettings:
    """Test MailSettings lookups."""

    def test_defaults_with_empty_mapping(self):
        settings = MailSettings({})

        assert settings.mail_server is None
        assert settings.mail_port == 25
        assert settings.mail_ssl_port == 465
        assert settings.mail_use_tls is False
        assert settings.mail_use_ssl is False
        assert settings.mail_username is None
        assert settings.mail_default_sender is None
        assert settings.mail_connection_timeout_ms == DEFAULT_SOCKET_TIMEOUT_MS
        assert settings.mail_timeout_ms == DEFAULT_SOCKET_TIMEOUT_MS
        assert settings.mail_provider == "smtp"
        assert settings.mail_charset == "utf-8"

    def test_values_from_mapping(self):
        settings = MailSettings(
            {
                "MAIL_SERVER": "smtp.example.com",
                "MAIL_PORT": "2525",
                "MAIL_USE_SSL": "yes",
                "MAIL_PROVIDER": " Console ",
            }
        )

        assert settings.mail_server == "smtp.example.com"
        assert settings.mail_port == 2525
        assert settings.mail_use_ssl is True
        assert settings.mail_provider == "console"

    def test_invalid_int_falls_back_to_default(self):
        settings = MailSettings({"MAIL_PORT": "not-a-number"})

        assert settings.mail_port == 25

    def test_unrecognised_bool_falls_back_to_default(self):
        settings = MailSettings({"MAIL_USE_TLS": "maybe"})

        assert settings.mail_use_tls is False

    def test_app_config_takes_precedence(self):
        app = Flask(__name__)
        app.config["MAIL_SERVER"] = "from-app.example.com"
        app.config["MAIL_USE_TLS"] = True
        settings = MailSettings({"MAIL_SERVER": "from-env.example.com"})

        with app.app_context():
            assert settings.mail_server == "from-app.example.com"
            assert settings.mail_use_tls is True

        assert settings.mail_server == "from-env.example.com"

    def test_blank_strings_are_treated_as_unset(self):
        settings = MailSettings({"MAIL_SERVER": "   ", "MAIL_USERNAME": "\t"})

        assert settings.mail_server is None
        assert settings.mail_username is None

    def test_string_values_are_stripped(self):
        settings = MailSettings({"MAIL_SERVER": " smtp.example.com \n"})

        assert settings.mail_server == "smtp.example.com"

    def test_password_keeps_surrounding_whitespace(self):
        settings = MailSettings({"MAIL_PASSWORD": " secret "})

        assert settings.mail_password == " secret "
