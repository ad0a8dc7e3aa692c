"""Mail transport factory - Infrastructure layer.

このモジュールは設定に基づいて適切なメール送信トランスポートを生成するファクトリを提供します。
Dependency Injection (DI) パターンを実装しています。
"""

from __future__ import annotations

import logging
from typing import Final

from flask import current_app, has_app_context
from flask_mailman import Mail

from bounded_contexts.mail_composition.domain.transport_interface import MailTransport
from core.settings import MailSettings

from .smtp_transport import SmtpMailTransport

logger = logging.getLogger(__name__)


class MailTransportFactory:
    """メール送信トランスポートのファクトリクラス.

    設定に基づいて適切な MailTransport 実装を生成します。
    Strategy パターンの具体的な戦略選択を担当します。

    Note:
        本番環境ではSMTPのみをサポートします。
        テスト用の ConsoleMailTransport は tests/helpers/mail_composition/ にあります。
    """

    PROVIDER_SMTP: Final[str] = "smtp"
    DEFAULT_PROVIDER: Final[str] = PROVIDER_SMTP

    @classmethod
    def create(
        cls,
        provider: str | None = None,
        mail: Mail | None = None,
        settings: MailSettings | None = None,
    ) -> MailTransport:
        """設定に基づいてメール送信トランスポートを生成する.

        Args:
            provider: メールプロバイダー名（smtp のみサポート）
            mail: Flask-Mailmanインスタンス（SMTPプロバイダーで必要）
            settings: プロバイダー名を解決するためのメール設定

        Returns:
            MailTransport: メール送信トランスポート

        Raises:
            ValueError: 未対応のプロバイダーが指定された場合
        """
        resolved_provider = (provider or cls._provider_from(settings)).lower().strip()

        logger.info(
            f"Creating mail transport with provider: {resolved_provider}",
            extra={"event": "mail.factory.create", "provider": resolved_provider},
        )

        if resolved_provider == cls.PROVIDER_SMTP:
            return SmtpMailTransport(mail=mail or cls._resolve_mail_instance())

        raise ValueError(
            f"Unsupported mail provider: {resolved_provider}. "
            f"Supported provider: {cls.PROVIDER_SMTP}. "
            "Note: 'console' provider is only available in tests."
        )

    @classmethod
    def _provider_from(cls, settings: MailSettings | None) -> str:
        if settings is None:
            return cls.DEFAULT_PROVIDER
        return settings.mail_provider

    @staticmethod
    def _resolve_mail_instance() -> Mail:
        """アプリケーションに登録済みの Flask-Mailman インスタンスを取得."""
        if has_app_context():
            state = current_app.extensions.get("mailman")
            if state is not None:
                logger.info("Using mail instance from the current application")
                return state
        raise ValueError(
            "Flask-Mailman instance is required for SMTP provider. "
            "Please provide 'mail' parameter or initialise Mail on the current application."
        )


__all__ = ["MailTransportFactory"]
