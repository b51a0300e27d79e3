"""Timeline delivery of sticker posts through an incoming webhook."""

from typing import Any, Protocol

from aws_lambda_powertools import Logger
from pydantic import BaseModel, Field
import requests

from core.config.settings import SettingsStore, get_settings_store
from core.models.errors import BackendError, ConfigError
from core.utils.constants import (
    ERROR_CODE_POST_FAILED,
    ERROR_CODE_WEBHOOK_NOT_CONFIGURED,
    WEBHOOK_TIMEOUT_SECONDS,
)

logger = Logger(UTC=True)


class StickerPost(BaseModel):
    """A timeline entry referencing a sticker."""

    channel_id: str
    user_id: str
    message: str = ""
    type: str = ""
    root_id: str = ""
    props: dict[str, Any] = Field(default_factory=dict)


class TimelinePoster(Protocol):
    """Messaging capability that publishes posts to a channel."""

    def create_post(self, post: StickerPost) -> dict[str, Any]: ...


class WebhookTimelinePoster:
    """Posts sticker messages as JSON to the configured webhook URL."""

    def __init__(
        self,
        settings_store: SettingsStore | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._settings_store = settings_store or get_settings_store()
        self._session = session or requests.Session()

    def create_post(self, post: StickerPost) -> dict[str, Any]:
        """Deliver a post and return the payload that was accepted.

        Raises:
            ConfigError: If no webhook URL is configured
            BackendError: If the webhook call fails
        """
        webhook_url = self._settings_store.current().webhook_url
        if not webhook_url:
            raise ConfigError(
                message="Sticker webhook URL not configured",
                error_code=ERROR_CODE_WEBHOOK_NOT_CONFIGURED,
            )

        payload = post.model_dump(exclude_defaults=True)
        payload["channel_id"] = post.channel_id

        try:
            response = self._session.post(
                webhook_url,
                json=payload,
                timeout=WEBHOOK_TIMEOUT_SECONDS,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.error(
                "Webhook post failed",
                extra={"channel_id": post.channel_id, "error": str(exc)},
            )
            raise BackendError(
                message="Failed to create post",
                error_code=ERROR_CODE_POST_FAILED,
                details={"channel_id": post.channel_id},
            ) from exc

        logger.info("Sticker post delivered", extra={"channel_id": post.channel_id})
        return payload
