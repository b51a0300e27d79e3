"""Channel membership lookups against the chat platform's REST API."""

from http import HTTPStatus
from typing import Protocol
from urllib.parse import quote

from aws_lambda_powertools import Logger
import requests

from core.config.settings import SettingsStore, get_settings_store
from core.models.errors import BackendError, ConfigError
from core.utils.constants import (
    ERROR_CODE_MEMBERSHIP_CHECK_FAILED,
    ERROR_CODE_PLATFORM_API_NOT_CONFIGURED,
    PLATFORM_API_TIMEOUT_SECONDS,
)

logger = Logger(UTC=True)

# The platform answers these when the user cannot see the channel
NOT_A_MEMBER_STATUSES = frozenset({HTTPStatus.FORBIDDEN, HTTPStatus.NOT_FOUND})


class ChannelMembership(Protocol):
    """Answers whether a user belongs to a channel."""

    def is_member(self, channel_id: str, user_id: str) -> bool: ...


class PlatformChannelMembership:
    """Looks up `GET {api}/channels/{channel_id}/members/{user_id}`."""

    def __init__(
        self,
        settings_store: SettingsStore | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._settings_store = settings_store or get_settings_store()
        self._session = session or requests.Session()

    def member_url(self, channel_id: str, user_id: str) -> str:
        api_url = self._settings_store.current().platform_api_url
        if not api_url:
            raise ConfigError(
                message="Platform API URL not configured",
                error_code=ERROR_CODE_PLATFORM_API_NOT_CONFIGURED,
            )

        return (
            f"{api_url.rstrip('/')}/channels/{quote(channel_id, safe='')}"
            f"/members/{quote(user_id, safe='')}"
        )

    def is_member(self, channel_id: str, user_id: str) -> bool:
        """Return True when the platform reports the membership.

        Raises:
            ConfigError: If no platform API URL is configured
            BackendError: If the platform cannot be reached or errors
        """
        url = self.member_url(channel_id, user_id)
        token = self._settings_store.current().platform_api_token
        headers = {"Authorization": f"Bearer {token}"} if token else {}

        try:
            response = self._session.get(
                url,
                headers=headers,
                timeout=PLATFORM_API_TIMEOUT_SECONDS,
            )
            if response.status_code in NOT_A_MEMBER_STATUSES:
                logger.info(
                    "User is not a channel member",
                    extra={"channel_id": channel_id, "user_id": user_id},
                )
                return False

            response.raise_for_status()
        except requests.RequestException as exc:
            logger.error(
                "Channel membership lookup failed",
                extra={"channel_id": channel_id, "error": str(exc)},
            )
            raise BackendError(
                message="Failed to check channel membership",
                error_code=ERROR_CODE_MEMBERSHIP_CHECK_FAILED,
                details={"channel_id": channel_id},
            ) from exc

        return True
