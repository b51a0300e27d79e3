"""
Business logic for posting stickers to a channel timeline.

Stickers stored on the local filesystem are posted as a markdown image
pointing at their public URL, which every client can render. Attachment
stickers are posted as a `custom_sticker` post carrying the attachment
handle in its props.

Posting by id first checks that the user belongs to the target channel.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.catalog.sticker_catalog import StickerCatalog
from core.infrastructure.adapters.channel_adapter import (
    ChannelMembership,
    PlatformChannelMembership,
)
from core.infrastructure.adapters.webhook_adapter import (
    StickerPost,
    TimelinePoster,
    WebhookTimelinePoster,
)
from core.infrastructure.storage.factory import build_image_storage
from core.models.errors import ConfigError, PermissionDeniedError
from core.models.sticker import Sticker
from core.repositories.catalog_repository import StickerCatalogRepository
from core.repositories.storage_repository import StickerImageStorage
from core.utils.constants import (
    ERROR_CODE_SERVER_URL_NOT_CONFIGURED,
    STICKER_POST_TYPE,
)

logger = Logger(UTC=True)


class SendService:
    """Application service that publishes sticker posts."""

    def __init__(
        self,
        *,
        catalog: StickerCatalogRepository | None = None,
        storage: StickerImageStorage | None = None,
        poster: TimelinePoster | None = None,
        membership: ChannelMembership | None = None,
    ) -> None:
        self.catalog = catalog or StickerCatalog()
        self.storage = storage or build_image_storage()
        self.poster: TimelinePoster = poster or WebhookTimelinePoster()
        self.membership: ChannelMembership = membership or PlatformChannelMembership()

    def ensure_channel_access(self, channel_id: str, user_id: str) -> None:
        """Raise PermissionDeniedError unless the user belongs to the channel."""
        if not self.membership.is_member(channel_id, user_id):
            raise PermissionDeniedError(
                message="You don't have access to this channel",
                details={"channel_id": channel_id, "user_id": user_id},
            )

    def build_post(
        self,
        sticker: Sticker,
        *,
        channel_id: str,
        user_id: str,
        root_id: str = "",
    ) -> StickerPost:
        """Build the timeline post for a sticker.

        Raises:
            ConfigError: If a local sticker has no public URL because the
                server URL is not configured
        """
        if sticker.filename:
            image_url = self.storage.public_url(sticker.filename)
            if not image_url:
                raise ConfigError(
                    message="Sticker server not configured",
                    error_code=ERROR_CODE_SERVER_URL_NOT_CONFIGURED,
                    details={"sticker_id": sticker.id},
                )

            return StickerPost(
                channel_id=channel_id,
                user_id=user_id,
                root_id=root_id,
                message=f"![{sticker.name}]({image_url})",
            )

        return StickerPost(
            channel_id=channel_id,
            user_id=user_id,
            root_id=root_id,
            type=STICKER_POST_TYPE,
            props={
                "sticker_id": sticker.id,
                "sticker_name": sticker.name,
                "file_id": sticker.file_id,
            },
        )

    def send(
        self,
        sticker: Sticker,
        *,
        channel_id: str,
        user_id: str,
        root_id: str = "",
    ) -> dict[str, Any]:
        post = self.build_post(
            sticker, channel_id=channel_id, user_id=user_id, root_id=root_id
        )
        created = self.poster.create_post(post)

        logger.info(
            "Sticker sent",
            extra={"sticker_id": sticker.id, "channel_id": channel_id, "user_id": user_id},
        )
        return created

    def send_sticker(
        self,
        sticker_id: str,
        *,
        channel_id: str,
        user_id: str,
        root_id: str = "",
    ) -> dict[str, Any]:
        """Post a sticker by id.

        Raises:
            NotFoundError: If the sticker does not exist
            PermissionDeniedError: If the user is not in the channel
            ConfigError: If posting is not configured
            BackendError: If the post cannot be delivered
        """
        sticker = self.catalog.get_sticker(sticker_id)
        self.ensure_channel_access(channel_id, user_id)
        return self.send(sticker, channel_id=channel_id, user_id=user_id, root_id=root_id)

    def send_sticker_by_name(
        self,
        name: str,
        *,
        channel_id: str,
        user_id: str,
    ) -> dict[str, Any]:
        sticker = self.catalog.get_sticker_by_name(name)
        return self.send(sticker, channel_id=channel_id, user_id=user_id)
