"""Permission checks for sticker mutation."""

from typing import Protocol

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict

from core.config.settings import SettingsStore, get_settings_store
from core.models.errors import NotFoundError
from core.models.sticker import Sticker
from core.utils.constants import ERROR_CODE_USER_NOT_FOUND

logger = Logger(UTC=True)


class UserProfile(BaseModel):
    """Identity of an actor as far as sticker permissions go."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    is_admin: bool = False


class IdentityService(Protocol):
    """Resolves user ids to profiles."""

    def get_user(self, user_id: str) -> UserProfile:
        """Return the profile for a user.

        Raises:
            NotFoundError: If the user is unknown
        """
        ...


class ConfiguredIdentityService:
    """Identity service backed by the configured admin list.

    Any non-blank user id resolves; ids listed in `admin_user_ids` are
    administrators.
    """

    def __init__(self, settings_store: SettingsStore | None = None) -> None:
        self._settings_store = settings_store or get_settings_store()

    def get_user(self, user_id: str) -> UserProfile:
        if not user_id or not user_id.strip():
            raise NotFoundError(
                message="User not found",
                error_code=ERROR_CODE_USER_NOT_FOUND,
                details={"user_id": user_id},
            )

        admins = self._settings_store.current().admin_user_ids
        return UserProfile(user_id=user_id, is_admin=user_id in admins)


class StickerAccessPolicy:
    """Decides who may delete a sticker: its creator or an administrator."""

    def __init__(self, identity: IdentityService | None = None) -> None:
        self._identity: IdentityService = identity or ConfiguredIdentityService()

    def can_delete(self, actor_id: str, sticker: Sticker) -> bool:
        """Return True if the actor may delete the sticker.

        Raises:
            NotFoundError: If the actor cannot be resolved
        """
        user = self._identity.get_user(actor_id)

        if user.is_admin:
            logger.debug(
                "Admin may delete sticker",
                extra={"actor_id": actor_id, "sticker_id": sticker.id},
            )
            return True

        return sticker.creator_id == actor_id
