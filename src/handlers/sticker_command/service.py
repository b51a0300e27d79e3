"""
Business logic for the `/sticker` slash command.

Supported forms:
- /sticker                 list stickers
- /sticker list            list stickers
- /sticker add <name>      instructions for adding a sticker
- /sticker delete <name>   delete one of your stickers
- /sticker help            show help
- /sticker <name>          send a sticker to the current channel

Every failure is answered with an ephemeral message rather than an error.
"""

from aws_lambda_powertools import Logger

from core.catalog.sticker_catalog import StickerCatalog
from core.config.settings import SettingsStore, get_settings_store
from core.models.errors import (
    NotFoundError,
    PermissionDeniedError,
    StickerServiceError,
)
from core.repositories.catalog_repository import StickerCatalogRepository
from handlers.delete_sticker.service import DeleteService
from handlers.send_sticker.service import SendService

from .models import CommandResponse

logger = Logger(UTC=True)

HELP_TEXT = """**Sticker Commands**

| Command | Description |
|---------|-------------|
| /sticker [name] | Send a sticker |
| /sticker list | Show all available stickers |
| /sticker add [name] | Instructions to add a new sticker |
| /sticker delete [name] | Delete your sticker |
| /sticker help | Show this help message |

**Tip**: Use the sticker picker button in the message input area for a visual selection!"""

ADD_HELP_TEXT = """**Adding Sticker: {name}**

To add a new sticker, use the **Sticker Picker** button in the message input area:

1. Click the sticker button (next to emoji picker)
2. Click "Add Sticker"
3. Enter the name: **{name}**
4. Select your image file
5. Click "Upload"

Supported formats: {formats}
Maximum size: {max_size_kb} KB"""


def ephemeral(text: str) -> CommandResponse:
    return CommandResponse(text=text)


class CommandService:
    """Dispatches `/sticker` subcommands."""

    def __init__(
        self,
        *,
        catalog: StickerCatalogRepository | None = None,
        settings_store: SettingsStore | None = None,
        send_service: SendService | None = None,
        delete_service: DeleteService | None = None,
    ) -> None:
        self.catalog = catalog or StickerCatalog()
        self.settings_store = settings_store or get_settings_store()
        self._send_service = send_service
        self._delete_service = delete_service

    @property
    def send_service(self) -> SendService:
        if self._send_service is None:
            self._send_service = SendService(catalog=self.catalog)
        return self._send_service

    @property
    def delete_service(self) -> DeleteService:
        if self._delete_service is None:
            self._delete_service = DeleteService(catalog=self.catalog)
        return self._delete_service

    def execute(
        self,
        command: str,
        *,
        user_id: str,
        channel_id: str,
    ) -> CommandResponse:
        parts = command.split()
        logger.debug("Executing sticker command", extra={"parts": parts, "user_id": user_id})

        if not parts:
            return self.show_help()

        if len(parts) == 1:
            return self.list_stickers()

        subcommand = parts[1]

        if subcommand == "list":
            return self.list_stickers()

        if subcommand == "add":
            if len(parts) < 3:
                return ephemeral("Usage: /sticker add [name] (attach an image to the message)")
            return self.add_sticker_help(parts[2])

        if subcommand == "delete":
            if len(parts) < 3:
                return ephemeral("Usage: /sticker delete [name]")
            return self.delete_sticker(parts[2], user_id=user_id)

        if subcommand == "help":
            return self.show_help()

        return self.send_sticker(subcommand, user_id=user_id, channel_id=channel_id)

    def show_help(self) -> CommandResponse:
        return ephemeral(HELP_TEXT)

    def list_stickers(self) -> CommandResponse:
        try:
            listing = self.catalog.list_stickers()
        except StickerServiceError as exc:
            return ephemeral(f"Failed to get stickers: {exc.message}")

        if not listing.stickers:
            return ephemeral("No stickers available. Use the sticker picker to add new stickers!")

        lines = ["**Available Stickers**", ""]
        lines.extend(f"- `{sticker.name}`" for sticker in listing.stickers)
        lines.append("")
        lines.append(f"Total: {listing.total} stickers")

        return ephemeral("\n".join(lines))

    def add_sticker_help(self, name: str) -> CommandResponse:
        try:
            taken = self.catalog.is_name_taken(name)
        except StickerServiceError as exc:
            return ephemeral(f"Failed to check sticker name: {exc.message}")

        if taken:
            return ephemeral(
                f"Sticker name '{name}' is already taken. Please choose a different name."
            )

        settings = self.settings_store.current()
        return ephemeral(
            ADD_HELP_TEXT.format(
                name=name,
                formats=settings.allowed_formats,
                max_size_kb=settings.max_sticker_size_kb,
            )
        )

    def delete_sticker(self, name: str, *, user_id: str) -> CommandResponse:
        try:
            self.delete_service.delete_sticker_by_name(name, actor_id=user_id)
        except PermissionDeniedError:
            return ephemeral("You can only delete stickers that you created.")
        except NotFoundError:
            return ephemeral(f"Sticker '{name}' not found.")
        except StickerServiceError as exc:
            return ephemeral(f"Failed to delete sticker: {exc.message}")

        return ephemeral(f"Sticker '{name}' has been deleted.")

    def send_sticker(
        self,
        name: str,
        *,
        user_id: str,
        channel_id: str,
    ) -> CommandResponse:
        try:
            self.send_service.send_sticker_by_name(
                name, channel_id=channel_id, user_id=user_id
            )
        except NotFoundError:
            return ephemeral(
                f"Sticker '{name}' not found. Use `/sticker list` to see available stickers."
            )
        except StickerServiceError as exc:
            return ephemeral(f"Failed to send sticker: {exc.message}")

        # The post itself is the visible result
        return CommandResponse()
