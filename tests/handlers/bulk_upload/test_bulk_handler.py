import base64
import json

from handlers.bulk_upload.handler import handler


class TestBulkUploadHandler:
    def test_all_files_succeed(
        self, lambda_context, api_event, catalog, local_storage_settings, encoded_png
    ) -> None:
        event = api_event(
            body={
                "files": [
                    {"filename": "one.png", "file": encoded_png},
                    {"filename": "two.png", "file": encoded_png},
                ]
            }
        )

        response = handler(event, lambda_context)

        assert response["statusCode"] == 201
        body = json.loads(response["body"])
        assert body == {"success": ["one", "two"], "failed": {}}
        assert [s.name for s in catalog.list_stickers().stickers] == ["one", "two"]

    def test_partial_success(
        self, lambda_context, api_event, create_sticker, encoded_png
    ) -> None:
        create_sticker("dup")
        event = api_event(
            body={
                "files": [
                    {"filename": "fresh.png", "file": encoded_png},
                    {"filename": "dup.png", "file": encoded_png},
                    {"filename": "doc.pdf", "file": encoded_png},
                ]
            }
        )

        response = handler(event, lambda_context)

        assert response["statusCode"] == 206
        body = json.loads(response["body"])
        assert body["success"] == ["fresh"]
        assert body["failed"] == {
            "dup.png": "Sticker name already exists",
            "doc.pdf": "File format not allowed",
        }

    def test_nothing_succeeds(
        self, lambda_context, api_event, catalog, local_storage_settings
    ) -> None:
        event = api_event(
            body={"files": [{"filename": "bad.png", "file": "not-base64!!!"}]}
        )

        response = handler(event, lambda_context)

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["failed"] == {"bad.png": "Invalid image data"}

    def test_empty_file_list_returns_422(self, lambda_context, api_event) -> None:
        assert handler(api_event(body={"files": []}), lambda_context)["statusCode"] == 422

    def test_too_many_files_returns_422(self, lambda_context, api_event) -> None:
        data = base64.b64encode(b"x").decode()
        files = [{"filename": f"{i}.png", "file": data} for i in range(51)]

        assert handler(api_event(body={"files": files}), lambda_context)["statusCode"] == 422

    def test_requires_user(self, lambda_context, api_event, encoded_png) -> None:
        event = api_event(
            body={"files": [{"filename": "a.png", "file": encoded_png}]}, user_id=None
        )

        assert handler(event, lambda_context)["statusCode"] == 401
