"""Request body parsing for post writes.

Post writes accept either a multipart/urlencoded form (needed for cover
uploads) or a JSON object.
"""

from typing import Any

from fastapi import Request
from starlette.datastructures import UploadFile

from scribe.application.usecase.post import CoverUpload

POST_FIELDS = ("title", "content", "is_published")


class MalformedBodyError(Exception):
    """Request body could not be parsed."""

    pass


async def read_post_input(request: Request) -> tuple[dict[str, Any], CoverUpload | None]:
    """Read post fields and the optional cover upload from the request.

    A ``cover`` part only counts as an upload when it is a file with a
    filename; browsers send an empty file part when nothing was chosen.

    Args:
        request: Incoming request

    Returns:
        Raw field values (missing fields are None) and the cover, if any

    Raises:
        MalformedBodyError: If the body is not valid JSON/form data
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError as e:
            raise MalformedBodyError("Request body is not valid JSON") from e
        if not isinstance(body, dict):
            raise MalformedBodyError("Request body must be a JSON object")
        return {field: body.get(field) for field in POST_FIELDS}, None

    if not content_type:
        return {field: None for field in POST_FIELDS}, None

    form = await request.form()
    fields = {field: form.get(field) for field in POST_FIELDS}
    # Files sent under a text field name are not text values
    fields = {
        key: None if isinstance(value, UploadFile) else value
        for key, value in fields.items()
    }

    cover = None
    upload = form.get("cover")
    if isinstance(upload, UploadFile) and upload.filename:
        cover = CoverUpload(filename=upload.filename, content=await upload.read())

    return fields, cover
