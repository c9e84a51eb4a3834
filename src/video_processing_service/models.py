"""
Pydantic models for the push notification payload and its parsing.

A push subscription POSTs {"message": {"data": <base64>, ...}, "subscription": ...}.
The base64 data decodes to the storage object event JSON; only its "name" is used.
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import MalformedRequestError

PROCESSED_PREFIX = "processed-"


class PushMessage(BaseModel):
    """The message part of a push delivery."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    data: str = Field(..., description="Base64-encoded storage object event JSON")
    message_id: str | None = Field(None, alias="messageId")
    attributes: dict[str, str] | None = None
    publish_time: str | None = Field(None, alias="publishTime")


class PushEnvelope(BaseModel):
    """Request body of POST /process-video."""

    model_config = ConfigDict(extra="ignore")

    message: PushMessage
    subscription: str | None = None


class StorageObjectEvent(BaseModel):
    """Decoded object event. Other fields (bucket, contentType, size, ...) are ignored."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1, description="Object name in the raw bucket")


def _decode_base64(data: str) -> bytes:
    """Decode standard or URL-safe base64, with or without padding."""
    data = data.strip().replace("-", "+").replace("_", "/")
    return base64.b64decode(data + "=" * (-len(data) % 4), validate=True)


def _is_safe_object_name(name: str) -> bool:
    """True if name is a single path component that stays inside a staging dir."""
    if name in (".", ".."):
        return False
    return "/" not in name and "\\" not in name and "\x00" not in name


def parse_push_body(body: str | bytes) -> StorageObjectEvent:
    """
    Parse the raw request body into the storage object event.

    Raises:
        MalformedRequestError: body is not JSON, message.data is missing or not
            base64, the decoded data is not a JSON object, or name is absent,
            empty, not a string, or not a single path component.
    """
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedRequestError(f"Request body is not UTF-8: {e}") from e
    try:
        envelope = PushEnvelope.model_validate_json(body)
    except ValidationError as e:
        raise MalformedRequestError(f"Invalid push envelope: {e}") from e
    try:
        decoded = _decode_base64(envelope.message.data).decode("utf-8")
        data: Any = json.loads(decoded)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedRequestError(f"Undecodable message data: {e}") from e
    if not isinstance(data, dict):
        raise MalformedRequestError("Message data is not a JSON object")
    try:
        event = StorageObjectEvent.model_validate(data, strict=True)
    except ValidationError as e:
        raise MalformedRequestError("Attribute 'name' missing from message") from e
    if not _is_safe_object_name(event.name):
        raise MalformedRequestError(f"Object name is not a plain file name: {event.name!r}")
    return event


def processed_name_for(raw_name: str) -> str:
    """Name of the processed artifact for a raw object name."""
    return f"{PROCESSED_PREFIX}{raw_name}"
