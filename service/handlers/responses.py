"""
Response envelope helpers shared by the HTTP handlers.
"""

import json
from http import HTTPStatus
from typing import Any

from pydantic import BaseModel

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain"


def _to_jsonable(payload: Any) -> Any:
    if isinstance(payload, BaseModel):
        return payload.model_dump()
    if isinstance(payload, list):
        return [_to_jsonable(entry) for entry in payload]
    return payload


def build_response(status: HTTPStatus, payload: Any) -> dict[str, Any]:
    """
    Wrap a payload in a Lambda proxy response.

    Strings are sent as plain text for callers that serve plain-text pages;
    the tweet API always passes dicts, lists or models, which are JSON encoded.
    """
    if isinstance(payload, str):
        return {
            "statusCode": status,
            "headers": {"Content-Type": TEXT_CONTENT_TYPE},
            "body": payload,
        }
    return {
        "statusCode": status,
        "headers": {"Content-Type": JSON_CONTENT_TYPE},
        "body": json.dumps(_to_jsonable(payload), default=str),
    }


def error_response(status: HTTPStatus, message: str) -> dict[str, Any]:
    return build_response(status, {"error": message})
