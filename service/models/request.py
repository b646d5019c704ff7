"""
Normalised view of an inbound HTTP event.

Accepts API Gateway HTTP API (payload format 2.0) and Lambda function URL
events, which share the same shape.
"""

import base64
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2

from service.models.errors import MethodNotAllowedError


class Operation(str, Enum):
    """Item operations the router can dispatch to."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"

    @classmethod
    def from_method(cls, method: str) -> "Operation":
        try:
            return _METHOD_TO_OPERATION[method.upper()]
        except KeyError:
            raise MethodNotAllowedError(f"Method {method} not allowed") from None


_METHOD_TO_OPERATION = {
    "POST": Operation.CREATE,
    "GET": Operation.READ,
    "PATCH": Operation.UPDATE,
    "PUT": Operation.UPDATE,
    "DELETE": Operation.DELETE,
}


@dataclass
class ApiRequest:
    method: str
    path: str
    query: dict[str, str] = field(default_factory=dict)
    body: str | None = None

    @classmethod
    def from_event(cls, event: dict[str, Any]) -> "ApiRequest":
        api_event = APIGatewayProxyEventV2(event)
        return cls(
            method=api_event.request_context.http.method,
            path=api_event.get("rawPath") or "/",
            query=api_event.query_string_parameters or {},
            body=_decode_body(api_event.get("body"), bool(api_event.get("isBase64Encoded"))),
        )

    @property
    def segments(self) -> list[str]:
        return [part for part in self.path.split("/") if part]

    def json_body(self) -> dict[str, Any]:
        """Parse the body as a JSON object. Raises ValueError on malformed input."""
        data = json.loads(self.body or "{}")
        if not isinstance(data, dict):
            raise ValueError("Request body must be a JSON object")
        return data


def _decode_body(body: str | None, is_base64_encoded: bool) -> str | None:
    if body and is_base64_encoded:
        return base64.b64decode(body).decode("utf-8")
    return body
