"""
Tweet API Lambda handler.

Routes `/<prefix>/<resource>/<item_id?>` requests to the item store:

    POST            create
    GET             list, or fetch one when an id and ?partition_key= are given
    PATCH / PUT     create-or-replace
    DELETE          unconditional delete
"""

import os
from http import HTTPStatus
from typing import Any

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.dal.container import get_item_store
from service.dal.interface import IItemDataAccess, require_fields
from service.handlers.responses import build_response, error_response
from service.models.errors import NotFoundError, ServiceError
from service.models.item import CreateItemRequest, UpdateItemRequest
from service.models.request import ApiRequest, Operation

logger = Logger()
tracer = Tracer()

API_PREFIX = os.environ.get("API_PREFIX", "api")
RESOURCE_NAME = os.environ.get("RESOURCE_NAME", "tweet")


@logger.inject_lambda_context
@tracer.capture_lambda_handler(capture_response=False)
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Lambda handler for the tweet API.

    Args:
        event: API Gateway HTTP API (v2) or function URL event
        context: Lambda context

    Returns:
        Response dict with statusCode, headers and body
    """
    try:
        request = ApiRequest.from_event(event)
        logger.info("Request", extra={"method": request.method, "path": request.path, "query": request.query})
        return route(request, get_item_store())

    except ServiceError as e:
        logger.info("Request rejected", extra={"status": int(e.status_code), "error": str(e)})
        return error_response(e.status_code, str(e))

    except ValueError as e:
        logger.warning("Validation error", extra={"error": str(e)})
        return error_response(HTTPStatus.BAD_REQUEST, str(e))

    except Exception:
        logger.exception("Unexpected error handling request")
        return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, "Internal server error")


def _resource_segments(segments: list[str]) -> list[str]:
    if segments and segments[0] == API_PREFIX:
        return segments[1:]
    return segments


@tracer.capture_method
def route(request: ApiRequest, store: IItemDataAccess) -> dict[str, Any]:
    """Dispatch a request to the store and format the outcome."""
    segments = _resource_segments(request.segments)
    if not segments or segments[0] != RESOURCE_NAME:
        raise NotFoundError("Not found")
    item_id = segments[1] if len(segments) > 1 else None

    operation = Operation.from_method(request.method)
    match operation:
        case Operation.CREATE:
            body = CreateItemRequest(**request.json_body())
            item = store.create(partition_key=body.partition_key, payload=body.payload)
            logger.info("Tweet created", extra={"item_id": item.item_id})
            return build_response(HTTPStatus.CREATED, item)

        case Operation.READ if item_id is None:
            items = store.read_all()
            logger.info("Scan complete", extra={"count": len(items)})
            return build_response(HTTPStatus.OK, items)

        case Operation.READ:
            partition_key = request.query.get("partition_key")
            require_fields(partition_key=partition_key)
            return build_response(HTTPStatus.OK, store.read_one(partition_key=partition_key, item_id=item_id))

        case Operation.UPDATE:
            body = UpdateItemRequest(**request.json_body())
            item = store.update(
                partition_key=body.partition_key,
                item_id=item_id or body.item_id,
                payload=body.payload,
            )
            return build_response(HTTPStatus.ACCEPTED, item)

        case Operation.DELETE:
            partition_key = request.query.get("partition_key")
            store.delete(partition_key=partition_key, item_id=item_id)
            return build_response(HTTPStatus.ACCEPTED, {"message": "Tweet deleted"})
