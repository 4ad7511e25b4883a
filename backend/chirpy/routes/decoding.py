"""
Chirpy Backend — Request Body Decoding
========================================

What:  Turns a raw JSON request body into a Pydantic params model.
Why:   Malformed payloads must surface as RequestDecodeError (HTTP 500 with
       {"error": ...}) instead of FastAPI's automatic 422 body validation.
"""

import logging
from typing import Type, TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from chirpy.exceptions import RequestDecodeError

logger = logging.getLogger(__name__)

ParamsT = TypeVar("ParamsT", bound=BaseModel)


async def decode_json_body(request: Request, model: Type[ParamsT]) -> ParamsT:
    """
    Decode the request body into `model`.

    Raises:
        RequestDecodeError: body is not JSON, not an object, or has values
            of the wrong type.
    """
    raw = await request.body()
    try:
        return model.model_validate_json(raw)
    except PydanticValidationError as e:
        logger.error("Error decoding parameters: %s", e)
        raise RequestDecodeError(
            context={"model": model.__name__, "errors": e.error_count()},
        ) from e
