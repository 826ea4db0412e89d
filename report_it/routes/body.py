# report_it/routes/body.py
"""
Request body parsing shared by the agency and complaint routes.

Bodies may be JSON or HTML form data (urlencoded or multipart). An empty
body counts as an empty object, so a bare PUT changes nothing.
"""
import json
from typing import Type, TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_body(request: Request) -> dict:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        # Blank form inputs mean the field was not filled in
        return {key: value for key, value in form.items() if value != ""}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        raise RequestValidationError(
            [{"loc": ("body",), "msg": "JSON decode error", "type": "json_invalid"}]
        )
    return {} if data is None else data


def body_of(schema: Type[SchemaT]):
    """Dependency that validates the request body into ``schema``."""

    async def dependency(request: Request) -> SchemaT:
        data = await read_body(request)
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            raise RequestValidationError(e.errors())

    return dependency
