"""
FastAPI dependency wiring.

The store and sweeper live on app.state for the lifetime of the process;
these helpers hand them to route handlers and let tests override them.
"""
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from dateboard.application.interfaces.listing_store import ListingStore
from dateboard.application.services.expiry_sweeper import ExpirySweeper

ModelT = TypeVar("ModelT", bound=BaseModel)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_listing_store(request: Request) -> ListingStore:
    return request.app.state.listing_store


def get_sweeper(request: Request) -> ExpirySweeper:
    return request.app.state.sweeper


async def _read_body(request: Request) -> Any:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}
    try:
        return await request.json()
    except ValueError:
        raise RequestValidationError(
            [
                {
                    "type": "body_format",
                    "loc": ("body",),
                    "msg": "Body must be form-encoded fields or a JSON object.",
                    "input": None,
                }
            ]
        )


def form_or_json(model: type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """Dependency parsing the request body as HTML form fields or JSON into model."""

    async def dependency(request: Request) -> ModelT:
        body = await _read_body(request)
        try:
            return model.model_validate(body)
        except ValidationError as exc:
            raise RequestValidationError(
                [
                    {**error, "loc": ("body", *error["loc"])}
                    for error in exc.errors(include_url=False, include_context=False)
                ]
            ) from exc

    return dependency
