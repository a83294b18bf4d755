"""JSON encoding of request bodies and decoding of response bodies.

Encoding goes through `pydantic_core.to_json`, so dicts, lists, pydantic
models, dataclasses, datetimes and UUIDs all work without custom encoders.
Decoding validates against any type pydantic accepts via `TypeAdapter`.
"""

from functools import lru_cache
from typing import Any, TypeVar

import pydantic_core
from pydantic import TypeAdapter, ValidationError

from httputils.foundation.exceptions import SerializationError

T = TypeVar("T")


@lru_cache(maxsize=128)
def _adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def to_json_text(body: Any, *, url: str | None = None) -> str:
    """Encode a request body as JSON text.

    Every value, `str` included, is encoded as a JSON value, so the text
    hello is sent as the JSON string `"hello"`. Only `bytes` are taken to be
    JSON already and are passed through, decoded as UTF-8.

    Args:
        body: The payload to encode.
        url: Request URL, attached to the error for context.

    Returns:
        JSON text.

    Raises:
        SerializationError: If the body cannot be encoded.
    """
    try:
        if isinstance(body, bytes):
            return body.decode("utf-8")
        return pydantic_core.to_json(body).decode("utf-8")
    except ValueError as e:
        # PydanticSerializationError, circular references and bad UTF-8 are all ValueErrors
        msg = f"Could not encode request body of type {type(body).__name__} as JSON: {e}"
        raise SerializationError(msg, url=url) from e


def from_json_text(text: str, result_type: type[T], *, url: str | None = None, attempts: int = 0) -> T:
    """Decode JSON text into `result_type`.

    Args:
        text: JSON text from the response body.
        result_type: Target shape (dict, list[int], a pydantic model, a
            dataclass, a TypedDict, ...).
        url: Request URL, attached to the error for context.
        attempts: Attempts made for the request, attached to the error.

    Returns:
        The decoded value.

    Raises:
        SerializationError: If the text is not valid JSON or does not match
            the result shape.
    """
    try:
        adapter = _adapter(result_type)
    except TypeError:
        # unhashable type hints cannot be cached
        adapter = TypeAdapter(result_type)
    try:
        return adapter.validate_json(text)
    except ValidationError as e:
        msg = f"Could not decode response body into {getattr(result_type, '__name__', result_type)}: {e}"
        raise SerializationError(msg, url=url, attempts=attempts) from e
