# deezer_metadata/codec.py

"""Turn Deezer JSON payloads into pydantic records.

Records are frozen pydantic models (see ``objects/base.py``). This module
holds what they share: the field types used across all records, the
``Envelope[X]`` list type for ``{"data": [...]}`` collections with its
strict and lenient policies, and the mapping of pydantic's
``ValidationError`` onto ``DecodeError``.

The decode policy travels in the pydantic validation context:

    strict    True: one bad collection element fails the whole record.
              False: the element is dropped and reported.
    warnings  list receiving a DecodeWarning per dropped element.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Annotated, Any, Generic, TypeVar

from pydantic import (
    BaseModel,
    BeforeValidator,
    NonNegativeInt,
    Strict,
    ValidationError,
    ValidationInfo,
)

from deezer_metadata.errors import ApiError, DecodeError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

# Deezer ids, counts and durations are never negative.
UInt = Annotated[NonNegativeInt, Strict()]


@dataclass(frozen=True, slots=True)
class DecodeWarning:
    """A collection element dropped by the lenient envelope decoder."""

    path: str
    index: int
    message: str


@dataclass(slots=True)
class EnvelopeResult(Generic[M]):
    """Decoded collection plus the elements that had to be skipped."""

    items: list[M]
    warnings: list[DecodeWarning] = field(default_factory=list)


def _format_loc(root: str, loc: tuple[int | str, ...]) -> str:
    path = root
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = part
    return path


def to_decode_error(exc: ValidationError, root: str) -> DecodeError:
    """Describe the first validation error, located below ``root``."""
    errors = exc.errors()
    first = errors[0]
    path = _format_loc(root, first["loc"])

    msg = f"{path}: {first['msg']}"
    if len(errors) > 1:
        msg += f" (and {len(errors) - 1} more)"
    return DecodeError(msg, path=path, details={"error_count": len(errors)})


def _unwrap(value: Any) -> list[Any]:
    if isinstance(value, dict):
        if "data" not in value:
            msg = "expected an object with a 'data' array"
            raise ValueError(msg)
        value = value["data"]

    if not isinstance(value, list):
        msg = f"expected an array, got {type(value).__name__}"
        raise ValueError(msg)
    return value


def _keep_decodable(
    element_type: type[M],
    elements: list[Any],
    *,
    path: str,
    context: dict[str, Any],
    warnings: list[DecodeWarning],
) -> list[M]:
    items: list[M] = []
    for index, element in enumerate(elements):
        element_path = f"{path}[{index}]"
        try:
            items.append(element_type.model_validate(element, context=context))
        except ValidationError as exc:
            error = to_decode_error(exc, element_path)
            logger.warning("Skipping undecodable element %s: %s", element_path, error.message)
            warnings.append(DecodeWarning(path=element_path, index=index, message=error.message))
    return items


class Envelope:
    """``Envelope[X]`` annotates a list field served as ``{"data": [X, ...]}``.

    A bare array is accepted too. In strict mode the elements are handed to
    pydantic as-is, so the first bad one fails the record. Otherwise each
    element is validated on its own and bad ones are dropped.
    """

    def __class_getitem__(cls, element_type: type[M]) -> Any:
        def unwrap(value: Any, info: ValidationInfo) -> Any:
            elements = _unwrap(value)
            context = info.context if isinstance(info.context, dict) else {}
            if context.get("strict", False):
                return elements
            return _keep_decodable(
                element_type,
                elements,
                path=info.field_name or "data",
                context=context,
                warnings=context.get("warnings", []),
            )

        return Annotated[list[element_type], BeforeValidator(unwrap)]  # type: ignore[valid-type]


def parse_json(body: str | bytes) -> Any:
    """Parse a response body, reporting malformed JSON as a DecodeError."""
    try:
        return json.loads(body)
    except ValueError as exc:
        msg = f"Response body is not valid JSON: {exc}"
        raise DecodeError(msg, path="$") from exc


def raise_for_error_payload(payload: Any, url: str | None = None) -> None:
    """Turn Deezer's in-band ``{"error": {...}}`` answer into an ApiError."""
    if not isinstance(payload, dict) or "error" not in payload:
        return

    error = payload["error"]
    if not isinstance(error, dict):
        error = {"message": str(error)}

    error_type = error.get("type")
    message = error.get("message") or "unknown error"
    code = error.get("code")
    source = url or "response body"

    logger.warning(
        "Deezer reported %s for %s: %s (code=%s)",
        error_type,
        source,
        message,
        code,
    )
    raise ApiError(
        f"Deezer error for {source}: {message}",
        error_type=error_type,
        code=code if isinstance(code, int) else None,
        details={"url": url} if url else None,
    )


def decode_record(
    cls: type[M],
    payload: Any,
    *,
    strict: bool = False,
    warnings: list[DecodeWarning] | None = None,
) -> M:
    """Validate a parsed JSON object into an instance of the record type ``cls``.

    Args:
        cls: Target record model.
        payload: Parsed JSON (normally a dict).
        strict: If True, one bad element in any enveloped collection fails
            the whole decode. If False, such elements are skipped.
        warnings: Optional list that receives a DecodeWarning for every
            skipped element, so callers can see what was dropped.

    Raises:
        DecodeError: If a required field is missing or has the wrong type,
            or (strict only) if a collection element fails to decode.
    """
    context = {
        "strict": strict,
        "warnings": warnings if warnings is not None else [],
    }
    try:
        return cls.model_validate(payload, context=context)
    except ValidationError as exc:
        raise to_decode_error(exc, cls.__name__) from exc


def decode_envelope(
    value: Any,
    element_type: type[M],
    *,
    strict: bool = False,
    path: str = "data",
) -> EnvelopeResult[M]:
    """Decode ``{"data": [...]}`` (or a bare array) into a list of ``element_type``.

    Order is preserved. In strict mode the first bad element raises
    DecodeError; in lenient mode it is dropped and reported in
    ``EnvelopeResult.warnings``.
    """
    try:
        elements = _unwrap(value)
    except ValueError as exc:
        raise DecodeError(f"{path}: {exc}", path=path) from exc

    warnings: list[DecodeWarning] = []
    context = {"strict": strict, "warnings": warnings}

    if not strict:
        items = _keep_decodable(
            element_type, elements, path=path, context=context, warnings=warnings
        )
        return EnvelopeResult(items=items, warnings=warnings)

    items = []
    for index, element in enumerate(elements):
        try:
            items.append(element_type.model_validate(element, context=context))
        except ValidationError as exc:
            raise to_decode_error(exc, f"{path}[{index}]") from exc
    return EnvelopeResult(items=items)
