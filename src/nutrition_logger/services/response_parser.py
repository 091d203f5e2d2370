"""Extract a JSON object from loosely formatted model output.

The extraction runs as three stages: strip a fenced code block if present,
bound the text by its first ``{`` and last ``}``, then decode. Each stage
returns a ``ParseResult`` so callers can branch on ``ok`` instead of
catching exceptions.
"""

import json
import re
from dataclasses import dataclass
from typing import Generic, TypeVar

from nutrition_logger.domain.errors import ParseError

T = TypeVar("T")

_FENCE_PATTERN = re.compile(r"```[\w-]*[ \t]*\n?(.*?)```", re.DOTALL)


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of a parsing stage."""

    value: T | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, message: str) -> "ParseResult[T]":
        return cls(error=ParseError(message))


def strip_fence(text: str | None) -> ParseResult[str]:
    """Use the interior of a fenced code block when one is present."""
    if text is None or not text.strip():
        return ParseResult.failure("empty response")
    match = _FENCE_PATTERN.search(text)
    if match:
        return ParseResult.success(match.group(1))
    return ParseResult.success(text)


def bound_braces(text: str) -> ParseResult[str]:
    """Slice the text from the first ``{`` to the last ``}``."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        return ParseResult.failure("no JSON object found")
    return ParseResult.success(text[start : end + 1])


def decode_object(text: str) -> ParseResult[dict[str, object]]:
    """Decode text as a JSON object."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        return ParseResult.failure(f"invalid JSON: {exc.msg}")
    if not isinstance(data, dict):
        return ParseResult.failure("JSON value is not an object")
    return ParseResult.success(data)


def parse_json_object(text: str | None) -> ParseResult[dict[str, object]]:
    """Run the full extraction pipeline over raw model text."""
    fenced = strip_fence(text)
    if not fenced.ok:
        return ParseResult(error=fenced.error)
    bounded = bound_braces(fenced.unwrap())
    if not bounded.ok:
        return ParseResult(error=bounded.error)
    return decode_object(bounded.unwrap())
