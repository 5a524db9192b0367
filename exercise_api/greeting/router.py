"""FastAPI router for the greeting and sum endpoints.

Repeated query parameters resolve to their first occurrence
(``/hello?name=a&name=b`` greets ``a``).
"""

import re
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from exercise_api.exceptions import InvalidParametersError

INTEGER_RE = re.compile(r"[+-]?[0-9]+")

router = APIRouter(tags=["greeting"])


def first_query_value(request: Request, key: str) -> Optional[str]:
    """Return the first value of query parameter ``key``, or None."""
    values = request.query_params.getlist(key)
    return values[0] if values else None


def greet(name: Optional[str]) -> str:
    """Return ``Hello world`` for a missing or empty name, else ``Hello <name>!``."""
    if not name:
        return "Hello world"
    return f"Hello {name}!"


def parse_int(value: Optional[str]) -> int:
    """Parse a signed base-10 integer made of ASCII digits.

    Raises:
        ValueError: If ``value`` is missing or not an integer.
    """
    if value is None or not INTEGER_RE.fullmatch(value):
        raise ValueError(f"not an integer: {value!r}")
    return int(value)


@router.get("/hello", response_class=PlainTextResponse)
async def hello_endpoint(request: Request) -> str:
    return greet(first_query_value(request, "name"))


@router.get("/sum", response_class=PlainTextResponse)
async def sum_endpoint(request: Request) -> str:
    """Add the integer query parameters ``x`` and ``y``.

    Raises:
        InvalidParametersError: If either parameter is not an integer.
    """
    try:
        total = parse_int(first_query_value(request, "x")) + parse_int(first_query_value(request, "y"))
    except ValueError as exc:
        raise InvalidParametersError(
            "Invalid parameters: x and y must be numbers."
        ) from exc
    return str(total)
