import math
from dataclasses import dataclass
from typing import Any, Sequence


@dataclass
class Page:
    items: list[Any]
    total_pages: int
    current_page: int


def parse_positive_int(raw: str | None, default: int) -> int:
    """Lenient query parsing for page and limit values.

    Decimal and exponent forms are accepted and truncated toward zero
    (``"2.5"`` is 2, ``"1e1"`` is 10). Anything non-numeric, non-finite,
    written with digit separators, or below 1 after truncation gives ``default``.
    """
    if raw is None:
        return default
    raw = raw.strip()
    if not raw or "_" in raw:
        return default
    try:
        number = float(raw)
    except ValueError:
        return default
    if not math.isfinite(number):
        return default
    value = int(number)
    return value if value >= 1 else default


def list_page(page: int | None, limit: int | None, source: Sequence[Any], default_limit: int) -> Page:
    if not limit or limit < 1:
        limit = default_limit
    if not page:
        page = 1

    total_pages = max(1, math.ceil(len(source) / limit))
    current_page = min(max(page, 1), total_pages)

    start = (current_page - 1) * limit
    return Page(
        items=list(source[start:start + limit]),
        total_pages=total_pages,
        current_page=current_page,
    )
