# blog_api/services/pagination.py
"""
Pagination & enrichment helpers for listing endpoints.

Page windows follow the classic page/limit contract: skip = (page - 1) * limit.
Raw query values are parsed leniently (leading integer, defaults when absent
or non-numeric); anything below 1 is clamped to 1, limit is capped at
MAX_LIMIT and page is capped so the offset fits a signed 64-bit integer.
"""
import math
import re
import uuid
from typing import Iterable

from tortoise.functions import Count

from blog_api.models.comment import Comment

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
MAX_OFFSET = 2**63 - 1  # BIGINT range of OFFSET in SQLite and PostgreSQL

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _parse_int(raw, default: int) -> int:
    if raw is None:
        return default
    if isinstance(raw, int):
        value = raw
    else:
        match = _LEADING_INT.match(str(raw))
        if not match:
            return default
        digits = match.group(1)
        try:
            value = int(digits)
        except ValueError:
            # Past the interpreter's int string-conversion limit
            value = -MAX_OFFSET if digits.startswith("-") else MAX_OFFSET
    return max(value, 1)


def parse_page_params(page=None, limit=None) -> tuple[int, int]:
    """
    Turn raw page/limit query values into positive integers.

    >>> parse_page_params("2", "abc")
    (2, 10)
    >>> parse_page_params("0", "-5")
    (1, 1)
    >>> parse_page_params("1", "5000")
    (1, 100)
    """
    per_page = min(_parse_int(limit, DEFAULT_LIMIT), MAX_LIMIT)
    max_page = MAX_OFFSET // per_page + 1
    return min(_parse_int(page, DEFAULT_PAGE), max_page), per_page


def paginate(page: int, limit: int) -> tuple[int, int]:
    """Return (skip, limit) for a 1-based page."""
    return (page - 1) * limit, limit


def build_pagination(page: int, limit: int, total: int) -> dict:
    total_pages = math.ceil(total / limit) if limit > 0 else 0
    return {
        "currentPage": page,
        "totalPages": total_pages,
        "totalItems": total,
        "totalPosts": total,  # Kept for the React client
        "hasNext": page < total_pages,
        "hasPrev": page > 1,
    }


async def comment_counts(post_ids: Iterable[uuid.UUID | str]) -> dict[str, int]:
    """
    Count comments for a page of posts with a single grouped query.

    Returns a mapping of str(post_id) -> count; posts without comments map to 0.
    """
    ids = [str(pid) for pid in post_ids]
    counts = {pid: 0 for pid in ids}
    if not ids:
        return counts
    rows = (
        await Comment.filter(post_id__in=ids)
        .annotate(count=Count("id"))
        .group_by("post_id")
        .values("post_id", "count")
    )
    for row in rows:
        counts[str(row["post_id"])] = row["count"]
    return counts
