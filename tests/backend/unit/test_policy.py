"""
Unit tests for the owner-or-admin authorization policy.
"""
import uuid

import pytest

from blog_api.core.errors import ForbiddenError
from blog_api.core.policy import Identity, can_mutate, ensure_can_mutate, owner_filter

OWNER = "11111111-1111-1111-1111-111111111111"
OTHER = "22222222-2222-2222-2222-222222222222"


@pytest.mark.parametrize(
    "requester_id, role, expected",
    [
        (OWNER, "user", True),    # owner, non-admin
        (OWNER, "admin", True),   # owner, admin
        (OTHER, "admin", True),   # non-owner, admin
        (OTHER, "user", False),   # non-owner, non-admin
    ],
)
def test_can_mutate_truth_table(requester_id, role, expected):
    assert can_mutate(OWNER, requester_id, role) is expected


def test_can_mutate_compares_uuid_and_string_ids():
    assert can_mutate(uuid.UUID(OWNER), OWNER, "user") is True


def test_ensure_can_mutate_raises_forbidden_with_message():
    with pytest.raises(ForbiddenError) as exc_info:
        ensure_can_mutate(OWNER, Identity(OTHER, "o@example.com", "user"), "You can only edit your own posts")
    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "You can only edit your own posts"


def test_owner_filter():
    assert owner_filter(Identity(OWNER, "a@example.com", "user")) == {"author_id": OWNER}
    assert owner_filter(Identity(OWNER, "a@example.com", "admin")) == {}
