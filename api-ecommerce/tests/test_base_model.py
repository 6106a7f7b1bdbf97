from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select

from ecommerce.infrastructure.database.models.user_model import UserModel


def test_identity_and_timestamps_are_generated(make_user):
    user = make_user("alice@shop.io")

    assert user.id is not None
    assert user.created_at is not None
    assert user.updated_at is not None
    assert user.deleted_at is None
    assert user.is_deleted is False


def test_created_at_cannot_change(make_user):
    user = make_user("alice@shop.io")

    with pytest.raises(ValueError, match="created_at"):
        user.created_at = user.created_at + timedelta(days=1)


def test_updated_at_moves_on_mutation(make_user, session):
    user = make_user("alice@shop.io")
    created_at = user.created_at
    before = user.updated_at

    user.name = "alice"
    session.flush()

    assert user.updated_at >= before
    assert user.created_at == created_at


def test_soft_delete_sets_timestamp_once(make_user):
    user = make_user("alice@shop.io")
    first = datetime(2024, 1, 1, tzinfo=timezone.utc)

    user.soft_delete(first)
    user.soft_delete()

    assert user.deleted_at == first
    assert user.is_deleted is True


def test_soft_delete_cannot_be_cleared(make_user):
    user = make_user("alice@shop.io")
    user.soft_delete()

    with pytest.raises(ValueError, match="deleted_at"):
        user.deleted_at = None


def test_is_deleted_works_in_queries(make_user, session):
    make_user("alice@shop.io")
    make_user("bob@shop.io").soft_delete()
    session.flush()

    deleted = session.execute(select(func.count(UserModel.id)).where(UserModel.is_deleted)).scalar_one()

    assert deleted == 1
