# =============================================================================
# tests/test_user_service.py - User Service Tests
# =============================================================================
# This module contains tests for:
# - Path id parsing
# - Create / read / update / delete against the seeded store
# - Error precedence (unknown id before invalid body)
# =============================================================================

import pytest

from app.exceptions import UserNotFoundError, UserValidationError
from core.services.user_service import parse_user_id


class TestParseUserId:
    """Tests for parse_user_id()."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1", 1),
            ("42", 42),
            ("2abc", 2),
            (" 7", 7),
            ("-3", -3),
            ("abc", None),
            ("", None),
            ("0x2", 2),
            ("0X1f", 31),
            ("-0x2", -2),
            ("0x", None),
            ("0xg", None),
            ("٣", None),
            ("2٣", 2),
            (5, 5),
        ],
    )
    def test_parse(self, raw, expected):
        assert parse_user_id(raw) == expected


class TestGetUser:
    """Tests for UserService.get_user()."""

    def test_existing(self, service):
        user = service.get_user("1")

        assert user.id == 1
        assert user.name == "Intza"

    def test_unknown_id(self, service):
        with pytest.raises(UserNotFoundError) as exc_info:
            service.get_user("99")

        assert exc_info.value.status_code == 404

    def test_non_numeric_id(self, service):
        with pytest.raises(UserNotFoundError):
            service.get_user("abc")


class TestCreateUser:
    """Tests for UserService.create_user()."""

    def test_create_assigns_next_id(self, service, store):
        user = service.create_user({"nombre": "Leo"})

        assert user.id == 4
        assert user.name == "Leo"
        assert store.find_by_id(4) is user

    def test_invalid_name_leaves_store_unchanged(self, service, store):
        with pytest.raises(UserValidationError):
            service.create_user({"nombre": "Lu"})

        assert len(store) == 3

    def test_ids_stay_unique_after_delete(self, service, store):
        """Test that a create after a delete never collides."""
        service.delete_user("1")

        user = service.create_user({"nombre": "Leo"})

        ids = [u.id for u in store.all()]
        assert user.id == 4
        assert len(ids) == len(set(ids))


class TestUpdateUser:
    """Tests for UserService.update_user()."""

    def test_replaces_only_name(self, service, store):
        user = service.update_user("2", {"nombre": "Alejandro"})

        assert user.id == 2
        assert user.name == "Alejandro"
        assert store.find_by_id(2).name == "Alejandro"

    def test_unknown_id(self, service):
        with pytest.raises(UserNotFoundError):
            service.update_user("99", {"nombre": "Alejandro"})

    def test_unknown_id_checked_before_body(self, service):
        with pytest.raises(UserNotFoundError):
            service.update_user("99", {})

    def test_invalid_name(self, service, store):
        with pytest.raises(UserValidationError):
            service.update_user("2", {"nombre": "Al"})

        assert store.find_by_id(2).name == "Alex"


class TestDeleteUser:
    """Tests for UserService.delete_user()."""

    def test_removes_exactly_one(self, service, store):
        remaining = service.delete_user("2")

        assert [u.id for u in remaining] == [1, 3]
        assert len(store) == 2

    def test_deleted_user_not_found(self, service):
        service.delete_user("2")

        with pytest.raises(UserNotFoundError):
            service.get_user("2")

    def test_unknown_id(self, service, store):
        with pytest.raises(UserNotFoundError):
            service.delete_user("99")

        assert len(store) == 3

    def test_list_after_delete(self, service):
        service.delete_user("3")

        assert [u.name for u in service.list_users()] == ["Intza", "Alex"]
