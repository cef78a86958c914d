"""Testes da validação do formulário de usuário."""

from datetime import datetime, timezone

import pytest

from database import User, UserRole
from web.validation import (
    UserFormData, is_email_taken, validate_user_form,
    EMAIL_TAKEN_ERROR, REQUIRED_FIELDS_ERROR, PASSWORD_REQUIRED_ERROR,
    CHAMBER_REQUIRED_ERROR, INVALID_ROLE_ERROR,
)

CREATED = datetime(2023, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def users():
    return [
        User(id="1", name="A", email="a@x.com", role=UserRole.ADMIN, active=True, created_at=CREATED),
        User(id="2", name="B", email="b@x.com", role=UserRole.CAMARA_ADMIN, active=True,
             created_at=CREATED, chamber_id="1"),
    ]


@pytest.mark.parametrize("email, excluding_id, expected", [
    ("b@x.com", None, True),
    ("b@x.com", "1", True),
    ("b@x.com", "2", False),
    ("c@x.com", None, False),
    ("", None, False),
    ("B@x.com", None, False),
])
def test_is_email_taken(users, email, excluding_id, expected):
    assert is_email_taken(users, email, excluding_id) is expected


def test_valid_new_user_passes(users):
    form = UserFormData(name="C", email="c@x.com", password="pw")

    assert validate_user_form(form, users) is None


def test_editing_keeps_own_email(users):
    form = UserFormData(user_id="1", name="A", email="a@x.com")

    assert validate_user_form(form, users) is None


def test_email_collision_is_checked_first(users):
    form = UserFormData(name="", email="b@x.com", password="")

    assert validate_user_form(form, users) == EMAIL_TAKEN_ERROR


@pytest.mark.parametrize("name, email", [("", "c@x.com"), ("C", ""), ("", "")])
def test_name_and_email_are_required(users, name, email):
    form = UserFormData(name=name, email=email, password="pw")

    assert validate_user_form(form, users) == REQUIRED_FIELDS_ERROR


def test_password_required_only_for_new_users(users):
    assert validate_user_form(UserFormData(name="C", email="c@x.com"), users) == PASSWORD_REQUIRED_ERROR
    assert validate_user_form(UserFormData(user_id="1", name="A", email="a@x.com"), users) is None


def test_chamber_admin_needs_chamber(users):
    form = UserFormData(name="C", email="c@x.com", password="pw", role="camaraAdmin")

    assert validate_user_form(form, users) == CHAMBER_REQUIRED_ERROR

    form.chamber_id = "1"
    assert validate_user_form(form, users) is None


def test_unknown_role_is_rejected(users):
    form = UserFormData(name="C", email="c@x.com", password="pw", role="root")

    assert validate_user_form(form, users) == INVALID_ROLE_ERROR


def test_to_fields_omits_blank_password():
    fields = UserFormData(user_id="1", name="A", email="a@x.com").to_fields()

    assert "password" not in fields
    assert fields["role"] is UserRole.ADMIN


def test_to_fields_drops_chamber_for_global_admin():
    fields = UserFormData(name="A", email="a@x.com", role="admin", chamber_id="1", password="pw").to_fields()

    assert fields["chamber_id"] is None
    assert fields["password"] == "pw"


def test_to_fields_keeps_chamber_for_chamber_admin():
    fields = UserFormData(name="A", email="a@x.com", role="camaraAdmin", chamber_id="1").to_fields()

    assert fields["chamber_id"] == "1"
    assert fields["role"] is UserRole.CAMARA_ADMIN


def test_from_user_never_prefills_password(users):
    user = users[1]
    user.password = "hash"

    form = UserFormData.from_user(user)

    assert form.password == ""
    assert form.user_id == "2"
    assert form.role == "camaraAdmin"
    assert form.chamber_id == "1"
    assert not form.is_new
