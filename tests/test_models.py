import pytest

from commerce_api.models import User


def test_round_trip():
    password = "password"
    user = User(id=7, phone_number="user-1", password=password)
    assert User.from_json(user.to_json()) == user


def test_to_json_keys():
    assert set(User().to_json()) == {"id", "phone_number", "password"}


def test_missing_fields_take_zero_values():
    assert User.from_json({}) == User()


def test_null_fields_take_zero_values():
    assert User.from_json({"id": None, "phone_number": None}) == User()


def test_unknown_fields_are_ignored():
    user = User.from_json({"phone_number": "user-2", "extra": [1, 2]})
    assert user.phone_number == "user-2"
    assert user.id == 0


def test_to_json_values():
    password = "password"
    data = User(id=3, phone_number="user-3", password=password).to_json()
    assert data["id"] == 3
    assert data["phone_number"] == "user-3"
    assert data["password"] == password


@pytest.mark.parametrize(
    "data",
    [
        {"phone_number": 5},
        {"password": 5},
        {"id": "1"},
        {"id": -1},
        {"id": 1.5},
        {"id": True},
        {"id": 2**64},
    ],
)
def test_wrong_types_are_rejected(data):
    with pytest.raises(ValueError):
        User.from_json(data)


@pytest.mark.parametrize("data", [None, [], "user", 3])
def test_non_object_is_rejected(data):
    with pytest.raises(ValueError):
        User.from_json(data)