from http import HTTPStatus

import pytest
from flask import Flask

from commerce_api.auth_service import AuthService
from commerce_api.controllers import AuthController, UserController
from commerce_api.models import User
from commerce_api.routes import register_auth_routes, register_user_routes
from commerce_api.user_service import UserNotFoundError

PHONE = "phone-a"


class FakeUserService:
    def __init__(self):
        self.users = {}

    def create_user(self, user):
        self.users[str(user.id)] = user

    def get_user(self, user_id):
        return self.get_user_by_id(user_id)

    def get_user_by_id(self, user_id):
        try:
            return self.users[user_id]
        except KeyError:
            raise UserNotFoundError("user not found") from None

    def update_user(self, user_id, user):
        self.users[user_id] = user

    def delete_user(self, user_id):
        self.users.pop(user_id, None)


@pytest.fixture
def service():
    return FakeUserService()


@pytest.fixture
def client(service):
    app = Flask(__name__)
    register_auth_routes(app, AuthController(AuthService()))
    register_user_routes(app, UserController(service))
    return app.test_client()


def test_registered_rules():
    app = Flask(__name__)
    register_auth_routes(app, AuthController())
    register_user_routes(app, UserController(FakeUserService()))
    rules = {
        (rule.rule, method)
        for rule in app.url_map.iter_rules()
        if rule.endpoint != "static"
        for method in rule.methods - {"HEAD", "OPTIONS"}
    }
    assert rules == {
        ("/api/auth/signup", "POST"),
        ("/api/auth/signin", "POST"),
        ("/api/users/", "POST"),
        ("/api/users/<user_id>", "GET"),
        ("/api/users/<user_id>", "PUT"),
        ("/api/users/<user_id>", "DELETE"),
    }


def test_signup_route(client):
    response = client.post("/api/auth/signup", json={"phone_number": PHONE})
    assert response.status_code == HTTPStatus.OK
    assert response.get_json()["data"] == {"otp": "123456"}


def test_signin_route_rejects_wrong_otp(client):
    response = client.post("/api/auth/signin", json={"phone_number": PHONE, "otp": "1"})
    assert response.status_code == HTTPStatus.UNAUTHORIZED


def test_signup_only_accepts_post(client):
    response = client.get("/api/auth/signup")
    assert response.status_code == HTTPStatus.METHOD_NOT_ALLOWED


def test_user_lifecycle(client, service):
    user = User(id=3, phone_number=PHONE)
    created = client.post("/api/users/", json=user.to_json())
    assert created.status_code == HTTPStatus.CREATED
    assert service.users["3"] == user

    fetched = client.get("/api/users/3")
    assert fetched.status_code == HTTPStatus.OK
    assert fetched.get_json() == user.to_json()

    changed = User(id=3, phone_number="phone-b")
    updated = client.put("/api/users/3", json=changed.to_json())
    assert updated.status_code == HTTPStatus.OK
    assert client.get("/api/users/3").get_json() == changed.to_json()

    deleted = client.delete("/api/users/3")
    assert deleted.status_code == HTTPStatus.OK
    missing = client.get("/api/users/3")
    assert missing.status_code == HTTPStatus.NOT_FOUND
    assert missing.get_json() == {"error": "User not found"}


def test_user_routes_do_not_require_token(client, service):
    service.users["5"] = User(id=5, phone_number=PHONE)
    response = client.get("/api/users/5")
    assert response.status_code == HTTPStatus.OK
    assert response.get_json()["id"] == 5