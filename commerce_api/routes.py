"""URL rules that connect the controllers to an application."""

from __future__ import annotations

AUTH_PREFIX = "/api/auth"
USERS_PREFIX = "/api/users"


def register_auth_routes(app, controller):
    """Register the sign-up and sign-in handlers under ``/api/auth``."""
    app.add_url_rule(
        f"{AUTH_PREFIX}/signup", endpoint="auth_sign_up", view_func=controller.sign_up, methods=["POST"]
    )
    app.add_url_rule(
        f"{AUTH_PREFIX}/signin", endpoint="auth_sign_in", view_func=controller.sign_in, methods=["POST"]
    )


def register_user_routes(app, controller):
    """Register the user create, read, update and delete handlers under ``/api/users``."""
    app.add_url_rule(
        f"{USERS_PREFIX}/", endpoint="users_create", view_func=controller.create_user, methods=["POST"]
    )
    app.add_url_rule(
        f"{USERS_PREFIX}/<user_id>",
        endpoint="users_get",
        view_func=controller.get_user_by_id,
        methods=["GET"],
    )
    app.add_url_rule(
        f"{USERS_PREFIX}/<user_id>",
        endpoint="users_update",
        view_func=controller.update_user,
        methods=["PUT"],
    )
    app.add_url_rule(
        f"{USERS_PREFIX}/<user_id>",
        endpoint="users_delete",
        view_func=controller.delete_user,
        methods=["DELETE"],
    )