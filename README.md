# commerce_api

Building blocks for a small JSON HTTP API on Flask: phone-number sign-in
with one-time codes that yields a signed JWT, a bearer-token check for
views, and user records kept in a MongoDB collection named `users`.

## Installation

```
pip install .
```

## What the package does not do

There is no command and no ready-made application. The package provides
the controllers, the URL registration functions and the services; you
create the Flask application, connect to MongoDB and start the server
yourself, for example:

```python
from flask import Flask

from commerce_api.config import load_config
from commerce_api.controllers import AuthController, UserController
from commerce_api.mongo import connect_mongodb
from commerce_api.routes import register_auth_routes, register_user_routes
from commerce_api.user_service import new_user_service

config = load_config()
connect_mongodb(config.database_url)

app = Flask(__name__)
register_user_routes(app, UserController(new_user_service(config.database_name)))
register_auth_routes(app, AuthController())
app.run(port=int(config.port))
```

The registered routes are not protected by a token check; wrap a view with
`commerce_api.middleware.jwt_required` to require one.

## Configuration

`commerce_api.config.load_config()` loads a `.env` file from the working
directory when one is present (otherwise it logs a warning) and returns a
frozen `Config` with these fields:

| Field           | Variable        | Default                     |
|-----------------|-----------------|-----------------------------|
| `port`          | `PORT`          | `8080`                      |
| `jwt_secret`    | `JWT_SECRET`    | `secret`                    |
| `database_url`  | `DATABASE_URL`  | `mongodb://localhost:27017` |
| `database_name` | `DATABASE_NAME` | `gin-commerce`              |

`get_env(key, default_value)` returns an environment variable or the
default when it is unset.

## Endpoints

### Authentication (`register_auth_routes`)

| Method | Path               | Body                                | Success reply                           |
|--------|--------------------|-------------------------------------|-----------------------------------------|
| POST   | `/api/auth/signup` | `{"phone_number": ...}`             | `200`, `data.otp` holds the code        |
| POST   | `/api/auth/signin` | `{"phone_number": ..., "otp": ...}` | `200`, `data.token` holds a 24-hour JWT |

Replies from these endpoints share one envelope, built by
`commerce_api.responses.send_response` and `send_error`:

```json
{"status": "OK", "message": "Sign in successful", "data": {"token": "token"}}
```

`status` is the standard reason phrase for the HTTP status code, and `data`
is left out of error replies. A body missing a required non-empty string
field gives `400` with `Invalid input`; a wrong code at sign-in gives `401`
with `Invalid OTP`.

### Users (`register_user_routes`)

| Method | Path              | Success reply                                     |
|--------|-------------------|---------------------------------------------------|
| POST   | `/api/users/`     | `201`, `{"message": "User created successfully"}` |
| GET    | `/api/users/<id>` | `200`, the user record                            |
| PUT    | `/api/users/<id>` | `200`, `{"message": "User updated successfully"}` |
| DELETE | `/api/users/<id>` | `200`, `{"message": "User deleted successfully"}` |

A user record (`commerce_api.models.User`) has the fields `id` (a
non-negative integer), `phone_number` and `password`. Failures are reported
as `{"error": "..."}`: `400` for an unreadable body or wrongly typed fields,
`404` when a user is not found and `500` when the database operation fails.

## Modules

- `commerce_api.auth_service` — `AuthService` hands out a fixed one-time
  code (`123456` by default) and, in `validate_otp`, returns an HS256 token
  with `phone_number` and a 24-hour `exp` claim, or raises
  `InvalidOTPError`.
- `commerce_api.otp` — `generate_otp()` returns a random six-digit code;
  `validate_otp(input_otp, generated_otp)` compares two codes in constant
  time.
- `commerce_api.middleware` — `verify_authorization(auth_header)` accepts a
  header such as `Bearer token`, returns the claims of an HMAC-signed token
  checked against `commerce_api.auth_service.JWT_SECRET`, and raises
  `AuthorizationError` otherwise; `jwt_required(view)` answers `401` with
  `{"error": ...}` when that check fails.
- `commerce_api.mongo` — `connect_mongodb(uri)` creates the shared
  `MongoClient` (10-second server selection timeout) and returns it;
  `get_collection(database, collection)` reads from it and raises
  `RuntimeError` before a client exists.
- `commerce_api.user_service` — `UserService` wraps a collection with
  `create_user`, `get_user`, `get_user_by_id`, `update_user` and
  `delete_user`, each under a 5-second operation timeout; lookups that fail
  raise `UserNotFoundError`. `new_user_service(database_name)` binds it to
  the `users` collection.
- `commerce_api.controllers` — `AuthController` and `UserController` hold
  the request handlers listed above.
- `commerce_api.routes` — `register_auth_routes(app, controller)` and
  `register_user_routes(app, controller)` add the URL rules to a Flask app.

## Tests

```
pip install .[test]
pytest
```