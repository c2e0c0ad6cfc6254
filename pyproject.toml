[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "commerce_api"
version = "0.1.0"
description = "Flask building blocks for a JSON API with phone-number OTP sign-in, JWT checks and MongoDB-backed user storage."
requires-python = ">=3.10"
keywords = ["flask", "api", "jwt", "otp", "mongodb", "users", "authentication"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask>=2.2",
    "pymongo>=4.2",
    "pyjwt>=2.4",
    "python-dotenv>=0.21",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["commerce_api"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
