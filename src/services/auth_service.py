"""Auth service: registration and authentication business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import re

import bcrypt

from domain.model.errors import DomainError, DuplicateError, ValidationError
from domain.model.user import User
from port.user_repository import UserRepository

BCRYPT_ROUNDS = 12

_PASSWORD_RULES = [
    (r".{8,}", "Password must be at least 8 characters"),
    (r"[A-Z]", "Password must contain at least one uppercase letter"),
    (r"[a-z]", "Password must contain at least one lowercase letter"),
    (r"[0-9]", "Password must contain at least one number"),
]


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain: str, hashed: str | None) -> bool:
    if not hashed:
        return False
    return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))


def validate_password(password: str) -> None:
    for pattern, message in _PASSWORD_RULES:
        if not re.search(pattern, password):
            raise ValidationError(message)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def register(repo: UserRepository, email: str, password: str, name: str | None = None) -> User:
    """Register a new reader.

    The display name defaults to the local part of the email.

    Raises:
        DuplicateError: email already registered
        ValidationError: password does not meet strength requirements
    """
    email = normalize_email(email)
    if repo.get_by_email(email):
        raise DuplicateError("Email already registered")

    validate_password(password)

    user = repo.create(
        email=email,
        password_hash=hash_password(password),
        name=(name or "").strip() or email.split("@")[0],
    )
    if not user:
        raise DomainError("Failed to create user")
    return user


def authenticate(repo: UserRepository, email: str, password: str) -> User:
    """Authenticate by email and password.

    Raises:
        ValidationError: invalid credentials (does not reveal which part failed)
    """
    user = repo.get_by_email(normalize_email(email))
    if not user or not verify_password(password, user.password_hash):
        raise ValidationError("Invalid email or password")

    repo.update_last_login(user.id)
    return user
