from __future__ import annotations

import pytest

from taskm.application.services.tokens import JwtTokenCodec
from taskm.application.use_cases.users.authorize_user import AuthorizeUserUseCase
from taskm.application.use_cases.users.login_user import LoginUserUseCase
from taskm.application.use_cases.users.register_user import RegisterUserUseCase
from taskm.domain.users.exceptions import (
    InvalidCredentialsError,
    MissingCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from taskm.tests.fakes import TEST_SECRET
from taskm.tests.fakes import DeterministicHasher, InMemoryUserRepository


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def tokens() -> JwtTokenCodec:
    return JwtTokenCodec(TEST_SECRET)


@pytest.fixture()
def register(users: InMemoryUserRepository, tokens: JwtTokenCodec) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, tokens=tokens, password_hasher=DeterministicHasher())


@pytest.fixture()
def login(users: InMemoryUserRepository, tokens: JwtTokenCodec) -> LoginUserUseCase:
    return LoginUserUseCase(users=users, tokens=tokens, password_hasher=DeterministicHasher())


def test_register_creates_user_and_returns_token(
    register: RegisterUserUseCase, users: InMemoryUserRepository, tokens: JwtTokenCodec
) -> None:
    user, token = register.execute("a@x.com", "pw1")

    assert user.id == 1
    assert user.email == "a@x.com"
    assert user.password_hash == "hashed:pw1"
    assert users.find_by_email("a@x.com") == user

    identity = tokens.verify(token)
    assert identity.user_id == 1
    assert identity.email == "a@x.com"


def test_register_duplicate_email_rejected(register: RegisterUserUseCase) -> None:
    register.execute("a@x.com", "pw1")

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        register.execute("a@x.com", "other")

    assert exc_info.value.status == 400
    assert exc_info.value.message == "User already exists"


def test_register_email_is_case_sensitive(register: RegisterUserUseCase) -> None:
    first, _ = register.execute("a@x.com", "pw1")
    second, _ = register.execute("A@x.com", "pw1")

    assert first.id != second.id


@pytest.mark.parametrize(("email", "password"), [("", "pw1"), ("a@x.com", ""), ("", "")])
def test_register_requires_both_fields(
    register: RegisterUserUseCase, users: InMemoryUserRepository, email: str, password: str
) -> None:
    with pytest.raises(MissingCredentialsError) as exc_info:
        register.execute(email, password)

    assert exc_info.value.message == "All fields required"
    assert users.find_by_email(email) is None


def test_login_returns_token_for_same_identity(
    register: RegisterUserUseCase, login: LoginUserUseCase, tokens: JwtTokenCodec
) -> None:
    user, _ = register.execute("a@x.com", "pw1")

    token = login.execute("a@x.com", "pw1")

    identity = tokens.verify(token)
    assert identity.user_id == user.id
    assert identity.email == "a@x.com"


def test_login_unknown_email(login: LoginUserUseCase) -> None:
    with pytest.raises(UserNotFoundError) as exc_info:
        login.execute("nobody@x.com", "pw1")

    assert exc_info.value.status == 400
    assert exc_info.value.message == "User not found"


def test_login_wrong_password(register: RegisterUserUseCase, login: LoginUserUseCase) -> None:
    register.execute("a@x.com", "pw1")

    with pytest.raises(InvalidCredentialsError) as exc_info:
        login.execute("a@x.com", "wrong")

    assert exc_info.value.status == 401
    assert exc_info.value.message == "Invalid credentials"


def test_login_requires_both_fields(login: LoginUserUseCase) -> None:
    with pytest.raises(MissingCredentialsError):
        login.execute("a@x.com", "")


def test_authorize_trusts_token_without_user_lookup(
    register: RegisterUserUseCase, tokens: JwtTokenCodec
) -> None:
    _, token = register.execute("a@x.com", "pw1")

    # A fresh, empty repository: authorization never reads it.
    identity = AuthorizeUserUseCase(tokens=tokens).execute(token)

    assert identity.user_id == 1
    assert identity.email == "a@x.com"
