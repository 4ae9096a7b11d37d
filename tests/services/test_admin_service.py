"""AdminService — account management and login against the test DB.

Invariants:
    - passwords are stored only as argon2 hashes
    - every login failure raises InvalidCredentialsError, whatever the cause
"""

from datetime import timedelta

import pytest

from catalog_api.core.errors import (
    ConstraintViolationError, InvalidCredentialsError, ResourceNotFoundError,
)
from catalog_api.core.security import decode_access_token
from catalog_api.models.admin import Admin
from catalog_api.services.admin_service import AdminService

LOGIN_ARGS = {
    "secret": "svc-secret", "algorithm": "HS256",
    "expires_delta": timedelta(minutes=10),
}


async def test_create_stores_hash_not_password(test_db):
    """Stored credential is an argon2 hash."""
    admin = await AdminService(test_db).create("alice", "pa55word")
    assert admin.password_hash != "pa55word"
    assert admin.password_hash.startswith("$argon2")


async def test_create_duplicate_username_rejected(test_db):
    """Second admin with the same username is a conflict."""
    service = AdminService(test_db)
    await service.create("alice", "pa55word")
    with pytest.raises(ConstraintViolationError):
        await service.create("alice", "other")


async def test_login_issues_token_for_admin(test_db):
    """Successful login signs a token for that admin."""
    service = AdminService(test_db)
    admin = await service.create("alice", "pa55word")
    token = await service.login("alice", "pa55word", **LOGIN_ARGS)
    claims = decode_access_token(token, "svc-secret")
    assert claims["sub"] == str(admin.id)
    assert claims["role"] == "admin"


async def test_login_unknown_user_rejected(test_db):
    """Unknown username fails like a wrong password."""
    with pytest.raises(InvalidCredentialsError):
        await AdminService(test_db).login("nobody", "x", **LOGIN_ARGS)


async def test_set_password_replaces_credentials(test_db):
    """Old password stops working once replaced."""
    service = AdminService(test_db)
    await service.create("alice", "pa55word")
    await service.set_password("alice", "n3w-pass")
    with pytest.raises(InvalidCredentialsError):
        await service.login("alice", "pa55word", **LOGIN_ARGS)
    assert await service.login("alice", "n3w-pass", **LOGIN_ARGS)


async def test_delete_removes_admin(test_db):
    """Deleted admin is gone; deleting again is 404."""
    service = AdminService(test_db)
    await service.create("alice", "pa55word")
    await service.delete("alice")
    assert await service.find_by_username("alice") is None
    with pytest.raises(ResourceNotFoundError):
        await service.delete("alice")


async def test_login_against_unhashed_row_rejected(test_db):
    """A row holding plaintext instead of a hash fails login instead of erroring."""
    test_db.add(Admin(username="legacy", password_hash="pa55word"))
    await test_db.commit()
    with pytest.raises(InvalidCredentialsError):
        await AdminService(test_db).login("legacy", "pa55word", **LOGIN_ARGS)
