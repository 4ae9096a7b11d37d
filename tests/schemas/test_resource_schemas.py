"""Request schema validation — stripping, bounds and email normalization.

Invariants:
    - names are stripped and must be non-empty within the column width
    - price fits numeric(10,2): non-negative, 2 decimal places, 8 whole digits
    - email is a deliverable-shaped address (email-validator), stored lowercased
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from catalog_api.schemas.admin import AdminClaims
from catalog_api.schemas.category import CategoryCreate
from catalog_api.schemas.product import ProductCreate
from catalog_api.schemas.user import UserCreate


def test_category_name_stripped():
    """Surrounding whitespace is removed."""
    assert CategoryCreate(name="  Tools ").name == "Tools"


def test_category_name_whitespace_rejected():
    """Whitespace-only name is empty after stripping."""
    with pytest.raises(ValidationError):
        CategoryCreate(name="   ")


def test_category_name_too_long_rejected():
    """Name longer than the column is rejected."""
    with pytest.raises(ValidationError):
        CategoryCreate(name="x" * 101)


def test_product_defaults_to_no_category():
    """category_id is optional."""
    assert ProductCreate(name="Rake", price=3).category_id is None


@pytest.mark.parametrize(
    "price", [-0.01, 0.005, 1.239, 99_999_999.995, 99_999_999.999, 100_000_000],
)
def test_product_price_outside_column_rejected(price):
    """Negative, sub-cent and 9-digit prices cannot be stored exactly."""
    with pytest.raises(ValidationError):
        ProductCreate(name="Rake", price=price)


@pytest.mark.parametrize("price", [0, 19.99, "0.10", 99_999_999.99])
def test_product_price_within_column_accepted(price):
    """Anything numeric(10,2) holds exactly is kept as that Decimal."""
    assert ProductCreate(name="Rake", price=price).price == Decimal(str(price))


def test_user_email_normalized():
    """Email is trimmed and lowercased."""
    assert UserCreate(name="Ada", email=" ADA@Example.com").email == "ada@example.com"


@pytest.mark.parametrize(
    "email",
    [
        "ada", "ada@", "@example.com", "ada@example",
        "a@b..com", "a@-x.com", "a..b@x.com", "a@x.c,om",
    ],
)
def test_user_email_shape_rejected(email):
    """Malformed local parts and domains are refused."""
    with pytest.raises(ValidationError):
        UserCreate(name="Ada", email=email)


def test_user_email_too_long_rejected():
    """Addresses wider than users.email are refused."""
    with pytest.raises(ValidationError):
        UserCreate(name="Ada", email="a" * 64 + "@" + ".".join(["b" * 60] * 4) + ".com")


def test_claims_expose_integer_admin_id():
    """sub is exposed as an int admin id."""
    claims = AdminClaims(sub="12", username="root", role="admin", exp=1)
    assert claims.admin_id == 12
