import json
import math

import jsonschema
import pytest
from hamcrest import assert_that, ends_with, has_length, is_in

import data_generator
import schemas
from assertions import assert_matches_schema
from models import PRODUCT_CATEGORIES


@pytest.fixture(autouse=True)
def seeded():
    data_generator.seed(1234)


@pytest.mark.parametrize("attempt", range(5))
def test_random_user_matches_create_schema(attempt):
    user = data_generator.generate_random_user()
    assert_matches_schema(user, schemas.create_user, "CreateUser")
    assert "@" in user["email"]
    assert -90 <= float(user["address"]["geolocation"]["lat"]) <= 90
    assert -180 <= float(user["address"]["geolocation"]["long"]) <= 180


@pytest.mark.parametrize("attempt", range(5))
def test_random_product_matches_create_schema(attempt):
    product = data_generator.generate_random_product("https://images.test/")
    assert_matches_schema(product, schemas.create_product, "CreateProduct")
    assert_that(product["category"], is_in(PRODUCT_CATEGORIES))
    assert_that(product["image"], ends_with("/400/400"))
    assert product["image"].startswith("https://images.test/400")


@pytest.mark.parametrize("attempt", range(5))
def test_random_cart_matches_create_schema(attempt):
    cart = data_generator.generate_random_cart()
    assert_matches_schema(cart, schemas.create_cart, "CreateCart")
    assert 1 <= cart["userId"] <= 10
    assert 1 <= len(cart["products"]) <= 5
    assert cart["date"].endswith("Z")


def test_cart_for_user_keeps_user_id():
    cart = data_generator.generate_cart_for_user(7)
    assert cart["userId"] == 7
    assert cart["products"] == [{"productId": 1, "quantity": 2}, {"productId": 5, "quantity": 1}]


def test_seed_makes_generation_reproducible():
    data_generator.seed(99)
    first = data_generator.generate_random_user()
    data_generator.seed(99)
    second = data_generator.generate_random_user()
    assert first == second


def test_negative_input_lists():
    assert_that(data_generator.generate_invalid_emails(), has_length(7))
    edge_cases = data_generator.generate_edge_case_strings()
    assert "" in edge_cases and "a" * 1000 in edge_cases


def test_boundary_numbers_are_json_safe():
    numbers = data_generator.generate_boundary_numbers()
    assert all(math.isfinite(n) for n in numbers)
    # allow_nan=False is how httpx encodes bodies
    json.dumps(numbers, allow_nan=False)


# -----------------------------
# Static fixtures in data/
# -----------------------------

def test_static_samples_match_response_schemas(products_mock, carts_mock, users_mock):
    assert_matches_schema(products_mock["sample"], schemas.product, "Product")
    assert_matches_schema(carts_mock["sample"], schemas.cart, "Cart")
    assert_matches_schema(users_mock["sample"], schemas.user, "User")


def test_static_valid_payloads_match_request_schemas(products_mock, carts_mock, users_mock):
    assert_matches_schema(products_mock["valid_create"], schemas.create_product, "CreateProduct")
    assert_matches_schema(carts_mock["valid_create"], schemas.create_cart, "CreateCart")
    assert_matches_schema(users_mock["valid_create"], schemas.create_user, "CreateUser")


@pytest.mark.parametrize("fixture_name, schema", [
    ("products_mock", schemas.create_product),
    ("carts_mock", schemas.create_cart),
    ("users_mock", schemas.create_user),
])
def test_static_invalid_payloads_fail_request_schemas(request, fixture_name, schema):
    data = request.getfixturevalue(fixture_name)
    for key in ("invalid_create", "invalid_data_types"):
        with pytest.raises(jsonschema.ValidationError):
            jsonschema.validate(instance=data[key], schema=schema)
