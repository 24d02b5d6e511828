import sys
from datetime import timezone
from typing import List

from faker import Faker

from config import DEFAULT_PICSUM_URL
from models import PRODUCT_CATEGORIES, CartProduct, CreateCartRequest, CreateProductRequest, CreateUserRequest

fake = Faker("en_US")


def seed(value: int) -> None:
    """Make every generator below reproducible (Faker's class-level seed)."""
    Faker.seed(value)


def generate_random_user() -> CreateUserRequest:
    return {
        "email": fake.email(),
        "username": fake.user_name(),
        "password": fake.password(length=8),
        "name": {
            "firstname": fake.first_name(),
            "lastname": fake.last_name(),
        },
        "address": {
            "city": fake.city(),
            "street": fake.street_name(),
            "number": int(fake.building_number()),
            "zipcode": fake.zipcode(),
            "geolocation": {
                "lat": str(fake.latitude()),
                "long": str(fake.longitude()),
            },
        },
        "phone": fake.phone_number(),
    }


def generate_random_product(picsum_url: str = DEFAULT_PICSUM_URL) -> CreateProductRequest:
    return {
        "title": fake.catch_phrase(),
        "price": fake.pyfloat(right_digits=2, positive=True, min_value=1, max_value=1000),
        "description": fake.paragraph(nb_sentences=2),
        "image": f"{picsum_url.rstrip('/')}/400/400",
        "category": fake.random_element(PRODUCT_CATEGORIES),
    }


def generate_cart_products(count: int) -> List[CartProduct]:
    return [
        {"productId": fake.random_int(min=1, max=20), "quantity": fake.random_int(min=1, max=10)}
        for _ in range(count)
    ]


def generate_random_cart() -> CreateCartRequest:
    recent = fake.date_time_between(start_date="-7d", end_date="now", tzinfo=timezone.utc)
    return {
        "userId": fake.random_int(min=1, max=10),
        "date": recent.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "products": generate_cart_products(fake.random_int(min=1, max=5)),
    }


def generate_cart_for_user(user_id: int) -> CreateCartRequest:
    cart = generate_random_cart()
    cart["userId"] = user_id
    cart["products"] = [{"productId": 1, "quantity": 2}, {"productId": 5, "quantity": 1}]
    return cart


def generate_invalid_emails() -> List[str]:
    return [
        "invalid-email",
        "test@",
        "@domain.com",
        "test.domain.com",
        "",
        "test@domain",
        "test space@domain.com",
    ]


def generate_edge_case_strings() -> List[str]:
    return [
        "",
        " ",
        "   ",
        "a" * 1000,
        "!@#$%^&*()_+",
        "12345",
        "null",
        "undefined",
        '<script>alert("xss")</script>',
    ]


def generate_boundary_numbers() -> List[float]:
    # inf is left out: it has no JSON representation
    return [
        0,
        -1,
        1,
        0.01,
        -0.01,
        2 ** 53 - 1,
        -(2 ** 53 - 1),
        sys.float_info.max,
        -sys.float_info.max,
    ]
