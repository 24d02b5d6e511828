from typing import List, TypedDict

PRODUCT_CATEGORIES = ["electronics", "jewelery", "men's clothing", "women's clothing"]


class Rating(TypedDict):
    rate: float
    count: int


class CreateProductRequest(TypedDict):
    title: str
    price: float
    description: str
    image: str
    category: str


class UpdateProductRequest(TypedDict, total=False):
    id: int
    title: str
    price: float
    description: str
    image: str
    category: str


class _ProductOptional(TypedDict, total=False):
    rating: Rating


class Product(CreateProductRequest, _ProductOptional):
    id: int


class CartProduct(TypedDict):
    productId: int
    quantity: int


class CreateCartRequest(TypedDict):
    userId: int
    date: str
    products: List[CartProduct]


class UpdateCartRequest(TypedDict, total=False):
    id: int
    userId: int
    date: str
    products: List[CartProduct]


# "__v" cannot be declared with class syntax (name mangling)
Cart = TypedDict("Cart", {
    "id": int,
    "userId": int,
    "date": str,
    "products": List[CartProduct],
    "__v": int,
}, total=False)


class Geolocation(TypedDict):
    lat: str
    long: str


class Address(TypedDict):
    city: str
    street: str
    number: int
    zipcode: str
    geolocation: Geolocation


class Name(TypedDict):
    firstname: str
    lastname: str


class CreateUserRequest(TypedDict):
    email: str
    username: str
    password: str
    name: Name
    address: Address
    phone: str


class UpdateUserRequest(TypedDict, total=False):
    email: str
    username: str
    password: str
    name: Name
    address: Address
    phone: str


class User(CreateUserRequest):
    id: int


class LoginCredentials(TypedDict):
    username: str
    password: str


class AuthResponse(TypedDict):
    token: str


class AvailabilitySnapshot(TypedDict):
    json_placeholder: bool
    quotable: bool
    picsum: bool
    world_time: bool
