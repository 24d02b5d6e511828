from typing import List

from api_helpers import ApiResponse, BaseApiClient
from models import (
    AuthResponse,
    Cart,
    CreateCartRequest,
    CreateProductRequest,
    CreateUserRequest,
    LoginCredentials,
    Product,
    UpdateCartRequest,
    UpdateProductRequest,
    UpdateUserRequest,
    User,
)


def validate_token_format(token: str) -> bool:
    """Structural JWT check: three non-empty dot-separated segments. Not cryptographic."""
    parts = token.split(".")
    return len(parts) == 3 and all(len(part) > 0 for part in parts)


class ProductsApi(BaseApiClient):

    async def get_all_products(self) -> ApiResponse[List[Product]]:
        return await self.get("/products")

    async def get_product_by_id(self, product_id: int) -> ApiResponse[Product]:
        return await self.get(f"/products/{product_id}")

    async def get_products_by_category(self, category: str) -> ApiResponse[List[Product]]:
        return await self.get(f"/products/category/{category}")

    async def get_all_categories(self) -> ApiResponse[List[str]]:
        return await self.get("/products/categories")

    async def create_product(self, product_data: CreateProductRequest) -> ApiResponse[Product]:
        return await self.post("/products", product_data)

    async def update_product(self, product_id: int, product_data: UpdateProductRequest) -> ApiResponse[Product]:
        return await self.put(f"/products/{product_id}", product_data)

    async def delete_product(self, product_id: int) -> ApiResponse[Product]:
        return await self.delete(f"/products/{product_id}")

    async def get_products_with_limit(self, limit: int, sort: str = "asc") -> ApiResponse[List[Product]]:
        return await self.get("/products", params={"limit": limit, "sort": sort})


class CartsApi(BaseApiClient):

    async def get_all_carts(self) -> ApiResponse[List[Cart]]:
        return await self.get("/carts")

    async def get_cart_by_id(self, cart_id: int) -> ApiResponse[Cart]:
        return await self.get(f"/carts/{cart_id}")

    async def get_carts_by_user_id(self, user_id: int) -> ApiResponse[List[Cart]]:
        return await self.get(f"/carts/user/{user_id}")

    async def create_cart(self, cart_data: CreateCartRequest) -> ApiResponse[Cart]:
        return await self.post("/carts", cart_data)

    async def update_cart(self, cart_id: int, cart_data: UpdateCartRequest) -> ApiResponse[Cart]:
        return await self.put(f"/carts/{cart_id}", cart_data)

    async def delete_cart(self, cart_id: int) -> ApiResponse[Cart]:
        return await self.delete(f"/carts/{cart_id}")

    async def get_carts_by_date_range(self, start_date: str, end_date: str) -> ApiResponse[List[Cart]]:
        # Dates go out as given; the remote API decides what a valid range is
        return await self.get("/carts", params={"startdate": start_date, "enddate": end_date})

    async def get_carts_with_limit(self, limit: int, sort: str = "asc") -> ApiResponse[List[Cart]]:
        return await self.get("/carts", params={"limit": limit, "sort": sort})


class UsersApi(BaseApiClient):

    async def get_all_users(self) -> ApiResponse[List[User]]:
        return await self.get("/users")

    async def get_user_by_id(self, user_id: int) -> ApiResponse[User]:
        return await self.get(f"/users/{user_id}")

    async def create_user(self, user_data: CreateUserRequest) -> ApiResponse[User]:
        return await self.post("/users", user_data)

    async def update_user(self, user_id: int, user_data: UpdateUserRequest) -> ApiResponse[User]:
        return await self.put(f"/users/{user_id}", user_data)

    async def delete_user(self, user_id: int) -> ApiResponse[User]:
        return await self.delete(f"/users/{user_id}")

    async def get_users_with_limit(self, limit: int, sort: str = "asc") -> ApiResponse[List[User]]:
        return await self.get("/users", params={"limit": limit, "sort": sort})


class AuthApi(BaseApiClient):

    async def login(self, credentials: LoginCredentials) -> ApiResponse[AuthResponse]:
        return await self.post("/auth/login", credentials)

    @staticmethod
    def validate_token_format(token: str) -> bool:
        return validate_token_format(token)
