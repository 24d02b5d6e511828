import logging
from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, Tuple, TypeVar

import httpx

from config import Settings, get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE")
DEFAULT_HEADERS = {"Accept": "application/json"}
# Used when a transport failure carries no HTTP response.
TRANSPORT_ERROR_STATUS = 500


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """
    Normalized outcome of one HTTP call.

    success -- observed status == expected status, and no transport error
    data    -- parsed JSON body whenever one was received, independent of success
    error   -- message for transport failures and unparseable bodies
    status  -- observed status code (500 when the transport gave none)
    """
    success: bool
    status: int
    data: Optional[T] = None
    error: Optional[str] = None


def error_status(exc: Exception) -> int:
    response = getattr(exc, "response", None)
    status = getattr(response, "status_code", None)
    return status if isinstance(status, int) else TRANSPORT_ERROR_STATUS


def error_message(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


def parse_body(response: httpx.Response) -> Tuple[Any, Optional[str]]:
    """
    Returns (data, error). An empty body is not an error; a non-JSON body is.
    """
    if not response.content:
        return None, None
    try:
        return response.json(), None
    except ValueError as e:
        return None, f"Response body is not valid JSON: {e}"


class BaseApiClient:
    """
    Generic resource client: GET/POST/PUT/DELETE against a base URL, each call
    folded into an ApiResponse. HTTP and transport failures never raise.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None, settings: Optional[Settings] = None,
                 base_url: Optional[str] = None):
        self.settings = settings or get_settings()
        self.base_url = (base_url or self.settings.base_url).rstrip("/")
        self.timeout = self.settings.timeout
        self._client = client

    async def request(self, method: str, endpoint: str, *, json: Any = None,
                      params: Optional[Dict[str, Any]] = None, expected_status: int = 200) -> ApiResponse[Any]:
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        url = f"{self.base_url}{endpoint}"
        logger.debug("%s %s params=%s", method, url, params)
        try:
            if self._client is not None:
                response = await self._send(self._client, method, url, json, params)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._send(client, method, url, json, params)
        except httpx.HTTPError as e:
            # Do NOT raise here: tests assert on the envelope
            logger.debug("%s %s failed: %r", method, url, e)
            return ApiResponse(success=False, status=error_status(e), error=error_message(e))

        data, parse_error = parse_body(response)
        status = response.status_code
        logger.debug("%s %s -> %s", method, url, status)
        return ApiResponse(
            success=status == expected_status,
            status=status,
            data=data,
            error=parse_error,
        )

    async def _send(self, client: httpx.AsyncClient, method: str, url: str, json: Any,
                    params: Optional[Dict[str, Any]]) -> httpx.Response:
        kwargs: Dict[str, Any] = {"headers": DEFAULT_HEADERS, "params": params, "timeout": self.timeout}
        if json is not None:
            kwargs["json"] = json
        return await client.request(method, url, **kwargs)

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None,
                  expected_status: int = 200) -> ApiResponse[Any]:
        return await self.request("GET", endpoint, params=params, expected_status=expected_status)

    async def post(self, endpoint: str, body: Any, expected_status: int = 200) -> ApiResponse[Any]:
        return await self.request("POST", endpoint, json=body, expected_status=expected_status)

    async def put(self, endpoint: str, body: Any, expected_status: int = 200) -> ApiResponse[Any]:
        return await self.request("PUT", endpoint, json=body, expected_status=expected_status)

    async def delete(self, endpoint: str, expected_status: int = 200) -> ApiResponse[Any]:
        return await self.request("DELETE", endpoint, expected_status=expected_status)
