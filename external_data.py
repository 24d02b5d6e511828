"""
Supplementary test data from third-party services.

Every getter here is total: if the upstream service is down, slow, returns a
non-200 or an unexpected body, a fixed local value comes back instead and a
warning is logged. Tests that care about upstream reachability call
validate_external_api_availability() and branch on the snapshot.
"""
import asyncio
import copy
import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import httpx

from config import Settings, get_settings
from logging_helper import log_status
from models import AvailabilitySnapshot, CreateUserRequest

logger = logging.getLogger(__name__)

EXTERNAL_USER_PASSWORD = "external123"
MISSING_LASTNAME = "user"
DEFAULT_STREET_NUMBER = 1

FALLBACK_USER: CreateUserRequest = {
    "email": "mockuser@demo.com",
    "username": "mockuser",
    "password": "mock1234",
    "name": {
        "firstname": "mock",
        "lastname": "user",
    },
    "address": {
        "city": "Demo City",
        "street": "Fake Street",
        "number": 123,
        "zipcode": "00000",
        "geolocation": {
            "lat": "0.0000",
            "long": "0.0000",
        },
    },
    "phone": "123-456-7890",
}
FALLBACK_DESCRIPTION = "Mocked product description used while the quote service is unavailable."
FALLBACK_IMAGE_URL = "https://via.placeholder.com/400x400"


class ExternalServiceError(Exception):
    """An auxiliary service answered, but not with a usable 200."""


def utc_now_iso() -> str:
    # Same shape as JavaScript's Date.toISOString(): millisecond precision, "Z" suffix
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def transform_external_user(record: Dict[str, Any]) -> CreateUserRequest:
    """
    Reshape a JSONPlaceholder user into the storefront's user payload.

    - name is split on whitespace; a single-word name gets MISSING_LASTNAME
    - address.number comes from the digits in address.suite ("Apt. 556" -> 556),
      DEFAULT_STREET_NUMBER when the suite has none or they read as zero
    - geo.lng becomes geolocation.long

    Raises: KeyError / TypeError / IndexError when the record is not shaped
            like a JSONPlaceholder user.
    """
    name_parts = record["name"].split()
    address = record["address"]
    suite_digits = re.sub(r"[^0-9]", "", address["suite"])

    return {
        "email": record["email"],
        "username": record["username"].lower(),
        "password": EXTERNAL_USER_PASSWORD,
        "name": {
            "firstname": name_parts[0].lower(),
            "lastname": name_parts[1].lower() if len(name_parts) > 1 else MISSING_LASTNAME,
        },
        "address": {
            "city": address["city"],
            "street": address["street"],
            "number": int(suite_digits or 0) or DEFAULT_STREET_NUMBER,
            "zipcode": address["zipcode"],
            "geolocation": {
                "lat": address["geo"]["lat"],
                "long": address["geo"]["lng"],
            },
        },
        "phone": record["phone"],
    }


class ExternalDataProvider:

    def __init__(self, client: Optional[httpx.AsyncClient] = None, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._client = client

    async def _get(self, url: str, params: Optional[Dict[str, Any]] = None,
                   follow_redirects: bool = False) -> httpx.Response:
        kwargs = {"params": params, "timeout": self.settings.timeout, "follow_redirects": follow_redirects}
        if self._client is not None:
            return await self._client.get(url, **kwargs)
        async with httpx.AsyncClient() as client:
            return await client.get(url, **kwargs)

    async def _get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        response = await self._get(url, params=params)
        if response.status_code != 200:
            raise ExternalServiceError(f"GET {url} returned {response.status_code}")
        return response.json()

    async def get_random_user_from_json_placeholder(self) -> CreateUserRequest:
        url = f"{self.settings.json_placeholder_url}/users/1"
        try:
            return transform_external_user(await self._get_json(url))
        except Exception as e:
            log_status("warning", "External user unavailable, using mocked user: ", repr(e))
            return copy.deepcopy(FALLBACK_USER)

    async def get_random_quote_for_product_description(self) -> str:
        url = f"{self.settings.quotable_url}/random"
        try:
            quote = await self._get_json(url, params={"maxLength": 100})
            content = quote["content"]
            if not isinstance(content, str):
                raise ExternalServiceError(f"Quote content is not a string: {content!r}")
            return content
        except Exception as e:
            log_status("warning", "External quote unavailable, using mocked description: ", repr(e))
            return FALLBACK_DESCRIPTION

    async def get_random_image_url(self, width: int = 400, height: int = 400) -> str:
        image_url = f"{self.settings.picsum_url}/{width}/{height}"
        try:
            # picsum answers with a redirect to the concrete image
            response = await self._get(image_url, follow_redirects=True)
            if response.status_code != 200:
                raise ExternalServiceError(f"Image not accessible: {response.status_code}")
            return image_url
        except Exception as e:
            log_status("warning", "External image unavailable, using mocked image: ", repr(e))
            return FALLBACK_IMAGE_URL

    async def get_current_date_from_world_time_api(self) -> str:
        url = f"{self.settings.world_time_url}/api/timezone/UTC"
        try:
            time_data = await self._get_json(url)
            utc_datetime = time_data["utc_datetime"]
            if not isinstance(utc_datetime, str):
                raise ExternalServiceError(f"utc_datetime is not a string: {utc_datetime!r}")
            return utc_datetime
        except Exception as e:
            log_status("warning", "External time unavailable, using local clock: ", repr(e))
            return utc_now_iso()

    async def _is_reachable(self, url: str, follow_redirects: bool = False) -> bool:
        try:
            response = await self._get(url, follow_redirects=follow_redirects)
            return response.status_code == 200
        except Exception as e:
            logger.debug("Probe %s failed: %r", url, e)
            return False

    async def validate_external_api_availability(self) -> AvailabilitySnapshot:
        """
        One lightweight GET per service, fired concurrently. Every key is always
        present; a failed probe is recorded as False.
        """
        s = self.settings
        probes = {
            "json_placeholder": self._is_reachable(f"{s.json_placeholder_url}/users/1"),
            "quotable": self._is_reachable(f"{s.quotable_url}/random"),
            "picsum": self._is_reachable(f"{s.picsum_url}/100/100", follow_redirects=True),
            "world_time": self._is_reachable(f"{s.world_time_url}/api/timezone/UTC"),
        }
        results = await asyncio.gather(*probes.values())
        return dict(zip(probes.keys(), results))
