import os
from dataclasses import dataclass, fields
from functools import lru_cache
from typing import Any, Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://fakestoreapi.com"
DEFAULT_JSONPLACEHOLDER_URL = "https://jsonplaceholder.typicode.com"
DEFAULT_QUOTABLE_URL = "https://api.quotable.io"
DEFAULT_PICSUM_URL = "https://picsum.photos"
DEFAULT_WORLDTIME_URL = "https://worldtimeapi.org"
DEFAULT_TIMEOUT = 30.0
DEFAULT_CONCURRENT_STATUS_TOLERANCE = 2

# field name -> (environment variable, default, cast)
_SOURCES = {
    "base_url": ("BASE_URL", DEFAULT_BASE_URL, str),
    "json_placeholder_url": ("JSONPLACEHOLDER_URL", DEFAULT_JSONPLACEHOLDER_URL, str),
    "quotable_url": ("QUOTABLE_API_URL", DEFAULT_QUOTABLE_URL, str),
    "picsum_url": ("PICSUM_URL", DEFAULT_PICSUM_URL, str),
    "world_time_url": ("WORLDTIME_API_URL", DEFAULT_WORLDTIME_URL, str),
    "timeout": ("API_TIMEOUT", DEFAULT_TIMEOUT, float),
    "concurrent_status_tolerance": ("CONCURRENT_STATUS_TOLERANCE", DEFAULT_CONCURRENT_STATUS_TOLERANCE, int),
}


@dataclass(frozen=True)
class Settings:
    """
    Process-wide configuration for the suite.

    Built once per session by load_settings() and handed to every client.
    Nothing reads the environment after this point.
    """
    base_url: str = DEFAULT_BASE_URL
    json_placeholder_url: str = DEFAULT_JSONPLACEHOLDER_URL
    quotable_url: str = DEFAULT_QUOTABLE_URL
    picsum_url: str = DEFAULT_PICSUM_URL
    world_time_url: str = DEFAULT_WORLDTIME_URL
    timeout: float = DEFAULT_TIMEOUT
    concurrent_status_tolerance: int = DEFAULT_CONCURRENT_STATUS_TOLERANCE


def load_settings(env: Optional[dict] = None, use_dotenv: bool = True, **overrides: Any) -> Settings:
    """
    Purpose:  Resolve every setting with the order explicit override > environment > default.

    - `env` defaults to os.environ; tests pass a plain dict to stay hermetic.
    - A .env file in the working directory is loaded first (python-dotenv never
      overwrites variables that are already set).
    - Overrides that are None are ignored, so callers can forward optional args.

    Raises: TypeError for an unknown override name, ValueError when a numeric
            environment value cannot be cast.
    """
    if use_dotenv and env is None:
        load_dotenv()
    source = os.environ if env is None else env

    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown setting(s): {', '.join(sorted(unknown))}")

    values = {}
    for name, (env_var, default, cast) in _SOURCES.items():
        explicit = overrides.get(name)
        if explicit is not None:
            values[name] = cast(explicit)
            continue
        raw = source.get(env_var)
        if raw is not None and str(raw).strip() != "":
            values[name] = cast(raw)
        else:
            values[name] = default

    for key in ("base_url", "json_placeholder_url", "quotable_url", "picsum_url", "world_time_url"):
        values[key] = values[key].rstrip("/")

    return Settings(**values)


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """The process-wide Settings, resolved from the environment on first use."""
    return load_settings()
