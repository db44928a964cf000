from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import httpx

from src.utils.config import SourceConfig
from src.utils.logging import get_logger


logger = get_logger(component="country_loader")


class CountryLoaderError(Exception):
    pass


class CountrySourceNotFoundError(CountryLoaderError):
    pass


class CountryPayloadError(CountryLoaderError):
    pass


class CountryFetchTimeoutError(CountryLoaderError):
    pass


class CountryFetchError(CountryLoaderError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _ensure_list(payload: Any, *, source: str) -> list[Any]:
    # REST Countries /all returns a bare JSON array
    if not isinstance(payload, list):
        raise CountryPayloadError(f"Expected a JSON array of countries from {source}, got {type(payload).__name__}")
    return payload


def load_countries_file(path: str | Path) -> list[Any]:
    """
    Read an already-downloaded countries.json (REST Countries array).
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise CountrySourceNotFoundError(f"Countries file not found: {p}") from e
    except UnicodeDecodeError as e:
        raise CountryPayloadError(f"Countries file is not UTF-8: {p}: {e}") from e
    except OSError as e:
        raise CountryLoaderError(f"Cannot read countries file {p}: {e}") from e

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise CountryPayloadError(f"Invalid JSON in {p}: {e}") from e

    countries = _ensure_list(payload, source=str(p))
    logger.info("countries_loaded", source="file", path=str(p), count=len(countries))
    return countries


async def fetch_countries(
    *,
    url: str,
    fields: Sequence[str] | None = None,
    timeout_seconds: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[Any]:
    """
    GET the country list from a REST Countries style endpoint.

    `transport` is passed straight to httpx.AsyncClient (tests use MockTransport).
    """
    params = {"fields": ",".join(fields)} if fields else {}

    async with httpx.AsyncClient(timeout=float(timeout_seconds), transport=transport) as client:
        try:
            resp = await client.get(url, params=params)
        except httpx.TimeoutException as e:
            logger.warning("countries_fetch_failed", url=url, reason="timeout")
            raise CountryFetchTimeoutError(f"Request timeout: {url}") from e
        except httpx.RequestError as e:
            logger.warning("countries_fetch_failed", url=url, reason="request_error", error=str(e))
            raise CountryFetchError(f"Request error: {e}") from e

    if resp.status_code < 200 or resp.status_code >= 300:
        logger.warning("countries_fetch_failed", url=url, reason="status", status_code=resp.status_code)
        raise CountryFetchError(f"Unexpected status code: {resp.status_code}", status_code=resp.status_code)

    try:
        payload = resp.json()
    except ValueError as e:
        raise CountryPayloadError(f"Invalid JSON from {url}: {e}") from e

    countries = _ensure_list(payload, source=url)
    logger.info("countries_loaded", source="http", url=url, count=len(countries))
    return countries


async def load_countries(
    config: SourceConfig,
    *,
    prefer_local: bool = True,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[Any]:
    """
    Local file first (when configured and present), otherwise the network.
    """
    if prefer_local and config.local_path and Path(config.local_path).is_file():
        return load_countries_file(config.local_path)

    return await fetch_countries(
        url=config.url,
        fields=config.fields,
        timeout_seconds=config.timeout_seconds,
        transport=transport,
    )
