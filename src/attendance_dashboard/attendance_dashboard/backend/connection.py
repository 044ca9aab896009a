from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

import requests

from ..core.constants import DEFAULT_BACKEND_TIMEOUT, DEFAULT_BACKEND_URL
from ..core.exceptions import BackendError

logger = logging.getLogger(__name__)

COLLECTION_KEYS = ("data", "files", "employees")


@dataclass
class BackendConfig:
    base_url: str = DEFAULT_BACKEND_URL
    timeout: float = DEFAULT_BACKEND_TIMEOUT


class BackendConnection:
    """Singleton-like HTTP connection to the attendance backend.

    Note: One ``requests.Session`` is shared per app; each call is a single
    short GET so no connection state leaks between requests.
    """

    _instance: Optional["BackendConnection"] = None

    def __init__(self, config: BackendConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json", "Content-Type": "application/json"})

    @classmethod
    def get_instance(cls, config: BackendConfig) -> "BackendConnection":
        if cls._instance is None:
            cls._instance = BackendConnection(config)
        return cls._instance

    @property
    def base_url(self) -> str:
        return self._config.base_url.rstrip("/")

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get_json(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        url = self.url_for(path)
        clean = {k: v for k, v in (params or {}).items() if v not in (None, "")}
        logger.debug("GET %s params=%s", url, clean)

        try:
            resp = self._session.get(url, params=clean, timeout=self._config.timeout)
        except requests.RequestException as e:
            logger.error("Backend request to %s failed: %s", url, e)
            raise BackendError("Cannot reach attendance backend", details=str(e)) from e

        try:
            payload = resp.json()
        except ValueError:
            payload = None

        if isinstance(payload, Mapping) and payload.get("error"):
            logger.warning("Backend reported error for %s: %s", url, payload.get("error"))
            raise BackendError(
                str(payload["error"]),
                details=payload.get("details"),
                status_code=resp.status_code,
            )

        if not resp.ok:
            logger.error("Backend returned HTTP %s for %s", resp.status_code, url)
            raise BackendError(f"Backend returned HTTP {resp.status_code}", status_code=resp.status_code)

        if payload is None:
            raise BackendError("Backend returned a non-JSON response", status_code=resp.status_code)

        return payload


def extract_items(payload: Any, *keys: str) -> list:
    """Pull the record collection out of a response body.

    The backend answers with a bare list, or an object keeping the list under
    ``data`` / ``files`` / ``employees``, sometimes nested one level down.
    """
    if isinstance(payload, list):
        return payload
    if not isinstance(payload, Mapping):
        return []

    for key in keys or COLLECTION_KEYS:
        value = payload.get(key)
        if isinstance(value, list):
            return value
        if isinstance(value, Mapping):
            nested = extract_items(value, *(keys or COLLECTION_KEYS))
            if nested:
                return nested
    return []


def first_present(item: Mapping[str, Any], *names: str, default: Any = "") -> Any:
    """First non-empty value among ``names``, tolerating inconsistent key casing."""
    for name in names:
        value = item.get(name)
        if value not in (None, ""):
            return value
    return default


def stats_from(payload: Any, names: Sequence[str]) -> dict[str, int]:
    if not isinstance(payload, Mapping):
        return {name: 0 for name in names}
    return {name: payload.get(name) or 0 for name in names}
