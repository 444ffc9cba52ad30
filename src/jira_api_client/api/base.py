from __future__ import annotations

import time
from typing import Any, Dict, Optional

import httpx

from ..core.errors import JiraClientError
from ..core.logging import get_logger
from ..core.observability import request_context
from ..core.response import normalize_error
from ..core.settings import JiraClientConfig

logger = get_logger(__name__)


# PUBLIC_INTERFACE
def build_http_client(config: JiraClientConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Create the authenticated AsyncClient rooted at {base_url}/rest/api/{api_version}."""
    return httpx.AsyncClient(
        base_url=config.api_base_url,
        headers=config.headers(),
        timeout=httpx.Timeout(config.timeout_seconds),
        transport=transport,
    )


class BaseApiClient:
    """Authenticated Jira REST transport with the generic verbs.

    Every failure raised from a verb is a JiraError (see core.response.normalize_error).
    Pass http_client to share one connection pool between resource clients; otherwise
    the client owns its own and aclose() releases it.
    """

    def __init__(
        self,
        config: JiraClientConfig,
        http_client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._owns_client = http_client is None
        self._http = http_client if http_client is not None else build_http_client(config, transport)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "BaseApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        operation = f"{type(self).__name__}.{method.lower()}"
        with request_context(operation):
            start = time.perf_counter()
            logger.debug("jira_request_start", extra={"method": method, "path": path})
            try:
                response = await self._http.request(method, path, params=params, json=json)
                response.raise_for_status()
                data = response.json() if response.content else None
            except JiraClientError:
                raise
            except Exception as exc:
                err = normalize_error(exc)
                logger.warning(
                    "jira_request_failed",
                    extra={
                        "method": method,
                        "path": path,
                        "status_code": err.status_code,
                        "code": err.code,
                        "duration_ms": round((time.perf_counter() - start) * 1000.0, 2),
                    },
                )
                raise err from exc
            logger.debug(
                "jira_request_end",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                    "duration_ms": round((time.perf_counter() - start) * 1000.0, 2),
                },
            )
            return data

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post(self, path: str, json: Any = None, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._request("POST", path, params=params, json=json)

    async def put(self, path: str, json: Any = None, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._request("PUT", path, params=params, json=json)

    async def delete(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._request("DELETE", path, params=params)
