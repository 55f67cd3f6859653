"""
HTTP client for the authorization engine read API.

Reads are issued as ``POST {base_url}/v1/namespaces/{namespace}/read``. The engine
itself exposes reads over gRPC; this route is the contract assumed for an HTTP
gateway in front of it, not the engine's native API. Each call returns a single
page; paging is driven by the caller.
"""
import logging
from typing import Optional
from urllib.parse import quote

import httpx

from ...config.settings import DualWriteSettings
from ...core.exceptions import AuthzReadError, AuthzResponseError, TupleFormatError
from .models import ReadRequestBody, ReadResponseBody
from .protocols import ReadRequest, ReadResponse

logger = logging.getLogger(__name__)


class HttpAuthzClient:
    """Authorization engine client over HTTP using httpx."""

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """Initialize the client.

        Args:
            base_url: Engine base URL
            token: Optional bearer token
            timeout: Request timeout in seconds
            http_client: Preconfigured client, left open by ``close()``
        """
        self._base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        if http_client is None:
            headers = {"Authorization": f"Bearer {token}"} if token else {}
            http_client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=timeout,
                headers=headers,
            )
        self._http_client = http_client

    @classmethod
    def from_settings(cls, settings: DualWriteSettings) -> "HttpAuthzClient":
        return cls(
            settings.authz_url,
            token=settings.authz_token,
            timeout=settings.authz_timeout_seconds,
        )

    async def read(self, request: ReadRequest) -> ReadResponse:
        """Read one page of tuples for an object and relation.

        Raises:
            AuthzReadError: On transport failures and non-2xx responses
            AuthzResponseError: If the response body is not a valid read response
        """
        path = f"/v1/namespaces/{quote(request.namespace, safe='')}/read"
        body = ReadRequestBody.from_request(request).model_dump(exclude_none=True)

        try:
            response = await self._http_client.post(path, json=body)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Authz read {request.object}#{request.relation} returned {e.response.status_code}"
            )
            raise AuthzReadError(
                request.object,
                request.relation,
                e.response.text or str(e),
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Authz read {request.object}#{request.relation} failed: {e}")
            raise AuthzReadError(request.object, request.relation, str(e) or type(e).__name__) from e

        try:
            payload = ReadResponseBody.model_validate(response.json())
            return payload.to_read_response()
        except (ValueError, TupleFormatError) as e:
            raise AuthzResponseError(
                f"Invalid read response for {request.object}#{request.relation}: {e}",
                details={"object": request.object, "relation": request.relation},
            ) from e

    async def close(self) -> None:
        if self._owns_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "HttpAuthzClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
