from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Tuple

import httpx
import structlog

from meme_api.config import CONNECT_TIMEOUT, RequestConfig
from meme_api.types import ErrorCategory, MemeError, MemeInfo


def _categorize_exception(exc: Exception) -> MemeError:
    if isinstance(exc, httpx.TimeoutException):
        return MemeError(ErrorCategory.TIMEOUT, str(exc) or "request timed out")
    if isinstance(exc, httpx.TransportError):
        return MemeError(ErrorCategory.CONNECTION, str(exc) or exc.__class__.__name__)
    return MemeError(ErrorCategory.UNKNOWN, f"{type(exc).__name__}: {exc}")


class MemeAPI:
    """
    Client for a meme-generator-rs backend.

    Endpoints used:
      GET  /meme/version      -> "0.2.2"
      GET  /meme/infos        -> [{"key": ..., "params": ..., ...}, ...]
      POST /memes/{key}       -> {"image_id": ...}
      GET  /image/{image_id}  -> image bytes

    Every failure surfaces as MemeError; HTTP errors keep their status so
    callers can tell a missing endpoint (old backend) from a broken one.
    """

    def __init__(
        self,
        config: Optional[RequestConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or RequestConfig()
        self._logger = structlog.get_logger("meme_api").bind(
            base_url=self.config.effective_base_url
        )
        self._client = httpx.AsyncClient(
            base_url=self.config.effective_base_url,
            timeout=httpx.Timeout(self.config.effective_timeout, connect=CONNECT_TIMEOUT),
            headers=dict(self.config.headers),
            transport=transport,
        )

    async def __aenter__(self) -> "MemeAPI":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise _categorize_exception(exc) from exc

        if resp.status_code >= 400:
            self._logger.debug("meme_api_http_error", path=path, status=resp.status_code)
            raise MemeError(
                ErrorCategory.BACKEND,
                f"{method} {path} failed",
                http_status=resp.status_code,
                raw_backend=resp.text,
            )
        return resp

    @staticmethod
    def _json(resp: httpx.Response) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            raise MemeError(
                ErrorCategory.PARSE, f"Invalid JSON from {resp.request.url.path}", raw_backend=resp.text
            ) from exc

    async def get_version(self) -> str:
        resp = await self._request("GET", "/meme/version")
        # Some deployments answer with a bare string instead of a JSON one
        try:
            data = resp.json()
        except ValueError:
            data = resp.text
        if not isinstance(data, (str, int, float)):
            raise MemeError(ErrorCategory.PARSE, "Unexpected version payload", raw_backend=data)
        return str(data).strip()

    async def get_infos(self) -> Dict[str, MemeInfo]:
        resp = await self._request("GET", "/meme/infos")
        data = self._json(resp)
        if not isinstance(data, list):
            raise MemeError(ErrorCategory.PARSE, "Expected a list of meme infos", raw_backend=data)
        infos: Dict[str, MemeInfo] = {}
        for item in data:
            info = MemeInfo.from_dict(item)
            infos[info.key] = info
        return infos

    async def fetch_capabilities(self) -> Tuple[Dict[str, MemeInfo], str]:
        # version first: backends that predate /meme/infos 404 here or there
        version = await self.get_version()
        infos = await self.get_infos()
        self._logger.debug("meme_api_capabilities_fetched", version=version, count=len(infos))
        return infos, version

    async def render_meme(
        self,
        key: str,
        texts: Iterable[str] = (),
        options: Optional[Dict[str, Any]] = None,
    ) -> bytes:
        payload = {"images": [], "texts": list(texts), "options": options or {}}
        resp = await self._request("POST", f"/memes/{key}", json=payload)
        data = self._json(resp)
        image_id = data.get("image_id") if isinstance(data, dict) else None
        if not image_id:
            raise MemeError(ErrorCategory.PARSE, "Render response without image_id", raw_backend=data)
        image = await self._request("GET", f"/image/{image_id}")
        return image.content
