from __future__ import annotations

import logging
from typing import Callable, List, Optional

import httpx

from metar.core.config import Settings, get_settings
from metar.core.errors import TransportInitError
from metar.models.bulletins import FetchOutcome, NotFound, Success, TransportError

HTTP_NOT_FOUND = 404

logger = logging.getLogger("metar.clients")


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class BulletinClient:
    """
    One GET per call against the NOAA text server. The underlying httpx.Client
    is built once and shared by every request in a run; use it as a context
    manager so the connection pool is closed on every exit path.
    """

    def __init__(
        self,
        cfg: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.cfg = cfg or get_settings()
        try:
            self._client = httpx.Client(
                timeout=self.cfg.http_timeout_seconds,
                follow_redirects=self.cfg.follow_redirects,
                headers={"User-Agent": self.cfg.user_agent},
                transport=transport,
            )
        except (httpx.HTTPError, httpx.InvalidURL, ValueError, OSError) as e:
            # bad proxy env vars, unreadable CA bundle, ...
            raise TransportInitError(f"Unable to set up HTTP client: {e}") from e

    def __enter__(self) -> "BulletinClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()
    def fetch(self, url: str, on_chunk: Optional[Callable[[bytes], None]] = None) -> FetchOutcome:
        """
        GET url and classify the result. The status is checked before any of
        the body is read; on success each chunk goes to on_chunk as it
        arrives. The full body is also returned in Success.
        """
        logger.debug("GET %s", url)
        chunks: List[bytes] = []
        try:
            with self._client.stream("GET", url) as r:
                logger.debug("GET %s -> %s", url, r.status_code)
                if r.status_code == HTTP_NOT_FOUND:
                    return NotFound()
                if not r.is_success:
                    return TransportError(
                        f"HTTP response code said error: {r.status_code} {r.reason_phrase}".rstrip()
                    )
                for chunk in r.iter_bytes():
                    chunks.append(chunk)
                    if on_chunk is not None:
                        on_chunk(chunk)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            # a failure mid-body leaves whatever was already passed to on_chunk
            logger.debug("GET %s failed: %r", url, e)
            return TransportError(_describe(e))
        return Success(b"".join(chunks))
