from __future__ import annotations

import logging
import sys
from typing import BinaryIO, Callable, Iterable, List, Optional, Protocol

from metar.core.config import Settings, get_settings
from metar.core.errors import EX_OK, StationIdError
from metar.models.bulletins import (
    FetchOutcome,
    NotFound,
    RequestKind,
    StationResult,
    TransportError,
)
from metar.utils.urls import build_url

logger = logging.getLogger("metar.fetch")


class Fetcher(Protocol):
    def fetch(self, url: str, on_chunk: Optional[Callable[[bytes], None]] = None) -> FetchOutcome: ...


class FetchService:
    """
    Walks the station list in order, printing each bulletin as it arrives.
    Per-station problems are warned about and skipped; they never change the
    exit status.
    """

    def __init__(self, client: Fetcher, cfg: Optional[Settings] = None, out: Optional[BinaryIO] = None):
        self.client = client
        self.cfg = cfg or get_settings()
        self.out = out if out is not None else sys.stdout.buffer
        self.results: List[StationResult] = []

    def _url(self, kind: RequestKind, station: str) -> str:
        return build_url(
            kind,
            station,
            base=self.cfg.url_prefix(kind),
            default_prefix=self.cfg.default_station_prefix,
            extension=self.cfg.url_extension,
        )

    def _emit(self, chunk: bytes) -> None:
        # bulletins already end in a newline; write them untouched
        self.out.write(chunk)
        self.out.flush()

    def run(self, stations: Iterable[str], want_decoded: bool = False, want_taf: bool = False) -> int:
        kind = RequestKind.DECODED if want_decoded else RequestKind.METAR
        for station in stations:
            self._fetch_station(station, kind, want_taf)
        return EX_OK

    def _fetch_station(self, station: str, kind: RequestKind, want_taf: bool) -> None:
        try:
            url = self._url(kind, station)
        except StationIdError as e:
            logger.warning('Invalid station ID "%s": %s', station, e.reason)
            self.results.append(StationResult(station, kind, None, None))
            return

        outcome = self.client.fetch(url, self._emit)
        self.results.append(StationResult(station, kind, url, outcome))

        if isinstance(outcome, NotFound):
            logger.warning('Station ID "%s" not found', station)
            return
        if isinstance(outcome, TransportError):
            logger.warning("%s", outcome.description)
            logger.warning('Unable to fetch information for station ID "%s"', station)
            return

        if want_taf:
            self._fetch_taf(station)

    def _fetch_taf(self, station: str) -> None:
        # best effort: TAFs aren't published for every station, stay quiet
        try:
            url = self._url(RequestKind.TAF, station)
        except StationIdError:
            return
        outcome = self.client.fetch(url, self._emit)
        self.results.append(StationResult(station, RequestKind.TAF, url, outcome))
