from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

URL_EXTENSION = ".TXT"


class RequestKind(str, Enum):
    """Which NOAA bulletin to fetch. The value is the default base address."""

    METAR = "http://tgftp.nws.noaa.gov/data/observations/metar/stations/"
    TAF = "http://tgftp.nws.noaa.gov/data/forecasts/taf/stations/"
    DECODED = "http://tgftp.nws.noaa.gov/data/observations/metar/decoded/"

    @property
    def prefix(self) -> str:
        return self.value


@dataclass(frozen=True)
class Success:
    body: bytes


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class TransportError:
    description: str


FetchOutcome = Union[Success, NotFound, TransportError]


@dataclass(frozen=True)
class StationResult:
    station: str
    kind: RequestKind
    url: str | None
    outcome: FetchOutcome | None  # None when the station ID was rejected
