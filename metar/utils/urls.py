from __future__ import annotations

from typing import Optional

from metar.core.errors import StationIdError
from metar.models.bulletins import RequestKind, URL_EXTENSION

STATION_ID_LEN = 4
DEFAULT_STATION_PREFIX = "K"

BAD_LENGTH = "Station ID must be either three or four characters long."
BAD_CHARS = "Station ID must contain only alphanumeric characters."


def _is_alnum(ch: str) -> bool:
    # str.isalnum() also accepts non-ASCII letters/digits
    return ch.isascii() and ch.isalnum()


def build_url(
    kind: RequestKind,
    station: str,
    *,
    base: Optional[str] = None,
    default_prefix: str = DEFAULT_STATION_PREFIX,
    extension: str = URL_EXTENSION,
) -> str:
    """
    <base for kind><STATION><extension>, e.g.
    http://tgftp.nws.noaa.gov/data/observations/metar/stations/KJFK.TXT

    Three-letter IDs get the default prefix (LAX -> KLAX). Raises
    StationIdError for anything else that isn't a 4-char alphanumeric ID.
    """
    short_len = STATION_ID_LEN - len(default_prefix)
    if len(station) not in (STATION_ID_LEN, short_len):
        if len(default_prefix) == 1:
            raise StationIdError(station, BAD_LENGTH)
        if not default_prefix:
            raise StationIdError(station, f"Station ID must be {STATION_ID_LEN} characters long.")
        raise StationIdError(
            station,
            f"Station ID must be either {short_len} or {STATION_ID_LEN} characters long.",
        )
    if not all(_is_alnum(c) for c in station):
        raise StationIdError(station, BAD_CHARS)

    field = station.upper()
    if len(field) == short_len:
        field = default_prefix.upper() + field

    prefix = kind.prefix if base is None else base
    url = f"{prefix}{field}{extension}"
    assert len(url) == len(prefix) + STATION_ID_LEN + len(extension)
    return url
