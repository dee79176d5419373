from __future__ import annotations

import logging
from typing import Dict, List

import httpx
import pytest

from metar.core.config import Settings, get_settings

METAR_BASE = "http://tgftp.nws.noaa.gov/data/observations/metar/stations/"
TAF_BASE = "http://tgftp.nws.noaa.gov/data/forecasts/taf/stations/"
DECODED_BASE = "http://tgftp.nws.noaa.gov/data/observations/metar/decoded/"

KJFK_METAR = b"2026/10/18 12:51\nKJFK 181251Z 31012KT 10SM FEW250 12/M02 A3012\n"
KLAX_METAR = b"2026/10/18 12:53\nKLAX 181253Z 00000KT 10SM CLR 17/12 A2992\n"
KJFK_TAF = b"2026/10/18 11:20\nTAF KJFK 181120Z 1812/1918 31012KT P6SM FEW250\n"


class FakeNOAA:
    """Serves canned bulletins by URL; everything else is a 404."""

    def __init__(self, pages: Dict[str, bytes]):
        self.pages = pages
        self.requests: List[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        if url in self.pages:
            return httpx.Response(200, content=self.pages[url])
        return httpx.Response(404, text="Not Found")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def cfg() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def noaa() -> FakeNOAA:
    return FakeNOAA({
        METAR_BASE + "KJFK.TXT": KJFK_METAR,
        METAR_BASE + "KLAX.TXT": KLAX_METAR,
        TAF_BASE + "KJFK.TXT": KJFK_TAF,
        DECODED_BASE + "KJFK.TXT": b"JFK decoded\n",
    })


@pytest.fixture(autouse=True)
def reset_metar_logger():
    # configure_logging() turns propagation off, which hides records from caplog
    yield
    logger = logging.getLogger("metar")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
