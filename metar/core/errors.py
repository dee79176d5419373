# sysexits.h
EX_OK = 0
EX_USAGE = 64


class MetarError(Exception):
    pass


class StationIdError(MetarError, ValueError):
    """A station identifier that can't be turned into a bulletin URL."""

    def __init__(self, station: str, reason: str):
        super().__init__(reason)
        self.station = station
        self.reason = reason


class TransportInitError(MetarError):
    """The HTTP client could not be set up, so nothing can be fetched."""


class UsageError(MetarError):
    pass
