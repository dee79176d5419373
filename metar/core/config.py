import functools
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

from metar import __version__
from metar.models.bulletins import RequestKind, URL_EXTENSION

class Settings(BaseSettings):
    # .env is read from wherever metar is run; other tools' keys are not ours
    model_config = SettingsConfigDict(
        env_prefix="METAR_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # NOAA text bulletins
    metar_url_prefix: str = Field(default=RequestKind.METAR.prefix)
    taf_url_prefix: str = Field(default=RequestKind.TAF.prefix)
    decoded_url_prefix: str = Field(default=RequestKind.DECODED.prefix)
    url_extension: str = Field(default=URL_EXTENSION)

    # Prepended to short station IDs (KJFK from JFK)
    default_station_prefix: str = Field(default="K")

    # Network
    http_timeout_seconds: float = Field(default=3.0, gt=0)
    follow_redirects: bool = Field(default=True)
    user_agent: str = Field(default=f"metar/{__version__}")

    log_level: str = Field(default="WARNING")

    @field_validator("default_station_prefix")
    @classmethod
    def _check_prefix(cls, v: str) -> str:
        v = v.strip().upper()
        if len(v) > 3 or (v and not (v.isascii() and v.isalnum())):
            raise ValueError("default_station_prefix must be 0 to 3 alphanumeric characters")
        return v

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, v: str) -> str:
        v = v.strip().upper()
        # getLevelName maps known names to their int, anything else to a string
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"unknown log level {v!r}")
        return v

    def url_prefix(self, kind: RequestKind) -> str:
        return {
            RequestKind.METAR: self.metar_url_prefix,
            RequestKind.TAF: self.taf_url_prefix,
            RequestKind.DECODED: self.decoded_url_prefix,
        }[kind]


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Built on first use rather than at import, so a bad METAR_* value or .env
    entry is reported by the CLI instead of failing the import.
    """
    return Settings()
