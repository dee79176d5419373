from __future__ import annotations

import argparse
import logging
import sys
from typing import List, NoReturn, Optional

import httpx
from pydantic import ValidationError

from metar.clients.bulletins import BulletinClient
from metar.core.config import Settings, get_settings
from metar.core.errors import EX_OK, EX_USAGE, TransportInitError, UsageError
from metar.core.logging import configure_logging
from metar.services.fetch_service import FetchService

USAGE = (
    "usage: metar [-dt] station_id [...]\n"
    "\t-d Show decoded METAR output\n"
    "\t-t Show TAFs where available\n"
)


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="metar", add_help=False, allow_abbrev=False)
    parser.add_argument("-d", dest="decoded", action="store_true")
    parser.add_argument("-t", dest="tafs", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("stations", nargs="*")
    return parser


def usage() -> int:
    sys.stderr.write(USAGE)
    return EX_USAGE


def main(
    argv: Optional[List[str]] = None,
    cfg: Optional[Settings] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> int:
    logger = configure_logging()
    if cfg is None:
        try:
            cfg = get_settings()
        except ValidationError as e:
            for err in e.errors():
                field = ".".join(str(p) for p in err["loc"])
                logger.warning("Bad setting METAR_%s: %s", field.upper(), err["msg"])
            return EX_USAGE
    logger.setLevel(cfg.log_level)

    try:
        args = build_parser().parse_args(argv)
    except UsageError as e:
        logger.warning("%s", e)
        return usage()

    if args.help:
        sys.stdout.write(USAGE)
        return EX_OK
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    if not args.stations:
        logger.warning("At least one argument is required")
        return usage()

    try:
        with BulletinClient(cfg, transport=transport) as client:
            return FetchService(client, cfg).run(args.stations, want_decoded=args.decoded, want_taf=args.tafs)
    except TransportInitError as e:
        logger.warning("%s", e)
        return EX_USAGE


def run() -> NoReturn:
    sys.exit(main())
