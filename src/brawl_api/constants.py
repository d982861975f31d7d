"""Constant values shared across the Brawl Stars API client."""
from __future__ import annotations

import re
from enum import IntEnum


__version__ = "0.1.2"

API_URI = "https://api.brawlstars.com/v1/"

USER_AGENT = f"brawl-api/{__version__} (Python; httpx)"

# Format of the timestamps the API returns for battles, e.g. ``20200131T003432.000Z``.
TIMELIKE_FORMAT = "%Y%m%dT%H%M%S.%fZ"

RATELIMIT_RESET_HEADER = "x-ratelimit-reset"
RATELIMIT_LIMIT_HEADER = "x-ratelimit-limit"
RATELIMIT_REMAINING_HEADER = "x-ratelimit-remaining"

# Printable ASCII plus tab; anything else (CR, LF, NUL, non-ASCII) can't go in a header.
HEADER_VALUE_PATTERN = re.compile(r"[\t\x20-\x7e]*")


class Brawlers(IntEnum):
    """Known brawlers and their API ids."""

    SHELLY = 16000000
    COLT = 16000001
    BULL = 16000002
    BROCK = 16000003
    RICO = 16000004
    SPIKE = 16000005
    BARLEY = 16000006
    JESSIE = 16000007
    NITA = 16000008
    DYNAMIKE = 16000009
    EL_PRIMO = 16000010
    MORTIS = 16000011
    CROW = 16000012
    POCO = 16000013
    BO = 16000014
    PIPER = 16000015
    PAM = 16000016
    TARA = 16000017
    DARRYL = 16000018
    PENNY = 16000019
    FRANK = 16000020
    GENE = 16000021
    TICK = 16000022
    LEON = 16000023
    ROSA = 16000024
    CARL = 16000025
    BIBI = 16000026
    EIGHT_BIT = 16000027
    SANDY = 16000028
    BEA = 16000029
    EMZ = 16000030
    MR_P = 16000031
    MAX = 16000032


__all__ = [
    "API_URI",
    "Brawlers",
    "HEADER_VALUE_PATTERN",
    "RATELIMIT_LIMIT_HEADER",
    "RATELIMIT_REMAINING_HEADER",
    "RATELIMIT_RESET_HEADER",
    "TIMELIKE_FORMAT",
    "USER_AGENT",
    "__version__",
]
