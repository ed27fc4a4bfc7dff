"""Normalization of raw modem cell data into a cell identity."""

from __future__ import annotations

import re

from .models import CellIdentity, RawNetworkInfo

_HEX_RE = re.compile(r"[0-9A-Fa-f]+")


class NormalizationError(Exception):
    """Raw cell data could not be normalized."""


class HexDecodeError(NormalizationError):
    """A LAC or CID value is not a hexadecimal string."""


class MalformedNetworkCode(NormalizationError):
    """A network code does not contain both MCC and MNC."""


def hex_to_decimal(value: str) -> int:
    """Convert an unprefixed, most significant digit first hex string."""
    if not _HEX_RE.fullmatch(value):
        raise HexDecodeError(f"Invalid hexadecimal value: {value!r}")
    return int(value, 16)


def split_network_code(network_code: str) -> tuple[str, str]:
    """Split "MCC MNC" into its two parts.

    Tokens after the MNC are ignored. Tokens are separated by exactly one
    space, so an empty token between two spaces is a missing MNC.
    """
    parts = network_code.split(" ", 2)
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise MalformedNetworkCode(f"Malformed network code: {network_code!r}")
    return parts[0], parts[1]


def normalize(raw: RawNetworkInfo) -> CellIdentity:
    """Build a cell identity from raw modem output."""
    mcc, mnc = split_network_code(raw.network_code)
    return CellIdentity(
        mcc=mcc,
        mnc=mnc,
        lac=hex_to_decimal(raw.lac),
        cid=hex_to_decimal(raw.cid),
    )
