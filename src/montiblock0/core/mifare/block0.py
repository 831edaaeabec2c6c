"""Block 0 construction for MIFARE Classic 1K emulation.

The block is laid out as UID (4), BCC (1), SAK (1), ATQA (2) and an
8-byte signature. Only the UID varies; everything else is either derived
from it (BCC) or constant.

These functions are pure: no logging, no I/O.
"""

from __future__ import annotations

from montiblock0.core.mifare.errors import InvalidUidLength
from montiblock0.core.mifare.types import UID_LENGTH, Block0


def parse_uid(uid_text: str) -> bytes:
    """Decode a hex UID such as ``"DE AD BE EF"`` into exactly 4 bytes."""
    digits = "".join(uid_text.split())
    if len(digits) != UID_LENGTH * 2:
        raise InvalidUidLength()
    try:
        return bytes.fromhex(digits)
    except ValueError:
        raise InvalidUidLength() from None


def build_block(uid_text: str) -> Block0:
    """Parse *uid_text* and return the assembled Block 0."""
    return Block0(uid=parse_uid(uid_text))


def build(uid_text: str) -> str:
    """Return Block 0 for *uid_text* as 32 uppercase hex characters."""
    return build_block(uid_text).hex()
