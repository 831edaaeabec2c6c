from montiblock0.core.mifare.block0 import build, build_block, parse_uid
from montiblock0.core.mifare.errors import InvalidUidLength, ValidationError
from montiblock0.core.mifare.logging import TRACE
from montiblock0.core.mifare.types import (
    ATQA,
    BLOCK_SIZE,
    SAK,
    SIGNATURE,
    UID_LENGTH,
    Block0,
    compute_bcc,
)

__all__ = [
    "ATQA",
    "BLOCK_SIZE",
    "Block0",
    "InvalidUidLength",
    "SAK",
    "SIGNATURE",
    "TRACE",
    "UID_LENGTH",
    "ValidationError",
    "build",
    "build_block",
    "compute_bcc",
    "parse_uid",
]
