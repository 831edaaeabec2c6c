from __future__ import annotations

from dataclasses import dataclass, field

from montiblock0.core.mifare.errors import InvalidUidLength

UID_LENGTH = 4
BLOCK_SIZE = 16

# MIFARE Classic 1K card profile
SAK = 0x08
ATQA = bytes([0x04, 0x00])

# "MN" marker followed by padding
SIGNATURE = bytes([0x4D, 0x4E, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF])


def compute_bcc(uid: bytes) -> int:
    """Block check character: XOR of the UID bytes."""
    bcc = 0
    for b in uid:
        bcc ^= b
    return bcc


@dataclass(frozen=True)
class Block0:
    """MIFARE Classic manufacturer block (sector 0, block 0)."""

    uid: bytes
    sak: int = field(default=SAK, init=False)
    atqa: bytes = field(default=ATQA, init=False)
    signature: bytes = field(default=SIGNATURE, init=False)

    def __post_init__(self) -> None:
        if len(self.uid) != UID_LENGTH:
            raise InvalidUidLength()

    @property
    def bcc(self) -> int:
        return compute_bcc(self.uid)

    def to_bytes(self) -> bytes:
        buf = bytearray(self.uid)
        buf.append(self.bcc)
        buf.append(self.sak)
        buf.extend(self.atqa)
        buf.extend(self.signature)
        if len(buf) != BLOCK_SIZE:
            raise ValueError(f"block 0 must be {BLOCK_SIZE} bytes, got {len(buf)}")
        return bytes(buf)

    def hex(self) -> str:
        return self.to_bytes().hex().upper()

    def __repr__(self) -> str:
        return self.to_bytes().hex(" ").upper()
