"""Human-readable Block 0 formatting."""

from __future__ import annotations

from montiblock0.core.mifare import Block0


def _hex(data: bytes) -> str:
    return data.hex(" ").upper() if data else ""


_CARD_TYPE = "MIFARE Classic 1K"


def _signature(data: bytes) -> str:
    marker = data[:2].decode("ascii", errors="replace")
    return f"{_hex(data)} ({marker})"


def format_block0(block: Block0) -> str:
    fields = [
        ("UID", _hex(block.uid)),
        ("BCC", f"{block.bcc:02X}"),
        ("SAK", f"{block.sak:02X} ({_CARD_TYPE})"),
        ("ATQA", _hex(block.atqa)),
        ("Signature", _signature(block.signature)),
        ("Block", repr(block)),
    ]
    w = max(len(label) for label, _ in fields)
    return "\n".join(f"  {label:<{w}}  {value}" for label, value in fields)
