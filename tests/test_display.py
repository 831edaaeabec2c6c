"""
Unit tests for Block 0 formatting
"""
from montiblock0.app.display import format_block0
from montiblock0.core.mifare import build_block


def test_format_block0():
    text = format_block0(build_block("DEADBEEF"))
    lines = text.splitlines()
    assert lines[0] == "  UID        DE AD BE EF"
    assert lines[1] == "  BCC        22"
    assert lines[2] == "  SAK        08 (MIFARE Classic 1K)"
    assert lines[3] == "  ATQA       04 00"
    assert lines[4] == "  Signature  4D 4E FF FF FF FF FF FF (MN)"
    assert lines[5] == "  Block      DE AD BE EF 22 08 04 00 4D 4E FF FF FF FF FF FF"


def test_format_block0_is_stable_across_uids():
    text = format_block0(build_block("11 22 33 44"))
    assert "  SAK        08 (MIFARE Classic 1K)" in text.splitlines()
    assert "  BCC        44" in text.splitlines()
