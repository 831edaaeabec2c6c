# filename : main.py
# created  : 10/19/2026


import logging

import click

from montiblock0.app.display import format_block0
from montiblock0.core.mifare import ValidationError, build_block

lg = logging.getLogger(__name__)


def main(uid: str) -> int:
    """Generate Block 0 for *uid* and print it. Returns the exit status."""
    lg.debug("montiblock0 v1")
    click.echo(f">> TARGET UID: {uid}")
    try:
        block = build_block(uid)
    except ValidationError as exc:
        click.echo(str(exc), err=True)
        return 1

    lg.trace("block 0 layout:\n%s", format_block0(block))
    click.echo(f">> GENERATED BLOCK 0: {block.hex()}")
    click.echo("// READY FOR DIRECT WRITE TO SECTOR 0")
    return 0
