# filename : scripts.py
# created  : 10/19/2026


import logging

import click

from montiblock0.core.mifare.logging import TRACE

lg = logging.getLogger(__name__)

_EPILOG = """\b
Examples:
  montiblock0 DEADBEEF
  montiblock0 "DE AD BE EF"

\b
Output:
  32-character hexadecimal string representing the 16-byte Block 0,
  ready for direct write to sector 0.
"""


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=_EPILOG,
)
@click.argument("uid", required=False)
@click.option("-v", "--verbose", is_flag=True, help="TRACE level (show block layout).")
@click.pass_context
def montiblock0(ctx, uid, verbose):
    """Generate a MIFARE Classic manufacturer block (Block 0) with the MN signature.

    UID is the 4-byte card UID in hex, e.g. DEADBEEF or "DE AD BE EF".
    """

    if uid is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    logging.basicConfig(
        level=TRACE if verbose else logging.INFO,
        format="%(levelname)-8s %(name)s: %(message)s",
    )

    from montiblock0.app.main import main
    ctx.exit(main(uid))
