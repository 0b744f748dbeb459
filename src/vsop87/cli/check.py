"""CLI command verifying coefficient files against vsop87.chk."""

from pathlib import Path
from typing import Optional

import click

from .. import config
from ..check import DEFAULT_TOLERANCE, verify_check_file
from ..errors import Vsop87Error
from ..model import EllipticModel


@click.command()
@click.option(
    "--data",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory with the VSOP87.<ext> files. Defaults to $VSOP87 or ./data/vsop87.",
)
@click.option(
    "--check-file",
    type=click.Path(dir_okay=False),
    default=None,
    help=f"Reference file. Defaults to {config.CHECK_FILE_NAME} in the data directory.",
)
@click.option(
    "--tolerance",
    type=float,
    default=DEFAULT_TOLERANCE,
    show_default=True,
    help="Maximum absolute difference accepted per element.",
)
def check(data: Optional[str], check_file: Optional[str], tolerance: float) -> None:
    """Verify computed elements against the published reference values."""
    directory = Path(data) if data is not None else config.get_data_dir()
    check_path = Path(check_file) if check_file else directory / config.CHECK_FILE_NAME

    try:
        model = EllipticModel.load(directory, 0.0)
        report = verify_check_file(model, check_path, tolerance)
    except Vsop87Error as e:
        raise click.ClickException(str(e))

    for mismatch in report.mismatches:
        click.echo(str(mismatch), err=True)

    if not report.ok:
        raise click.ClickException(
            f"{len(report.mismatches)} of {report.checked} values differ"
        )
    click.echo(f"OK: {report.checked} values agree within {tolerance}")
