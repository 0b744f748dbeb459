"""CLI command fetching the VSOP87 files."""

from typing import Optional

import click
import requests

from ..download import download_coefficient_files


@click.command()
@click.option(
    "--data",
    type=click.Path(file_okay=False),
    default=None,
    help="Target directory. Defaults to $VSOP87 or ./data/vsop87.",
)
@click.option(
    "--base-url",
    default=None,
    help="Mirror to download from. Defaults to $VSOP87_BASE_URL or the CDS archive.",
)
@click.option("--overwrite", is_flag=True, help="Download files that already exist.")
@click.option(
    "--with-check-file/--no-check-file",
    default=True,
    help="Also download vsop87.chk.",
)
def download(
    data: Optional[str], base_url: Optional[str], overwrite: bool, with_check_file: bool
) -> None:
    """Download the coefficient files of the main VSOP87 version."""
    try:
        paths = download_coefficient_files(
            data,
            base_url=base_url,
            include_check_file=with_check_file,
            overwrite=overwrite,
        )
    except requests.RequestException as e:
        raise click.ClickException(f"Download failed: {e}")

    for path in paths:
        click.echo(str(path))
