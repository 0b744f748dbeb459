"""CLI command printing elliptic elements."""

import csv
import io
import json
from typing import List, Optional, Tuple

import click

from ..body import Body
from ..elements import Element, Elliptic
from ..errors import Vsop87Error
from ..model import EllipticModel
from ..space_time.julian import J2000
from .common import parse_date_input

OUTPUT_FORMATS = ["text", "json", "csv"]

ELEMENT_LABELS = {
    Element.A: "semi-major axis (au)",
    Element.L: "mean longitude (rad)",
    Element.K: "k = e cos(pi)",
    Element.H: "h = e sin(pi)",
    Element.Q: "q = sin(i/2) cos(omega)",
    Element.P: "p = sin(i/2) sin(omega)",
}


def format_text(body: Body, results: List[Tuple[float, Elliptic]]) -> str:
    lines = []
    for jd, elements in results:
        lines.append(f"{body.name} JD {jd}")
        for element in Element:
            lines.append(f"  {ELEMENT_LABELS[element]:<25} {elements.get(element): .10f}")
    return "\n".join(lines)


def format_json(body: Body, results: List[Tuple[float, Elliptic]]) -> str:
    data = [
        {
            "body": body.name,
            "julian_date": jd,
            **{element.name.lower(): elements.get(element) for element in Element},
        }
        for jd, elements in results
    ]
    return json.dumps(data, indent=2)


def format_csv(body: Body, results: List[Tuple[float, Elliptic]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["body", "julian_date"] + [e.name.lower() for e in Element])
    for jd, elements in results:
        writer.writerow([body.name, jd] + [repr(v) for v in elements.as_tuple()])
    return buffer.getvalue().rstrip("\n")


FORMATTERS = {"text": format_text, "json": format_json, "csv": format_csv}


@click.command()
@click.argument("body")
@click.option(
    "--date",
    "-d",
    "dates",
    multiple=True,
    default=("now",),
    help="Date(s) to compute elements for. Can be specified multiple times. Use ISO format, Julian date or 'now'.",
)
@click.option(
    "--data",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory with the VSOP87.<ext> files. Defaults to $VSOP87 or ./data/vsop87.",
)
@click.option(
    "--precision",
    type=float,
    default=0.0,
    show_default=True,
    help="Requested precision between 0 and 0.01; 0 keeps every term.",
)
@click.option(
    "--reference-date",
    type=float,
    default=None,
    help="Julian date the precision should hold around. Defaults to the first date.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="text",
    help="Output format.",
)
def elements(
    body: str,
    dates: Tuple[str, ...],
    data: Optional[str],
    precision: float,
    reference_date: Optional[float],
    output_format: str,
) -> None:
    """Compute heliocentric elliptic elements of BODY.

    BODY is a planet name (e.g. "mars"), a file extension (e.g. "emb") or
    "earth-moon" for the Earth-Moon barycenter.
    """
    try:
        target = Body.from_name(body)
        julian_dates = [parse_date_input(d) for d in dates]
    except ValueError as e:
        raise click.BadParameter(str(e))

    if not target.has_series:
        raise click.BadParameter(f"VSOP87 has no elliptic elements for {target.name}")

    if reference_date is None:
        reference_date = julian_dates[0] if julian_dates else J2000

    try:
        model = EllipticModel.load(data, precision, reference_date)
    except Vsop87Error as e:
        raise click.ClickException(str(e))

    results = [(jd, model.pos(jd, target)) for jd in julian_dates]
    click.echo(FORMATTERS[output_format](target, results))
