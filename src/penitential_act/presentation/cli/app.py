"""Thin CLI wrapper — a single Typer command that delegates to the use case.

All domain logic is accessed through the Container (bootstrap.py).
"""

from __future__ import annotations

import logging
import os
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv

from penitential_act.domain.errors import PenitentialActError
from penitential_act.presentation.cli.formatters import error_message, generation_summary

CONFIG_ENV = "PENITENTIAL_ACT_CONFIG"
LOG_LEVEL_ENV = "PENITENTIAL_ACT_LOG_LEVEL"

app = typer.Typer(
    name="penitential-act",
    help="Generate a one-page Penitential Act (.docx) for a Sunday or feast.",
    add_completion=False,
)


def _configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# penitential-act
# ---------------------------------------------------------------------------


# Dash-prefixed text is a value, not an option; arguments past the ninth are ignored
@app.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
def generate(
    output_dir: Annotated[
        Optional[str], typer.Argument(help="Directory to write the output file")
    ] = None,
    celebration: Annotated[
        Optional[str],
        typer.Argument(help='Ordinal for Sundays ("1st") or full feast name'),
    ] = None,
    season: Annotated[
        Optional[str],
        typer.Argument(help='Liturgical season ("Advent"), or "" for named feasts'),
    ] = None,
    year: Annotated[Optional[str], typer.Argument(help="Liturgical year: A, B, or C")] = None,
    invocation1: Annotated[
        Optional[str], typer.Argument(help="First Deacon invocation (Lord, have mercy)")
    ] = None,
    invocation2: Annotated[
        Optional[str], typer.Argument(help="Second Deacon invocation (Christ, have mercy)")
    ] = None,
    invocation3: Annotated[
        Optional[str], typer.Argument(help="Third Deacon invocation (Lord, have mercy)")
    ] = None,
    priest_opening: Annotated[
        Optional[str], typer.Argument(help="Custom priest opening (default: Brethren, ...)")
    ] = None,
    priest_closing: Annotated[
        Optional[str], typer.Argument(help="Custom priest closing (default: May almighty God ...)")
    ] = None,
) -> None:
    """Write Penitential Act_<title>_<year>.docx into OUTPUT_DIR."""
    from penitential_act.bootstrap import Container

    load_dotenv()
    _configure_logging()

    # Positional: every value after the first omitted one is omitted too
    arguments = [
        value
        for value in (
            output_dir,
            celebration,
            season,
            year,
            invocation1,
            invocation2,
            invocation3,
            priest_opening,
            priest_closing,
        )
        if value is not None
    ]

    try:
        container = Container(os.environ.get(CONFIG_ENV) or None)
        result = container.generate_penitential_act().execute(arguments)
    except PenitentialActError as exc:
        error_message(str(exc))
        raise typer.Exit(code=1)

    generation_summary(result.output_path, result.font_size_pt)


def main() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    main()
