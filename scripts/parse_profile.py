#!/usr/bin/env python3
"""
Profile Markdown Parsing CLI

Parses a saved LinkedIn-style profile markdown file into a structured
profile record and prints it as JSON or YAML. No network access.

Usage:
    # Print JSON to stdout
    python scripts/parse_profile.py profile.md --author "Ada Lovelace"

    # Save YAML
    python scripts/parse_profile.py profile.md -a "Ada Lovelace" --format yaml -o ada.yaml

    # Section counts only
    python scripts/parse_profile.py profile.md -a "Ada Lovelace" --summary
"""

from pathlib import Path
from typing import Optional

import typer
from omegaconf import OmegaConf
from typing_extensions import Annotated

from prism.contexts.parsing import ProfileRecord, parse_profile_file
from prism.contexts.parsing.logger import setup_parsing_logger
from prism.utils.logger import session_log_dir

OUTPUT_FORMATS = ("json", "yaml")

app = typer.Typer(
    help="Parse profile markdown into a structured record",
    add_completion=False,
)


def render_record(record: ProfileRecord, output_format: str) -> str:
    """
    Render a profile record in the requested format.

    Args:
        record: Parsed profile
        output_format: "json" or "yaml"

    Returns:
        Serialized record
    """
    if output_format == "yaml":
        return OmegaConf.to_yaml(OmegaConf.create(record.to_dict()))
    return record.to_json()


def format_summary(record: ProfileRecord) -> str:
    """One line per section with its entry count."""
    lines = [
        f"Name:         {record.name or '(none)'}",
        f"Headline:     {record.headline or '(none)'}",
        f"About:        {len(record.about)} chars",
        f"Experience:   {len(record.experience)}",
        f"Education:    {len(record.education)}",
        f"Projects:     {len(record.projects)}",
        f"Volunteering: {len(record.volunteering)}",
        f"Skills:       {len(record.skills)}",
        f"Interests:    {len(record.interests)}",
    ]
    return "\n".join(lines)


@app.command()
def main(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Profile markdown file",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        )
    ],
    author: Annotated[
        str,
        typer.Option("--author", "-a", help="Profile owner's name (used for the headline)")
    ] = "",
    image: Annotated[
        Optional[str],
        typer.Option("--image", help="Profile image URL to attach")
    ] = None,
    url: Annotated[
        str,
        typer.Option("--url", help="Source profile URL to attach")
    ] = "",
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: json or yaml")
    ] = "json",
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write to this file instead of stdout", dir_okay=False)
    ] = None,
    summary: Annotated[
        bool,
        typer.Option("--summary", "-s", help="Print section counts instead of the record")
    ] = False,
):
    """
    Parse one profile markdown file.

    Examples:

        python scripts/parse_profile.py profile.md -a "Ada Lovelace"

        python scripts/parse_profile.py profile.md -a "Ada Lovelace" -f yaml -o ada.yaml
    """
    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: Invalid format '{output_format}'. Valid formats are: "
            f"{', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    setup_parsing_logger(session_log_dir("parse"), source=str(input_file))

    record = parse_profile_file(input_file, author_name=author, image_url=image, source_url=url)

    if summary:
        typer.echo(format_summary(record))
        return

    rendered = render_record(record, output_format)
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rendered, encoding="utf-8")
        typer.secho(
            f"✓ Saved {output_format.upper()} to {output}", fg=typer.colors.GREEN, err=True
        )
    else:
        typer.echo(rendered)


if __name__ == "__main__":
    app()
