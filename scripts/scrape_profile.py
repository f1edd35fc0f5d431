#!/usr/bin/env python3
"""
Profile Scrape CLI

Fetches a LinkedIn profile through Exa, parses it, extracts keywords and
embeds them, then saves the combined result as JSON.

Requires EXASEARCH_API_KEY, plus OPENAI_API_KEY (or ANTHROPIC_API_KEY with
--provider anthropic) unless --skip-enrich is given.

Usage:
    # Full pipeline, result written to RESULT_FILE (default: result.json)
    python scripts/scrape_profile.py https://www.linkedin.com/in/ada-lovelace

    # Parse only, custom output path
    python scripts/scrape_profile.py https://www.linkedin.com/in/ada-lovelace \\
        --skip-enrich -o outs/ada.json

    # Let the LLM parse the markdown instead of the regex parser
    python scripts/scrape_profile.py https://www.linkedin.com/in/ada-lovelace --llm-parser
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from prism.contexts.intake import (
    ExaProfileSource,
    InvalidProfileURLError,
    ProfileFetchError,
    ProfilePipeline,
)
from prism.contexts.intake.logger import _log_error, setup_intake_logger
from prism.utils.llm import OpenAIProvider, get_provider
from prism.utils.logger import session_log_dir

load_dotenv()
KEYWORD_MODEL = os.getenv("KEYWORD_MODEL", "gpt-4o-mini")

app = typer.Typer(
    help="Scrape, parse and enrich a LinkedIn profile",
    add_completion=False,
)


@app.command()
def main(
    url: Annotated[
        str,
        typer.Argument(help="LinkedIn profile URL (must contain linkedin.com/in/)")
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Result file (default: RESULT_FILE env var)")
    ] = None,
    skip_enrich: Annotated[
        bool,
        typer.Option("--skip-enrich", help="Skip keyword extraction and embedding")
    ] = False,
    llm_parser: Annotated[
        bool,
        typer.Option("--llm-parser", help="Parse the markdown with the LLM")
    ] = False,
    provider: Annotated[
        Optional[str],
        typer.Option("--provider", "-p", help="LLM provider: openai or anthropic")
    ] = None,
):
    """
    Scrape one profile and save the result.

    Examples:

        python scripts/scrape_profile.py https://www.linkedin.com/in/ada-lovelace

        python scripts/scrape_profile.py https://www.linkedin.com/in/ada-lovelace --skip-enrich
    """
    if skip_enrich and llm_parser:
        typer.echo("Error: --llm-parser needs an LLM; drop --skip-enrich", err=True)
        raise typer.Exit(code=1)

    log_file = setup_intake_logger(session_log_dir("scrape"), profile_url=url)

    try:
        source = ExaProfileSource()
        llm = None
        embedder = None
        if not skip_enrich:
            provider_name = (provider or os.getenv("LLM_PROVIDER", "openai")).lower()
            model = KEYWORD_MODEL if provider_name == "openai" else None
            llm = get_provider(provider_name, model=model)
            embedder = llm if isinstance(llm, OpenAIProvider) else OpenAIProvider()
    except (ImportError, ValueError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    pipeline = ProfilePipeline(
        source=source,
        llm=llm,
        embedder=embedder,
        use_llm_parser=llm_parser,
    )

    try:
        result = pipeline.run(url)
    except InvalidProfileURLError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except ProfileFetchError as e:
        _log_error(str(e))
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except Exception as e:
        # LLM parser output without JSON, embedding and SDK errors
        _log_error(f"Scrape failed: {e}")
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    saved = result.save(output)

    typer.secho(f"\n✓ Scraped {result.profile.name or url}", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Keywords:  {len(result.keywords)}")
    typer.echo(f"  Embedding: {len(result.embedding)} dimensions")
    typer.echo(f"  Result:    {saved}")
    typer.echo(f"  Log:       {log_file}")


if __name__ == "__main__":
    app()
