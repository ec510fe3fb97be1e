#!/usr/bin/env python3
"""
Parse a résumé file into the structured document model.

Usage:
    resume-parse resume.md
    resume-parse resume.md --format json --output parsed.json
    resume-parse resume.md --polished polished.txt --emphasize
"""

import json
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
import yaml
from dotenv import load_dotenv
from typing_extensions import Annotated

from resume_roaster.contexts.intake.exceptions import UnsupportedResumeFileError
from resume_roaster.contexts.intake.logger import _log_info, _log_success, setup_intake_logger
from resume_roaster.contexts.intake.resume_parser import load_resume_text, parse_resume_text
from resume_roaster.contexts.templating.polish_override import apply_polished_highlights
from resume_roaster.contexts.templating.tech_keywords import emphasize_highlights
from resume_roaster.utils.logger import setup_console_logger

load_dotenv()

app = typer.Typer(help="Parse free-text résumés into structured data.", add_completion=False)


class OutputFormat(str, Enum):
    yaml = "yaml"
    json = "json"


def render_output(data: dict, output_format: OutputFormat) -> str:
    """
    Serialize parsed résumé data as YAML or JSON.

    Résumé text is dumped as plain data: "${...}" in a line is not an
    interpolation and must come out exactly as written.
    """
    if output_format == OutputFormat.json:
        return json.dumps(data, ensure_ascii=False, indent=2) + "\n"
    return yaml.safe_dump(data, allow_unicode=True, sort_keys=False)


@app.command()
def main(
    resume_file: Annotated[
        Path,
        typer.Argument(help="Résumé file (.md, .markdown or .txt)", dir_okay=False),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.yaml,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write to this file instead of stdout", dir_okay=False),
    ] = None,
    polished: Annotated[
        Optional[Path],
        typer.Option(
            "--polished",
            help="AI-polished text whose highlights replace the first job's",
            dir_okay=False,
        ),
    ] = None,
    emphasize: Annotated[
        bool,
        typer.Option("--emphasize", help="Bold technology keywords in job highlights"),
    ] = False,
    log: Annotated[
        bool,
        typer.Option("--log", help="Write a session log under LOGS_PATH"),
    ] = False,
):
    """Parse a résumé and print the structured result."""
    if log:
        log_file = setup_intake_logger(source=str(resume_file))
        _log_info(f"Log file: {log_file}")
    else:
        setup_console_logger()

    try:
        text = load_resume_text(resume_file)
        polished_text = polished.read_text(encoding="utf-8") if polished else ""
    except UnsupportedResumeFileError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)
    except FileNotFoundError as e:
        typer.echo(f"ERROR: File not found: {e.filename}", err=True)
        raise typer.Exit(1)

    resume = parse_resume_text(text)
    if polished_text:
        resume = apply_polished_highlights(resume, polished_text)
    if emphasize:
        resume = emphasize_highlights(resume)

    rendered = render_output(resume.to_dict(), output_format)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rendered, encoding="utf-8")
        _log_success(f"Wrote {output_format.value} to {output}")
    else:
        typer.echo(rendered, nl=False)


if __name__ == "__main__":
    app()
