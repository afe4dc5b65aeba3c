"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.panel import Panel

from resume_checker.config import get_api_key, load_config
from resume_checker.errors import ResumeCheckError
from resume_checker.models.analysis import AnalysisResult
from resume_checker.pipeline.orchestrator import create_pipeline

app = typer.Typer(
    name="resume-checker",
    help="AI resume ATS checker",
    no_args_is_help=True,
)
console = Console()


@app.command()
def analyze(
    file: Path = typer.Argument(help="Resume file (PDF, DOCX, TXT or image)"),
    role: str = typer.Option(None, "--role", "-r", help="Target role to evaluate against"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON response"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Extract text from a resume and print the model's ATS analysis."""
    if not file.exists():
        console.print(f"[red]File not found: {file}[/red]")
        raise typer.Exit(1)

    config = load_config()
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    api_key = get_api_key()
    if not api_key:
        console.print("[red]ANTHROPIC_API_KEY is not set[/red]")
        raise typer.Exit(1)

    pipeline = create_pipeline(config, api_key)
    with console.status("Analyzing resume..."):
        try:
            payload = asyncio.run(
                pipeline.handle_upload(file.read_bytes(), file.name, role)
            )
        except ResumeCheckError as e:
            console.print(f"[red]{e.public_message}[/red]")
            if verbose:
                console.print(f"[dim]{type(e).__name__}: {e}[/dim]")
            raise typer.Exit(1)

    if as_json:
        console.print_json(json.dumps(payload.to_json_dict(), ensure_ascii=False))
        return

    console.print(f"[dim]Role: {payload.target_role} | Extracted: {payload.extracted_chars} chars[/dim]")
    _print_analysis(payload.analysis)


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Bind address"),
    port: int = typer.Option(None, "--port", "-p", help="Port"),
) -> None:
    """Run the HTTP upload API."""
    import uvicorn

    from resume_checker.api import create_app

    config = load_config()
    host = host or config.server.host
    port = port or config.server.port
    console.print(f"[green]Server running on port {port}[/green]")
    uvicorn.run(create_app(config=config), host=host, port=port)


def _print_analysis(analysis: AnalysisResult) -> None:
    score = analysis.ats_score
    color = "green" if score >= 75 else "yellow" if score >= 50 else "red"
    console.print(Panel(
        analysis.one_line_verdict,
        title=f"ATS score [{color}]{score}[/{color}]",
        border_style=color,
    ))

    sections = [
        ("Strengths", analysis.strengths, "green"),
        ("Weak areas", analysis.weak_areas, "yellow"),
        ("Missing skills", analysis.missing_skills, "red"),
        ("Project gaps", analysis.project_gaps, "magenta"),
        ("Quick fixes", analysis.quick_fixes, "cyan"),
    ]
    for title, items, style in sections:
        if items:
            console.print(Panel(
                "\n".join(f"- {item}" for item in items),
                title=title,
                border_style=style,
            ))


if __name__ == "__main__":
    app()
