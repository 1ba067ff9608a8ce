"""
Resume extraction command line interface.

Provides CLI commands for parsing resume files and inspecting configuration.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="resume-extraction",
    help="Resume text extraction and structuring CLI",
    add_completion=False,
)
console = Console()


@app.command()
def version():
    """Show application version."""
    from resume_extraction import __version__, __app_name__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show the effective configuration."""
    from resume_extraction.utils.config import get_settings
    from resume_extraction.utils.constants import APP_DISPLAY_NAME

    settings = get_settings()

    table = Table(title=f"{APP_DISPLAY_NAME} Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Storage Root", str(settings.storage.root_dir))
    table.add_row("Max Document Size", f"{settings.storage.max_document_bytes} bytes")
    table.add_row("PDF Backend", settings.parser.pdf_backend)
    table.add_row("Timeout", str(settings.parser.timeout_seconds or "none"))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def parse(
    path: Path = typer.Argument(..., help="Path to a PDF or DOCX resume"),
    mime_type: Optional[str] = typer.Option(
        None, "--mime-type", "-m", help="MIME type (detected from the extension by default)"
    ),
    as_json: bool = typer.Option(False, "--json", "-j", help="Print the parsed data as JSON"),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", "-t", help="Seconds allowed for reading and extracting the file"
    ),
):
    """Parse a resume file into skills, experience and education."""
    from resume_extraction.exceptions import ResumeParsingError
    from resume_extraction.nlp import ResumeParser
    from resume_extraction.services import LocalStorageService, guess_mime_type
    from resume_extraction.utils.logger import setup_logging

    setup_logging()

    path = path.resolve()
    storage = LocalStorageService(path.parent)
    parser = ResumeParser(storage=storage)

    try:
        result = parser.parse_resume(
            path.name,
            mime_type or guess_mime_type(path.name),
            timeout=timeout,
        )
    except ResumeParsingError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if as_json:
        console.print_json(data=result.to_json_dict())
        return

    data = result.parsed_data
    console.print(f"[bold]{path.name}[/bold] ({len(result.raw_text)} characters)")

    if data.is_empty:
        console.print("[yellow]No skills, experience or education sections found.[/yellow]")
        return

    if data.skills:
        console.print(f"\n[bold]Skills ({len(data.skills)}):[/bold] {', '.join(data.skills)}")

    if data.experience:
        table = Table(title="Experience")
        table.add_column("Company", style="cyan")
        table.add_column("Title", style="green")
        table.add_column("Dates")
        for entry in data.experience:
            table.add_row(
                entry.company,
                entry.title,
                f"{entry.start_date} - {entry.end_date or 'Present'}",
            )
        console.print(table)

    if data.education:
        table = Table(title="Education")
        table.add_column("Institution", style="cyan")
        table.add_column("Degree", style="green")
        table.add_column("Field")
        table.add_column("Graduated")
        for entry in data.education:
            table.add_row(entry.institution, entry.degree, entry.field, entry.graduation_date)
        console.print(table)


if __name__ == "__main__":
    app()
