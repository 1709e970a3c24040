"""CLI commands for Rehab Narrative."""

import json
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from rehab_narrative.config import get_lexicon, get_settings
from rehab_narrative.errors import LexiconError
from rehab_narrative.lexicon import get_activity, load_lexicon, visible_activities
from rehab_narrative.session import NoteSession, SessionArchive

app = typer.Typer(
    name="rehab-narrative",
    help="Skilled treatment note composer for PT/OT sessions",
    add_completion=False,
)
console = Console()


@app.command()
def compose(
    session_file: Path = typer.Argument(..., help="JSON file with units, vitals, minutes and progress"),
    lexicon_file: Optional[Path] = typer.Option(
        None, "--lexicon", "-l", help="JSON lexicon override file"
    ),
    output_json: bool = typer.Option(False, "--json", help="Output as JSON"),
    archive: bool = typer.Option(False, "--archive", help="Save the note to the session archive"),
):
    """Compose the narrative note for a recorded session."""
    if not session_file.exists():
        console.print(f"[red]Session file not found: {session_file}[/red]")
        raise typer.Exit(1)

    try:
        session = NoteSession.model_validate_json(session_file.read_text())
    except ValidationError as e:
        console.print(f"[red]Invalid session file: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    try:
        lexicon = load_lexicon(lexicon_file) if lexicon_file else get_lexicon()
    except LexiconError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    note = session.generate(lexicon)

    if archive:
        SessionArchive(get_settings().archive_path).save(session)

    if output_json:
        typer.echo(json.dumps({"note": note}, indent=2))
    else:
        console.print(Panel(Text(note.strip()), title="Treatment Note", border_style="green"))


@app.command()
def activities(
    include_hidden: bool = typer.Option(False, "--all", help="Include activities hidden from the picker"),
):
    """List clinical activities available in the picker."""
    table = Table(title="Clinical Activities")
    table.add_column("ID", style="cyan")
    table.add_column("Label")
    table.add_column("CPT")
    table.add_column("Phases")

    for activity in visible_activities(include_hidden=include_hidden):
        table.add_row(
            activity.id,
            activity.label,
            activity.billing_code,
            ", ".join(p.name for p in activity.phases),
        )

    console.print(table)


@app.command()
def deficits(
    activity_id: str = typer.Argument(..., help="Activity ID, e.g. SELF_CARE"),
):
    """Show phases, subtasks and suggested deficits for an activity."""
    activity = get_activity(activity_id)
    if activity is None:
        console.print(f"[red]Unknown activity: {escape(activity_id)}[/red]")
        raise typer.Exit(1)

    table = Table(title=activity.label)
    table.add_column("Phase", style="cyan")
    table.add_column("Subtask")
    table.add_column("Deficits")

    for phase in activity.phases:
        for subtask in phase.subtasks:
            table.add_row(phase.name, subtask.name, ", ".join(subtask.deficits))

    console.print(table)


@app.command(name="archive")
def list_archive():
    """List archived notes, newest first."""
    sessions = SessionArchive(get_settings().archive_path).all()
    if not sessions:
        console.print("[yellow]No saved sessions yet.[/yellow]")
        return

    table = Table(title="Session History")
    table.add_column("ID", style="cyan")
    table.add_column("Saved")
    table.add_column("Preview")

    for saved in sessions:
        table.add_row(saved.id, saved.timestamp, saved.preview)

    console.print(table)


if __name__ == "__main__":
    app()
