import sqlite3
from pathlib import Path
from typing import Annotated

import typer

from cricviz.cli._logging import configure_logging
from cricviz.cli._output import (
    console,
    print_cricketer,
    print_cricketer_table,
    print_error,
    print_innings_summary,
    print_student_table,
)
from cricviz.cli.factory import build_context
from cricviz.domain.result import Err, Ok
from cricviz.domain.scorecard import BowlingRow
from cricviz.ingest.scorecard_source import ScorecardFormatError, read_batting_scorecard, read_bowling_scorecard
from cricviz.repos.errors import PlayerNotFoundError, StudentNotFoundError

app = typer.Typer(name="cricviz", help="Cricviz: cricket player statistics and student records")
students_app = typer.Typer(help="Student registry commands.")
app.add_typer(students_app, name="students")

_DbOpt = Annotated[str | None, typer.Option("--db", help="Path to the SQLite database")]
_NameArg = Annotated[str, typer.Argument(help="Player name, exactly as stored")]


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Cricviz: cricket player statistics and student records."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


@app.command()
def seed(db: _DbOpt = None) -> None:
    """Insert the classical reference batters."""
    with build_context(db) as ctx:
        try:
            created = ctx.engine.seed_reference_players()
        except sqlite3.IntegrityError:
            print_error("reference players are already present")
            raise typer.Exit(code=1)
    console.print(f"[bold green]Seeded[/bold green] {len(created)} players")


@app.command()
def show(name: _NameArg, db: _DbOpt = None) -> None:
    """Show a player's counters and derived batting metrics."""
    with build_context(db) as ctx:
        player = ctx.cricketer_repo.find_by_name(name)
    if player is None:
        print_error(f"no player named '{name}'")
        raise typer.Exit(code=1)
    print_cricketer(player)


@app.command(name="list")
def list_players(
    country: Annotated[str | None, typer.Option("--country", help="Only players from this country")] = None,
    role: Annotated[str | None, typer.Option("--role", help="Only players with this role")] = None,
    by_matches: Annotated[bool, typer.Option("--by-matches", help="Sort by matches played, descending")] = False,
    db: _DbOpt = None,
) -> None:
    """List players."""
    with build_context(db) as ctx:
        players = ctx.cricketer_repo.query(country=country, role=role, by_matches=by_matches)
    print_cricketer_table(players)


@app.command(name="apply-innings")
def apply_innings(
    batting: Annotated[Path, typer.Option("--batting", help="Batting scorecard CSV")],
    bowling: Annotated[Path | None, typer.Option("--bowling", help="Bowling scorecard CSV")] = None,
    db: _DbOpt = None,
) -> None:
    """Update player counters from one innings' scorecards."""
    with build_context(db) as ctx:
        try:
            batting_rows = read_batting_scorecard(batting, encoding=ctx.scorecard_encoding)
            bowling_rows: list[BowlingRow] = []
            if bowling is not None:
                bowling_rows = read_bowling_scorecard(bowling, encoding=ctx.scorecard_encoding)
            summary = ctx.engine.apply_innings(batting_rows, bowling_rows)
        except ScorecardFormatError as e:
            print_error(str(e))
            raise typer.Exit(code=1)
        except PlayerNotFoundError as e:
            print_error(f"no player named '{e.name}'; earlier rows were already applied")
            raise typer.Exit(code=1)
    print_innings_summary(summary)


@app.command()
def ban(name: _NameArg, db: _DbOpt = None) -> None:
    """Permanently remove a player."""
    with build_context(db) as ctx:
        try:
            ctx.engine.remove_player(name)
        except PlayerNotFoundError:
            print_error(f"no player named '{name}'")
            raise typer.Exit(code=1)
    console.print(f"[bold]Removed[/bold] {name}")


@students_app.command(name="enroll")
def students_enroll(
    name: Annotated[str, typer.Argument(help="Student name")],
    cgpa: Annotated[float, typer.Argument(help="CGPA on a 0-10 scale")],
    db: _DbOpt = None,
) -> None:
    """Enroll a student."""
    with build_context(db) as ctx:
        match ctx.registry.enroll(name, cgpa):
            case Ok(student):
                console.print(f"[bold green]Enrolled[/bold green] {student.name} (id {student.id})")
            case Err(e):
                print_error(e.message)
                raise typer.Exit(code=1)


@students_app.command(name="list")
def students_list(db: _DbOpt = None) -> None:
    """List enrolled students."""
    with build_context(db) as ctx:
        students = ctx.registry.list_students()
    print_student_table(students)


@students_app.command(name="update")
def students_update(
    student_id: Annotated[int, typer.Argument(help="Student id")],
    cgpa: Annotated[float, typer.Argument(help="New CGPA on a 0-10 scale")],
    db: _DbOpt = None,
) -> None:
    """Change a student's CGPA."""
    with build_context(db) as ctx:
        try:
            result = ctx.registry.update_cgpa(student_id, cgpa)
        except StudentNotFoundError as e:
            print_error(str(e))
            raise typer.Exit(code=1)
    match result:
        case Ok(student):
            console.print(f"[bold green]Updated[/bold green] {student.name}: {student.cgpa}")
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


@students_app.command(name="withdraw")
def students_withdraw(
    student_id: Annotated[int, typer.Argument(help="Student id")],
    db: _DbOpt = None,
) -> None:
    """Remove a student from the registry."""
    with build_context(db) as ctx:
        try:
            ctx.registry.withdraw(student_id)
        except StudentNotFoundError as e:
            print_error(str(e))
            raise typer.Exit(code=1)
    console.print(f"[bold]Withdrew[/bold] student {student_id}")
