from rich.console import Console
from rich.table import Table

from cricviz.domain.cricketer import Cricketer
from cricviz.domain.scorecard import InningsSummary
from cricviz.domain.student import Student

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def _fmt(value: object, precision: int = 2) -> str:
    if value is None:
        return "-"
    if isinstance(value, float):
        return f"{value:.{precision}f}"
    return str(value)


def print_cricketer(player: Cricketer) -> None:
    console.print(f"[bold]{player.name}[/bold] ({_fmt(player.country)}, {_fmt(player.role)})")
    console.print(f"  Matches: {_fmt(player.matches)}")
    console.print("[bold]Batting[/bold]")
    console.print(f"  Innings: {_fmt(player.innings_batted)}  Not out: {_fmt(player.not_out)}")
    console.print(f"  Runs: {_fmt(player.runs_scored)}  Balls: {_fmt(player.balls_faced)}")
    console.print(f"  High score: {_fmt(player.high_score)}")
    console.print(f"  100s: {_fmt(player.centuries)}  50s: {_fmt(player.half_centuries)}")
    console.print(f"  4s: {_fmt(player.fours_scored)}  6s: {_fmt(player.sixes_scored)}")
    console.print(f"  Average: {_fmt(player.batting_average)}")
    console.print(f"  Strike rate: {_fmt(player.batting_strike_rate)}")
    if player.innings_bowled:
        console.print("[bold]Bowling[/bold]")
        console.print(f"  Innings: {_fmt(player.innings_bowled)}  Balls: {_fmt(player.balls_bowled)}")
        console.print(f"  Runs: {_fmt(player.runs_given)}  Wickets: {_fmt(player.wickets_taken)}")


def print_cricketer_table(players: list[Cricketer]) -> None:
    if not players:
        console.print("No players found.")
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Name")
    table.add_column("Country")
    table.add_column("Role")
    table.add_column("M", justify="right")
    table.add_column("Runs", justify="right")
    table.add_column("HS", justify="right")
    table.add_column("Avg", justify="right")
    table.add_column("SR", justify="right")
    table.add_column("Wkts", justify="right")
    for p in players:
        table.add_row(
            p.name,
            _fmt(p.country),
            _fmt(p.role),
            _fmt(p.matches),
            _fmt(p.runs_scored),
            _fmt(p.high_score),
            _fmt(p.batting_average),
            _fmt(p.batting_strike_rate),
            _fmt(p.wickets_taken),
        )
    console.print(table)


def print_innings_summary(summary: InningsSummary) -> None:
    console.print("[bold green]Innings applied[/bold green]")
    console.print(f"  Batting rows: {summary.batting_rows_applied}")
    console.print(f"  Bowling rows: {summary.bowling_rows_applied}")


def print_student_table(students: list[Student]) -> None:
    if not students:
        console.print("No students enrolled.")
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("CGPA", justify="right")
    for s in students:
        table.add_row(_fmt(s.id), s.name, _fmt(s.cgpa))
    console.print(table)
