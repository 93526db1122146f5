"""CLI commands for the wall of shame skill engine."""

import typer

from wall_of_shame.cli.skill import app as skill_app
from wall_of_shame.cli.skill import serve

main_app = typer.Typer(
    name="wall-of-shame",
    help="Wall of Shame skill engine CLI",
    no_args_is_help=True,
)
main_app.add_typer(skill_app, name="skill")
main_app.command("serve")(serve)


def main() -> None:
    """Entry point for the CLI."""
    main_app()


__all__ = ["main", "main_app"]
