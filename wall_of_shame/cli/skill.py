"""CLI commands for exercising the skill locally."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from wall_of_shame.bootstrap import build_default_service_container
from wall_of_shame.core.intents import PLAYER_SLOT, IntentType
from wall_of_shame.core.models import SkillResponse
from wall_of_shame.services import ServiceContainer

app = typer.Typer(name="skill", help="Dispatch intents without a voice platform")
console = Console()


STEP_ALIASES = {
    "add": IntentType.ADD_PLAYER.value,
    "remove": IntentType.REMOVE_PLAYER.value,
    "worst": IntentType.WORST_PLAYER.value,
    "clean": IntentType.CLEAN_WALL.value,
    "help": IntentType.HELP.value,
    "stop": IntentType.STOP.value,
    "cancel": IntentType.CANCEL.value,
}


def _dispatch(services: ServiceContainer, intent_name: str, player: Optional[str]) -> SkillResponse:
    router = services.intent_router
    if router is None:
        raise RuntimeError("IntentRouter has not been configured.")
    slots = {PLAYER_SLOT: player} if player is not None else {}
    return router.dispatch(intent_name, slots, services)


def _print_response(response: SkillResponse) -> None:
    kind = "tell" if response.should_end_session else "ask"
    console.print(f"[bold]{kind}[/bold]: {response.speech_text}")
    if response.reprompt_text:
        console.print(f"  [dim]reprompt:[/dim] {response.reprompt_text}")
    if response.card is not None:
        console.print(f"  [dim]card:[/dim] {response.card.title}")


def _parse_step(step: str) -> tuple[str, Optional[str]]:
    """Split ``INTENT[:PLAYER]``; intent aliases such as ``add`` are accepted."""
    name, _, player = step.partition(":")
    intent_name = STEP_ALIASES.get(name.lower(), name)
    return intent_name, (player or None)


@app.command("intents")
def list_intents() -> None:
    """List the intent names the router understands."""
    table = Table(title="Intents")
    table.add_column("Alias", style="cyan")
    table.add_column("Intent name")
    aliases = {value: alias for alias, value in STEP_ALIASES.items()}
    for intent in IntentType:
        table.add_row(aliases.get(intent.value, "-"), intent.value)
    console.print(table)


@app.command("dispatch")
def dispatch_intent(
    intent: str = typer.Argument(..., help="Intent name or alias (add, remove, worst, ...)"),
    player: Optional[str] = typer.Option(None, "--player", "-p", help="Player slot value"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for quote selection"),
) -> None:
    """Dispatch a single intent against a fresh, empty wall."""
    services = build_default_service_container(seed=seed)
    intent_name, _ = _parse_step(intent)
    _print_response(_dispatch(services, intent_name, player))


@app.command("session")
def run_session(
    steps: list[str] = typer.Argument(..., help="Steps as INTENT[:PLAYER], e.g. add:Bob worst"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for quote selection"),
) -> None:
    """Run several intents against one wall and show the final leaderboard."""
    services = build_default_service_container(seed=seed)
    for step in steps:
        intent_name, player = _parse_step(step)
        console.print(f"[cyan]> {step}[/cyan]")
        _print_response(_dispatch(services, intent_name, player))

    leaderboard = services.leaderboard
    if leaderboard is None:
        return
    counts = leaderboard.snapshot()
    if not counts:
        console.print("\n[yellow]The wall is empty.[/yellow]")
        return
    table = Table(title="Wall of shame")
    table.add_column("Player", style="cyan")
    table.add_column("Offenses", justify="right")
    for name, count in sorted(counts.items(), key=lambda item: item[1], reverse=True):
        table.add_row(name, str(count))
    console.print(table)


def serve(
    host: str = typer.Option("0.0.0.0", "--host", help="Bind host"),
    port: int = typer.Option(8080, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
) -> None:
    """Start the skill HTTP API (FastAPI + Uvicorn)."""
    import uvicorn  # pylint: disable=import-outside-toplevel

    console.print(f"Starting wall of shame on {host}:{port} ...")
    uvicorn.run(
        "wall_of_shame.api_factory:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


__all__ = ["app", "serve", "STEP_ALIASES"]
