# src/tetris_stack/cli/play.py
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from tetris_stack.core.config.io import load_session_config, to_plain_dict
from tetris_stack.core.config.root import SessionConfig
from tetris_stack.core.game.errors import PieceContainerError
from tetris_stack.core.game.session import StackSession
from tetris_stack.core.game.types import Piece, SessionState
from tetris_stack.utils.logging import setup_logger

MENU: tuple[tuple[str, str], ...] = (
    ("1", "Play front piece"),
    ("2", "Reserve front piece"),
    ("3", "Use reserved piece"),
    ("4", "Generate piece into queue"),
    ("0", "Exit"),
)

_COMMANDS: dict[str, Callable[[StackSession], Piece]] = {
    "1": StackSession.play,
    "2": StackSession.reserve,
    "3": StackSession.use_reserved,
    "4": StackSession.generate,
}

_VERBS: dict[str, str] = {
    "1": "Played",
    "2": "Reserved",
    "3": "Used reserved",
    "4": "Generated",
}


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Interactive piece queue + reserve stack session.")
    ap.add_argument("--config", "-c", type=str, default=None, help="session YAML (default: built-in defaults)")
    ap.add_argument("--seed", type=int, default=None, help="rng seed for piece shapes")
    ap.add_argument("--piece-rule", type=str, default=None, choices=["uniform", "bag"], help="shape selection rule")
    ap.add_argument("--log-level", type=str, default=None, help="debug|info|warning|error")
    ap.add_argument("--no-rich", action="store_true", help="disable Rich logging")
    return ap.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> SessionConfig:
    cfg = load_session_config(Path(args.config)) if args.config else SessionConfig()
    data = to_plain_dict(cfg)
    if args.seed is not None:
        data["game"]["seed"] = int(args.seed)
    if args.piece_rule is not None:
        data["game"]["piece_rule"] = str(args.piece_rule)
    if args.log_level is not None:
        data["log_level"] = str(args.log_level)
    if args.no_rich:
        data["use_rich"] = False
    return SessionConfig.model_validate(data)


def _slots_row(pieces: Sequence[Piece], capacity: int) -> list[str]:
    cells = [str(p) for p in pieces]
    return cells + ["-"] * (int(capacity) - len(cells))


def render_state(state: SessionState) -> Table:
    width = max(state.queue_capacity, state.stack_capacity)
    table = Table(title="Pieces", box=box.SIMPLE_HEAVY)
    table.add_column("", style="bold")
    for i in range(width):
        table.add_column(str(i + 1), justify="center")

    queue_cells = _slots_row(state.queue, state.queue_capacity)
    stack_cells = _slots_row(state.stack, state.stack_capacity)
    table.add_row("queue (front ->)", *(queue_cells + [""] * (width - len(queue_cells))))
    table.add_row("reserve (top ->)", *(stack_cells + [""] * (width - len(stack_cells))))

    table.add_section()
    front = state.front
    table.add_row("in queue", f"{len(state.queue)}/{state.queue_capacity}", *[""] * (width - 1))
    table.add_row("reserved", f"{len(state.stack)}/{state.stack_capacity}", *[""] * (width - 1))
    table.add_row("next", str(front) if front is not None else "-", *[""] * (width - 1))
    return table


def render_menu() -> Table:
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("key", style="bold cyan")
    table.add_column("action")
    for key, label in MENU:
        table.add_row(key, label)
    return table


def render_summary(session: StackSession) -> Table:
    stats = session.stats
    table = Table(title="Session", box=box.SIMPLE_HEAVY)
    table.add_column("Metric", style="bold")
    table.add_column("Value")
    table.add_row("pieces played", str(stats.played))
    table.add_row("pieces reserved", str(stats.reserved))
    table.add_row("reserved used", str(stats.used))
    table.add_row("pieces generated", str(stats.generated))
    return table


def run_session(
        session: StackSession,
        *,
        read_choice: Callable[[], str],
        console: Console,
) -> int:
    """
    Menu loop. Returns the number of commands that succeeded.

    Container errors are shown and the loop continues; EOF on input exits.
    """
    ok = 0
    console.print(render_state(session.state()))
    while True:
        console.print(render_menu())
        try:
            choice = str(read_choice()).strip()
        except EOFError:
            choice = "0"

        if choice == "0":
            break

        command = _COMMANDS.get(choice)
        if command is None:
            valid = ", ".join(k for k, _ in MENU)
            console.print(f"[red]Invalid option {choice!r}[/red]; choose one of: {valid}")
            continue

        try:
            piece = command(session)
        except PieceContainerError as e:
            console.print(f"[red]{type(e).__name__}[/red]: {e}")
            continue

        ok += 1
        console.print(f"[green]{_VERBS[choice]}[/green] {piece}")
        console.print(render_state(session.state()))

    console.print(render_summary(session))
    return ok


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    cfg = resolve_config(args)
    logger = setup_logger(name="tetris_stack", use_rich=bool(cfg.use_rich), level=str(cfg.log_level))
    logger.info(
        "session: piece_rule=%s seed=%s queue=%d reserve=%d",
        cfg.game.piece_rule,
        cfg.game.seed,
        cfg.game.queue_capacity,
        cfg.game.stack_capacity,
    )

    session = StackSession.from_config(cfg, logger=logger.getChild("session"))
    console = Console()
    run_session(session, read_choice=lambda: console.input("Choose an option: "), console=console)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
