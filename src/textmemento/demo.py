"""Console walkthrough of save/undo/redo on a buffer."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

from textmemento.buffer import Buffer, History, SavePolicy
from textmemento.runtime import telemetry


def run_demo(
    first: str = "Hello, ",
    second: str = "world!",
    *,
    policy: SavePolicy | str | None = None,
    echo: Callable[[str], None] = print,
) -> Buffer:
    buffer = Buffer(name="demo")
    history = History(policy=policy)

    buffer.append(first)
    history.save(buffer)

    buffer.append(second)
    history.save(buffer)

    echo(f"Current content: {buffer.get_content()}")

    history.undo(buffer)
    echo(f"Undo: {buffer.get_content()}")

    history.redo(buffer)
    echo(f"Redo: {buffer.get_content()}")
    return buffer


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Append two fragments, then undo and redo the second."
    )
    parser.add_argument("--first", default="Hello, ", help="First appended text")
    parser.add_argument("--second", default="world!", help="Second appended text")
    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in SavePolicy],
        default=None,
        help="History save policy (default: $TEXTMEMENTO_HISTORY_POLICY or truncate)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="telelog minimum level (default: $TEXTMEMENTO_LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_level:
        telemetry.configure(min_level=args.log_level)
    run_demo(args.first, args.second, policy=args.policy)


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
