"""Terminal rendering of command results."""

import dataclasses
import json
from typing import Any, Optional

import click


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    return str(obj)


def render(data: Any) -> str:
    """Indented JSON for nested maps, sequences and scalars."""
    return json.dumps(data, indent=2, ensure_ascii=False, default=_default)


def emit(data: Any) -> None:
    """Print a command result to stdout. Strings are printed as-is."""
    click.echo(data if isinstance(data, str) else render(data))


def error(message: str, hint: Optional[str] = None) -> None:
    click.echo(f"❌ Error: {message}", err=True)
    if hint:
        click.echo(f"💡 {hint}", err=True)
