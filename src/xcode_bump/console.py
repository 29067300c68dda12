"""Operator-facing console output."""

from typing import Optional

from rich.console import Console
from rich.text import Text

from .config import get_config
from .models import BumpResult


def create_console(color: Optional[bool] = None) -> Console:
    """Creates the console used for reports and prompts.

    Args:
        color: Enable colors. Defaults to config.output.color.
    """
    if color is None:
        color = get_config().output.color
    return Console(no_color=not color, highlight=False, soft_wrap=True)


def format_value(version: str, build: Optional[str]) -> str:
    """Formats ``version(build)``, or just the version without a build."""
    return f"{version}({build})" if build is not None else version


def format_update_parts(result: BumpResult) -> Optional[tuple[str, str]]:
    """Returns ``(previous, updated)``, None when no version was bumped.

    The build parenthetical is dropped when the build number didn't change.
    """
    if result.previous_version is None or result.new_version is None:
        return None
    previous_build = result.previous_build if result.new_build is not None else None
    return (
        format_value(result.previous_version, previous_build),
        format_value(result.new_version, result.new_build),
    )


def format_update_message(result: BumpResult) -> Optional[str]:
    """Returns the plain ``previous -> updated`` line.

    Example:
        >>> format_update_message(BumpResult("1.2.3", "40", "1.3.0", "41"))
        '1.2.3(40) -> 1.3.0(41)'
    """
    parts = format_update_parts(result)
    return f"{parts[0]} -> {parts[1]}" if parts else None


def print_update_message(console: Console, result: BumpResult) -> None:
    """Prints ``[+] updated version : old -> new`` with old in red and new in green."""
    parts = format_update_parts(result)
    if parts is None:
        return
    previous, updated = parts
    console.print(Text.assemble("[+] updated version : ", (previous, "red"), " -> ", (updated, "green")))


def print_found(console: Console, name: str, emoji: str = "🎉") -> None:
    console.print(f"{emoji} {name} found", style="green", markup=False)


def print_error(console: Console, message: str) -> None:
    console.print(f"❌ {message}", style="red", markup=False)


def print_warning(console: Console, message: str) -> None:
    console.print(f"⚠️  {message}", style="yellow", markup=False)
