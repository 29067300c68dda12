"""Command line interface: resolve Info.plist files and bump them."""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO, Union

from rich.console import Console

from .config import get_config
from .console import create_console, print_error, print_found, print_update_message, print_warning
from .exceptions import ConfigError, PlistError, PlistPathNotFoundError, ResolutionError
from .logger import get_logger
from .models import BumpDirective, BumpRequest, BumpResult
from .plist_codec import read_plist, write_plist
from .project_scanner import collect_plist_paths, find_project
from .selection import format_candidates, parse_selection, read_selection_line
from .version_bump import bump

logger = get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xcode-bump",
        description="Update the version and build number in an Xcode project's Info.plist.",
    )
    parser.add_argument("--major", action="store_true", help="Update the major version.")
    parser.add_argument("--minor", action="store_true", help="Update the minor version.")
    parser.add_argument("--hotfix", action="store_true", help="Update the hotfix version.")
    parser.add_argument("--build", action="store_true", help="Update the build version.")
    parser.add_argument("-p", "--path", type=str, default=None, help="Path to the Info.plist.")
    return parser


def prompt_user_to_select_plist(plist_paths: list[str], console: Console, stdin: TextIO) -> list[str]:
    """Lists the candidates and reads the operator's zero-based selection.

    Invalid tokens are reported and skipped; the remaining ones are returned.

    Raises:
        SelectionInputError: If no line can be read.
    """
    console.print("Multiple Info.plist files found:", markup=False)
    for line in format_candidates(plist_paths):
        console.print(line, markup=False)
    console.print("Enter the numbers of the Info.plist files you want to update (comma separated):", markup=False)

    selection = parse_selection(read_selection_line(stdin), len(plist_paths))
    for token in selection.invalid:
        print_warning(console, f"Ignoring invalid selection '{token}'")
    if not selection.indices:
        logger.info("No Info.plist selected")
    return selection.pick(plist_paths)


def resolve_plist_paths(
    request: BumpRequest,
    console: Console,
    directory: Union[Path, str] = Path("."),
    stdin: Optional[TextIO] = None,
) -> list[Path]:
    """Determines which Info.plist files to update.

    An explicit path skips project discovery. Otherwise the project in
    ``directory`` is scanned; a single candidate is used directly and
    several candidates are offered to the operator.

    Raises:
        ResolutionError: If the files to operate on can't be determined.
    """
    directory = Path(directory)

    if request.path is not None:
        if not Path(request.path).exists():
            raise PlistPathNotFoundError(request.path)
        return [Path(request.path)]

    project = find_project(directory)
    print_found(console, project.name, emoji="🔍")

    candidates = collect_plist_paths(project)
    for candidate in candidates:
        print_found(console, candidate)

    if len(candidates) == 1:
        return [directory / candidates[0]]

    selected = prompt_user_to_select_plist(candidates, console, stdin or sys.stdin)
    return [directory / path for path in selected]


def update_version(path: Union[Path, str], directive: BumpDirective, console: Console) -> Optional[BumpResult]:
    """Reads, bumps and writes back one Info.plist.

    Errors concerning this file are reported and swallowed so that the
    remaining files are still processed.

    Returns:
        The BumpResult, or None if the file could not be updated.
    """
    try:
        document = read_plist(path)
        result = bump(document.data, directive)
        if result.changed:
            write_plist(path, document)
        else:
            logger.info("Nothing to update in %s", path)
    except PlistError as e:
        logger.debug("Skipping %s: %s", path, e.details)
        print_error(console, str(e))
        return None

    print_update_message(console, result)
    return result


def main(argv: Optional[Sequence[str]] = None, stdin: Optional[TextIO] = None) -> int:
    """Runs the tool and returns the process exit code."""
    args = build_parser().parse_args(argv)
    request = BumpRequest(**vars(args))

    try:
        config = get_config()
    except ConfigError as e:
        print_error(create_console(color=False), str(e))
        return 1
    console = create_console(config.output.color)

    try:
        plist_paths = resolve_plist_paths(request, console, Path("."), stdin)
    except ResolutionError as e:
        logger.debug("Resolution failed: %r", e)
        print_error(console, str(e))
        return 1

    directive = request.directive
    for plist_path in plist_paths:
        update_version(plist_path, directive, console)

    return 0


if __name__ == "__main__":
    sys.exit(main())
