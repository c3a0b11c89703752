"""Command-line front door for lazyls.

Parses CLI options, merges them with saved defaults, and scans the
requested paths. Then renders every listing to stdout.
"""

from __future__ import annotations

import argparse
import logging
import os
import shutil
import sys
from pathlib import Path

from .config import ListingOptions, OutputMode, SavedDefaults, load_defaults, save_defaults
from .file_model import (
    FileRecord,
    ScanContext,
    SystemMounts,
    build_tree_rows,
    default_attribute_provider,
    list_directory,
    record_for_path,
)
from .git_status import GitRepositories
from .render.size import SizeFormat
from .render.times import TimeStyle, TimeType
from .render.view import field_context, render_listing
from .sort import SortField, sort_records
from .theme import available_theme_names, resolve_colours

logger = logging.getLogger(__name__)

DEBUG_ENV_VAR = "LAZYLS_DEBUG"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _default_render_width() -> int | None:
    """Terminal width when stdout is a terminal, otherwise ``None``."""
    if not sys.stdout.isatty():
        return None
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def configure_logging() -> None:
    level = logging.DEBUG if os.environ.get(DEBUG_ENV_VAR) else logging.WARNING
    logging.basicConfig(level=level, format="%(name)s: %(levelname)s: %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyls",
        description="List directory contents with colours, natural sorting, and details.",
    )
    parser.add_argument("paths", nargs="*", help="Files or directories to list. Defaults to the current directory.")

    display = parser.add_argument_group("display options")
    display.add_argument("-1", "--oneline", action="store_true", help="Display one entry per line.")
    display.add_argument("-l", "--long", action="store_true", help="Display extended details and attributes.")
    display.add_argument("-G", "--grid", action="store_true", help="Display entries as a grid (with -l: several tables).")
    display.add_argument("-x", "--across", action="store_true", help="Sort the grid across, rather than downwards.")
    display.add_argument("-T", "--tree", action="store_true", help="Recurse into directories as a tree.")
    display.add_argument("-L", "--level", type=_positive_int, default=None, help="Limit the depth of the tree.")
    display.add_argument("--theme", default=None, help=f"Colour theme ({', '.join(available_theme_names())}).")
    display.add_argument("--no-color", "--no-colour", dest="no_color", action="store_true", help="Disable colour output.")
    display.add_argument("--width", type=_positive_int, default=None, help="Terminal width (default: probe the terminal).")

    filtering = parser.add_argument_group("filtering and sorting options")
    filtering.add_argument("-a", "--all", dest="show_all", action="store_true", help="Show hidden and dot files.")
    filtering.add_argument(
        "-s",
        "--sort",
        choices=[field.value for field in SortField],
        default=None,
        help="Field to sort by.",
    )
    filtering.add_argument("-r", "--reverse", action="store_true", help="Reverse the sort order.")

    details = parser.add_argument_group("long view options")
    size = details.add_mutually_exclusive_group()
    size.add_argument("-b", "--binary", action="store_true", help="List sizes with binary prefixes.")
    size.add_argument("-B", "--bytes", action="store_true", help="List sizes in bytes, without prefixes.")
    details.add_argument("--header", action="store_true", help="Add a header row to each column.")
    details.add_argument("-H", "--links", action="store_true", help="List each file's number of hard links.")
    details.add_argument("-i", "--inode", action="store_true", help="List each file's inode number.")
    details.add_argument("-S", "--blocks", action="store_true", help="List each file's number of file system blocks.")
    details.add_argument("-g", "--group", action="store_true", help="List each file's group.")
    details.add_argument("--git", action="store_true", help="List each file's git status.")
    details.add_argument(
        "-t",
        "--time",
        choices=[time_type.value for time_type in TimeType],
        default=TimeType.MODIFIED.value,
        help="Which timestamp field to show.",
    )
    details.add_argument(
        "--time-style",
        choices=[style.value for style in TimeStyle],
        default=None,
        help="How to format timestamps.",
    )

    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Remember the theme, sort field, size format, and time style for later runs.",
    )
    return parser


def _output_mode(args: argparse.Namespace) -> OutputMode:
    if args.long:
        return OutputMode.GRID_DETAILS if args.grid else OutputMode.DETAILS
    if args.oneline:
        return OutputMode.LINES
    return OutputMode.GRID


def _size_format(args: argparse.Namespace, saved: SavedDefaults) -> SizeFormat:
    if args.binary:
        return SizeFormat.BINARY
    if args.bytes:
        return SizeFormat.BYTES
    return saved.size_format or SizeFormat.DECIMAL


def options_from_args(args: argparse.Namespace, saved: SavedDefaults) -> ListingOptions:
    """Merge parsed flags over saved defaults into ``ListingOptions``."""
    if args.sort is not None:
        sort_field = SortField(args.sort)
    else:
        sort_field = saved.sort_field or SortField.NAME
    if args.time_style is not None:
        time_style = TimeStyle(args.time_style)
    else:
        time_style = saved.time_style or TimeStyle.DEFAULT

    return ListingOptions(
        sort_field=sort_field,
        reverse=args.reverse,
        size_format=_size_format(args, saved),
        mode=_output_mode(args),
        across=args.across,
        header=args.header,
        tree=args.tree,
        tree_depth=args.level,
        git=args.git,
        inode=args.inode,
        links=args.links,
        blocks=args.blocks,
        group=args.group,
        time_type=TimeType(args.time),
        time_style=time_style,
        show_all=args.show_all,
        theme=args.theme if args.theme is not None else saved.theme,
        no_color=args.no_color or not sys.stdout.isatty(),
    )


def scan_context_for(options: ListingOptions) -> ScanContext:
    git_for_directory = GitRepositories().provider_for if options.git else None
    return ScanContext(
        show_all=options.show_all,
        attributes=default_attribute_provider(),
        mounts=SystemMounts(),
        git_for_directory=git_for_directory,
    )


def _report(path: Path, exc: Exception) -> None:
    reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
    sys.stderr.write(f"lazyls: {path}: {reason}\n")


def run_listing(paths: list[Path], options: ListingOptions, terminal_width: int | None) -> bool:
    """Write the listing for ``paths`` to stdout; return ``False`` if any path failed."""
    context = scan_context_for(options)
    ctx = field_context(options, resolve_colours(options.theme, no_color=options.no_color))

    def order(records: list[FileRecord]) -> list[FileRecord]:
        return sort_records(records, options.sort_field, options.reverse)

    ok = True
    files: list[FileRecord] = []
    directories: list[FileRecord] = []
    for path in paths:
        try:
            record = record_for_path(path, context)
        except OSError as exc:
            _report(path, exc)
            ok = False
            continue
        if record.is_directory and not options.tree:
            directories.append(record)
        else:
            files.append(record)

    out = sys.stdout
    if options.tree:
        rows, errors = build_tree_rows(order(files), context, order, options.tree_depth)
        for failed_path, exc in errors:
            _report(failed_path, exc)
            ok = False
        records = [record for record, _depth in rows]
        out.write(render_listing(records, options, ctx, terminal_width, [depth for _record, depth in rows]))
        return ok

    wrote_any = False
    if files:
        out.write(render_listing(order(files), options, ctx, terminal_width))
        wrote_any = True

    show_titles = len(paths) > 1
    for directory in order(directories):
        children, error = list_directory(directory.path, context)
        if error is not None:
            _report(directory.path, error)
            ok = False
            continue
        if wrote_any:
            out.write("\n")
        wrote_any = True
        if show_titles:
            out.write(f"{directory.path}:\n")
        out.write(render_listing(order(children), options, ctx, terminal_width))
    return ok


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and list the requested paths.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Exits with status 1 when any path could not be listed.
    """
    configure_logging()
    parser = build_parser()
    args = parser.parse_args()
    if args.level is not None and not args.tree:
        parser.error("--level only applies together with --tree")

    options = options_from_args(args, load_defaults())
    if args.save_defaults and not save_defaults(options):
        sys.stderr.write("lazyls: could not save defaults\n")

    if default_path is None:
        default_path = Path(".")
    paths = [Path(raw) for raw in args.paths] or [default_path]
    terminal_width = args.width if args.width is not None else _default_render_width()
    logger.debug("listing %d path(s) with %s", len(paths), options)

    if not run_listing(paths, options, terminal_width):
        raise SystemExit(1)


if __name__ == "__main__":
    main()
