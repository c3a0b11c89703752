"""Colour palettes and selection helpers.

A palette maps every category and every details field to a ``Style``.
``plain`` is used whenever colour is disabled; the remaining palettes are
selectable by name.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .classify import Category
from .style import Blue, Cyan, Fixed, Green, Plain, Purple, Red, Style, Yellow


@dataclass(frozen=True)
class FileTypeColours:
    normal: Style = Plain
    directory: Style = Plain
    symlink: Style = Plain
    special: Style = Plain
    executable: Style = Plain
    image: Style = Plain
    video: Style = Plain
    music: Style = Plain
    lossless: Style = Plain
    crypto: Style = Plain
    document: Style = Plain
    compressed: Style = Plain
    temp: Style = Plain
    immediate: Style = Plain
    compiled: Style = Plain


@dataclass(frozen=True)
class PermissionColours:
    directory: Style = Plain
    symlink: Style = Plain
    pipe: Style = Plain
    special: Style = Plain
    user_read: Style = Plain
    user_write: Style = Plain
    user_execute_file: Style = Plain
    user_execute_other: Style = Plain
    group_read: Style = Plain
    group_write: Style = Plain
    group_execute: Style = Plain
    other_read: Style = Plain
    other_write: Style = Plain
    other_execute: Style = Plain
    attribute: Style = Plain
    dash: Style = Plain


@dataclass(frozen=True)
class SizeColours:
    numbers: Style = Plain
    unit: Style = Plain


@dataclass(frozen=True)
class UserColours:
    user_you: Style = Plain
    user_someone_else: Style = Plain
    group_yours: Style = Plain
    group_not_yours: Style = Plain


@dataclass(frozen=True)
class LinkColours:
    normal: Style = Plain
    multi_link_file: Style = Plain


@dataclass(frozen=True)
class GitColours:
    new: Style = Plain
    modified: Style = Plain
    deleted: Style = Plain
    renamed: Style = Plain
    typechange: Style = Plain


@dataclass(frozen=True)
class Colours:
    """Semantic style palette used by every renderer."""

    name: str
    filetypes: FileTypeColours = field(default_factory=FileTypeColours)
    perms: PermissionColours = field(default_factory=PermissionColours)
    size: SizeColours = field(default_factory=SizeColours)
    users: UserColours = field(default_factory=UserColours)
    links: LinkColours = field(default_factory=LinkColours)
    git: GitColours = field(default_factory=GitColours)
    punctuation: Style = Plain
    date: Style = Plain
    inode: Style = Plain
    blocks: Style = Plain
    header: Style = Plain
    mount_point: Style = Plain
    symlink_path: Style = Plain
    broken_arrow: Style = Plain
    broken_filename: Style = Plain
    control_char: Style = Plain


DEFAULT_COLOURS = Colours(
    name="default",
    filetypes=FileTypeColours(
        normal=Plain,
        directory=Blue.bold(),
        symlink=Cyan.normal(),
        special=Yellow.normal(),
        executable=Green.bold(),
        image=Fixed(133).normal(),
        video=Fixed(135).normal(),
        music=Fixed(92).normal(),
        lossless=Fixed(93).normal(),
        crypto=Fixed(109).normal(),
        document=Fixed(105).normal(),
        compressed=Red.normal(),
        temp=Fixed(244).normal(),
        # underline() drops the bold, so this ends up underlined yellow.
        immediate=Yellow.bold().underline(),
        compiled=Fixed(137).normal(),
    ),
    perms=PermissionColours(
        directory=Blue.normal(),
        symlink=Cyan.normal(),
        pipe=Yellow.normal(),
        special=Yellow.normal(),
        user_read=Yellow.bold(),
        user_write=Red.bold(),
        user_execute_file=Green.bold().underline(),
        user_execute_other=Green.bold(),
        group_read=Yellow.normal(),
        group_write=Red.normal(),
        group_execute=Green.normal(),
        other_read=Yellow.normal(),
        other_write=Red.normal(),
        other_execute=Green.normal(),
        attribute=Plain,
        dash=Fixed(244).normal(),
    ),
    size=SizeColours(numbers=Green.bold(), unit=Green.normal()),
    users=UserColours(
        user_you=Yellow.bold(),
        user_someone_else=Plain,
        group_yours=Yellow.bold(),
        group_not_yours=Plain,
    ),
    links=LinkColours(normal=Red.bold(), multi_link_file=Red.on(Yellow)),
    git=GitColours(
        new=Green.normal(),
        modified=Blue.normal(),
        deleted=Red.normal(),
        renamed=Yellow.normal(),
        typechange=Purple.normal(),
    ),
    punctuation=Fixed(244).normal(),
    date=Blue.normal(),
    inode=Purple.normal(),
    blocks=Cyan.normal(),
    header=Plain.underline(),
    mount_point=Blue.underline(),
    symlink_path=Cyan.normal(),
    broken_arrow=Red.normal(),
    broken_filename=Red.underline(),
    control_char=Red.normal(),
)

OCEAN_COLOURS = Colours(
    name="ocean",
    filetypes=FileTypeColours(
        normal=Plain,
        directory=Fixed(45).bold(),
        symlink=Fixed(117).normal(),
        special=Fixed(153).normal(),
        executable=Fixed(84).bold(),
        image=Fixed(110).normal(),
        video=Fixed(111).normal(),
        music=Fixed(73).normal(),
        lossless=Fixed(74).normal(),
        crypto=Fixed(109).normal(),
        document=Fixed(152).normal(),
        compressed=Fixed(215).normal(),
        temp=Fixed(240).normal(),
        immediate=Fixed(229).underline(),
        compiled=Fixed(66).normal(),
    ),
    perms=PermissionColours(
        directory=Fixed(45).normal(),
        symlink=Fixed(117).normal(),
        pipe=Fixed(153).normal(),
        special=Fixed(153).normal(),
        user_read=Fixed(153).bold(),
        user_write=Fixed(215).bold(),
        user_execute_file=Fixed(84).underline(),
        user_execute_other=Fixed(84).bold(),
        group_read=Fixed(153).normal(),
        group_write=Fixed(215).normal(),
        group_execute=Fixed(84).normal(),
        other_read=Fixed(153).normal(),
        other_write=Fixed(215).normal(),
        other_execute=Fixed(84).normal(),
        attribute=Fixed(110).normal(),
        dash=Fixed(24).normal(),
    ),
    size=SizeColours(numbers=Fixed(73).bold(), unit=Fixed(73).normal()),
    users=UserColours(
        user_you=Fixed(153).bold(),
        user_someone_else=Plain,
        group_yours=Fixed(153).bold(),
        group_not_yours=Plain,
    ),
    links=LinkColours(normal=Fixed(215).bold(), multi_link_file=Fixed(215).on(Fixed(24))),
    git=GitColours(
        new=Fixed(84).normal(),
        modified=Fixed(39).normal(),
        deleted=Fixed(203).normal(),
        renamed=Fixed(229).normal(),
        typechange=Fixed(141).normal(),
    ),
    punctuation=Fixed(31).normal(),
    date=Fixed(39).normal(),
    inode=Fixed(141).normal(),
    blocks=Fixed(117).normal(),
    header=Fixed(45).underline(),
    mount_point=Fixed(45).underline(),
    symlink_path=Fixed(117).normal(),
    broken_arrow=Fixed(203).normal(),
    broken_filename=Fixed(203).underline(),
    control_char=Fixed(203).normal(),
)

PLAIN_COLOURS = Colours(name="plain")

_PALETTES: dict[str, Colours] = {
    DEFAULT_COLOURS.name: DEFAULT_COLOURS,
    OCEAN_COLOURS.name: OCEAN_COLOURS,
}

_CATEGORY_FIELDS: dict[Category, str] = {
    Category.DIRECTORY: "directory",
    Category.SYMLINK: "symlink",
    Category.SPECIAL: "special",
    Category.EXECUTABLE: "executable",
    Category.IMMEDIATE: "immediate",
    Category.IMAGE: "image",
    Category.VIDEO: "video",
    Category.MUSIC: "music",
    Category.LOSSLESS: "lossless",
    Category.CRYPTO: "crypto",
    Category.DOCUMENT: "document",
    Category.COMPRESSED: "compressed",
    Category.TEMP: "temp",
    Category.COMPILED: "compiled",
    Category.NORMAL: "normal",
}


def category_style(colours: Colours, category: Category) -> Style:
    """Return the file-name style for ``category``."""
    return getattr(colours.filetypes, _CATEGORY_FIELDS[category])


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain palette names."""
    return tuple(sorted(_PALETTES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid palette name, falling back to default."""
    if not name:
        return DEFAULT_COLOURS.name
    candidate = str(name).strip().lower()
    if candidate in _PALETTES:
        return candidate
    return DEFAULT_COLOURS.name


def resolve_colours(name: str | None, *, no_color: bool = False) -> Colours:
    """Return the concrete palette for the requested name and colour mode."""
    if no_color:
        return PLAIN_COLOURS
    return _PALETTES[normalize_theme_name(name)]


__all__ = [
    "Colours",
    "FileTypeColours",
    "PermissionColours",
    "SizeColours",
    "UserColours",
    "LinkColours",
    "GitColours",
    "DEFAULT_COLOURS",
    "OCEAN_COLOURS",
    "PLAIN_COLOURS",
    "available_theme_names",
    "category_style",
    "normalize_theme_name",
    "resolve_colours",
]
