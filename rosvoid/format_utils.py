"""
String formatting helpers used by the recipe template.

All functions are pure. Their output ends up verbatim in generated
xbps-src templates, so column positions and line breaks matter.
"""

from typing import Iterable

DEFAULT_PREFIX = "ros-melodic"

# Provided implicitly by the build toolchain
IGNORED_DEPENDENCIES = frozenset({"cmake", "python3", "python", "catkin"})

MAX_COLUMN = 100
DESCRIPTION_LIMIT = 72
DESCRIPTION_MARGIN = 6
DESCRIPTION_KEEP = 62
ELLIPSIS = "..."


def normalize_package_name(name: str) -> str:
    """Return ``name`` with every underscore replaced by a hyphen."""
    return name.replace("_", "-")


def normalize_version(version: str) -> str:
    """Return ``version`` with hyphens and colons replaced by underscores."""
    return version.replace("-", "_").replace(":", "_")


def truncate_description(description: str) -> str:
    """
    Trim a description so it fits a short_desc line.

    Leading and trailing whitespace and periods are removed. Descriptions
    that would not leave room for the surrounding ``short_desc="..."``
    are cut to 62 characters plus an ellipsis.
    """
    description = description.strip(" .\t\r\n")
    if len(description) + DESCRIPTION_MARGIN >= DESCRIPTION_LIMIT:
        description = description[:DESCRIPTION_KEEP] + ELLIPSIS
    return description


def wrap_dependency_list(names: Iterable[str], start_column: int, indent_level: int,
                         first: bool, prefix: str = DEFAULT_PREFIX) -> str:
    """
    Render dependency names as a space separated, column wrapped list.

    Args:
        names: Dependency names as declared in the manifest
        start_column: Column (1-based) where the list starts
        indent_level: 1 to indent continuation lines with a tab
        first: Whether the first rendered entry starts the value, i.e.
               needs no leading separator
        prefix: Namespace prepended to every name

    Returns:
        The rendered list. Names in IGNORED_DEPENDENCIES are skipped.
    """
    parts = []
    column = start_column

    for name in names:
        if name in IGNORED_DEPENDENCIES:
            continue

        entry = f"{prefix}-{normalize_package_name(name)}"
        if column + len(entry) + 1 > MAX_COLUMN:
            parts.append("\n")
            column = 1
            if indent_level == 1:
                # A tab counts as two columns
                parts.append("\t")
                column += 2
        if not first:
            parts.append(" ")
            column += 1
        first = False
        parts.append(entry)
        column += len(entry)

    return "".join(parts)
