"""Placeholder substitution for check-constraint expressions.

Two dialects exist:

- Column checks use the literal ``<name>`` for the owning column.
- Table checks use ``<logical.path>`` to name any column by logical name.
"""

import re
from collections.abc import Callable

COLUMN_PLACEHOLDER = "<name>"
PATH_PLACEHOLDER = re.compile(r"<([^\s<>]+)>")


def substitute_column_placeholder(expression: str, physical_name: str) -> str:
    """
    Bind a column check expression to its column.

    ``nvl(<name>, 0) <= 1000`` → ``nvl(PRICE, 0) <= 1000``
    ``>= 100``                 → ``PRICE >= 100``
    """
    if COLUMN_PLACEHOLDER in expression:
        return expression.replace(COLUMN_PLACEHOLDER, physical_name)
    return f"{physical_name} {expression}"


def substitute_path_placeholders(
    expression: str, resolve: Callable[[str], str | None]
) -> str:
    """Replace every ``<path>`` with ``resolve(path)``; unresolved become ''."""
    return PATH_PLACEHOLDER.sub(lambda m: resolve(m.group(1)) or "", expression)


def find_path_placeholders(expression: str) -> list[str]:
    """List the paths referenced by ``<path>`` placeholders, in order."""
    return PATH_PLACEHOLDER.findall(expression)
