# topmark:header:start
#
#   project      : VarExport
#   file         : buffer.py
#   file_relpath : src/varexport/exporter/buffer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line-buffer helpers shared by the export engine and the object strategies.

Generated code is handled as a list of lines (a *fragment*). The first line of
a fragment is positioned by whoever embeds it; every following line is
indented relative to the construct that owns it.
"""

from __future__ import annotations

import keyword
import re
from typing import TYPE_CHECKING

from varexport.constants import DEFAULT_INDENT

if TYPE_CHECKING:
    from collections.abc import Sequence

# Two characters minimum: single-letter names take the quoted form too.
SAFE_IDENTIFIER_RE: re.Pattern[str] = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]+$")

SCOPE_OPEN: str = "(lambda: ("
SCOPE_CLOSE: str = ")[-1])()"


def indent(lines: Sequence[str], depth: int = 1, unit: str = DEFAULT_INDENT) -> list[str]:
    """Indent every non-empty line by ``depth`` indentation units.

    Blank lines pass through unindented so no trailing whitespace is produced.

    Args:
        lines (Sequence[str]): Lines to indent.
        depth (int): Number of indentation units.
        unit (str): Indentation unit.

    Returns:
        list[str]: New list of lines.
    """
    prefix = unit * depth
    return [f"{prefix}{line}" if line else line for line in lines]


def escape_identifier(name: str) -> str:
    """Return ``name`` if it can be written as a bare identifier, else its quoted literal.

    The bare form is used for attribute-style access (``Cls.NAME``) and keyword
    arguments (``NAME=value``); callers switch to computed access
    (``Cls['name']``, ``**{'name': value}``) whenever the quoted form comes back.
    Python keywords are quoted as they are not valid in either position.

    Args:
        name (str): Member, attribute or keyword name.

    Returns:
        str: ``name`` unchanged, or ``repr(name)``.
    """
    if SAFE_IDENTIFIER_RE.match(name) and not keyword.iskeyword(name):
        return name
    return repr(name)


def is_bare_identifier(name: str) -> bool:
    """Return True if `escape_identifier` leaves ``name`` unchanged."""
    return escape_identifier(name) == name


def append_to_last(lines: Sequence[str], suffix: str) -> list[str]:
    """Return a copy of ``lines`` with ``suffix`` appended to the last line."""
    out = list(lines)
    out[-1] += suffix
    return out


def prefix_first(prefix: str, lines: Sequence[str]) -> list[str]:
    """Return a copy of ``lines`` with ``prefix`` prepended to the first line."""
    out = list(lines)
    out[0] = prefix + out[0]
    return out


def wrap_in_scope(lines: Sequence[str], unit: str = DEFAULT_INDENT) -> list[str]:
    """Wrap statement-like lines in an immediately invoked, parameterless lambda.

    Each wrapped line is one element of a tuple, so it must end with a comma;
    the last element is the value of the whole expression. Names bound inside
    with ``:=`` are locals of the lambda and never leak into the surrounding
    generated expression::

        (lambda: (
            (obj := Cls()),
            obj,
        )[-1])()

    Args:
        lines (Sequence[str]): Tuple elements, each terminated by a comma.
        unit (str): Indentation unit.

    Returns:
        list[str]: The wrapped fragment.
    """
    return [SCOPE_OPEN, *indent(lines, 1, unit), SCOPE_CLOSE]
