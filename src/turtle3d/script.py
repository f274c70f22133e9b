"""
Turtle command scripts.

A script is a sequence of statements of the form ``Name(arg, ...);``,
the same text a ``CommandLog`` renders.  Statements are separated by
semicolons and/or newlines.  ``//`` and ``#`` start comments that run
to the end of the line.  Arguments are numbers, quoted strings, or
``true``/``false``.  Both canonical names (``Move``) and their short
forms (``M``) are accepted.

Example::

    DrawTurtle('blue');
    Move(1); Turn(90); Move(1);
    DrawTurtle('red');
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Tuple

from turtle3d.errors import ScriptError
from turtle3d.events import CommandRecord

logger = logging.getLogger(__name__)

# canonical name -> (Turtle method, min args, max args)
COMMANDS: Dict[str, Tuple[str, int, int]] = {
    "Home": ("home", 0, 0),
    "Clean": ("clean", 0, 1),
    "PenActive": ("pen_active", 1, 1),
    "PenDown": ("pen_down", 0, 0),
    "PenUp": ("pen_up", 0, 0),
    "SetPenWidth": ("set_pen_width", 1, 1),
    "SetPenStyle": ("set_pen_style", 1, 1),
    "Move": ("move", 1, 1),
    "Turn": ("turn", 1, 1),
    "Roll": ("roll", 1, 1),
    "Dive": ("dive", 1, 1),
    "Segment": ("segment", 3, 3),
    "DrawTurtle": ("draw_turtle", 1, 1),
}

ALIASES: Dict[str, str] = {
    "PA": "PenActive",
    "PD": "PenDown",
    "PU": "PenUp",
    "M": "Move",
    "T": "Turn",
    "R": "Roll",
    "D": "Dive",
    "S": "Segment",
    "DT": "DrawTurtle",
}

_TOKEN = re.compile(r"""
    (?P<ws>[ \t\r]+)
  | (?P<nl>\n)
  | (?P<comment>(//|\#)[^\n]*)
  | (?P<number>[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?)
  | (?P<string>'(\\.|[^'\\\n])*'|"(\\.|[^"\\\n])*")
  | (?P<name>[A-Za-z_][A-Za-z_0-9]*)
  | (?P<punct>[(),;])
""", re.VERBOSE)


def _tokenize(text: str) -> List[Tuple[str, Any, int]]:
    tokens: List[Tuple[str, Any, int]] = []
    line = 1
    pos = 0
    while pos < len(text):
        m = _TOKEN.match(text, pos)
        if m is None:
            raise ScriptError(f"unexpected character {text[pos]!r}", line)
        kind = m.lastgroup
        value = m.group(kind)
        if kind == "nl":
            tokens.append(("sep", "\n", line))
            line += 1
        elif kind == "number":
            number = int(value) if re.fullmatch(r"[-+]?\d+", value) else float(value)
            tokens.append(("value", number, line))
        elif kind == "string":
            tokens.append(("value", re.sub(r"\\(.)", r"\1", value[1:-1]), line))
        elif kind == "name":
            if value in ("true", "false"):
                tokens.append(("value", value == "true", line))
            else:
                tokens.append(("name", value, line))
        elif kind == "punct":
            tokens.append(("sep" if value == ";" else value, value, line))
        pos = m.end()
    return tokens


def parse_script(text: str) -> List[CommandRecord]:
    """Parse script text into canonical ``CommandRecord`` entries."""
    tokens = _tokenize(text)
    records: List[CommandRecord] = []
    i = 0

    def expect(kind: str) -> Tuple[str, Any, int]:
        nonlocal i
        if i >= len(tokens):
            last = tokens[-1][2] if tokens else 1
            raise ScriptError(f"unexpected end of script, expected {kind!r}", last)
        tok = tokens[i]
        if tok[0] != kind:
            raise ScriptError(f"expected {kind!r}, found {tok[1]!r}", tok[2])
        i += 1
        return tok

    while i < len(tokens):
        if tokens[i][0] == "sep":
            i += 1
            continue
        _, name, line = expect("name")
        canonical = ALIASES.get(name, name)
        if canonical not in COMMANDS:
            raise ScriptError(f"unknown command {name!r}", line)
        expect("(")
        args: List[Any] = []
        if i < len(tokens) and tokens[i][0] != ")":
            args.append(expect("value")[1])
            while i < len(tokens) and tokens[i][0] == ",":
                i += 1
                args.append(expect("value")[1])
        expect(")")
        _, lo, hi = COMMANDS[canonical]
        if not lo <= len(args) <= hi:
            raise ScriptError(f"{canonical} takes {lo if lo == hi else f'{lo} to {hi}'} "
                              f"argument(s), got {len(args)}", line)
        records.append(CommandRecord(canonical, tuple(args)))
        if i < len(tokens) and tokens[i][0] != "sep":
            raise ScriptError(f"expected ';' or newline after {canonical}(...)", tokens[i][2])
    return records


def run_script(turtle, commands: Iterable[CommandRecord]) -> int:
    """Dispatch each record to ``turtle``; return the number executed."""
    count = 0
    for record in commands:
        if record.name not in COMMANDS:
            raise ScriptError(f"unknown command {record.name!r}")
        method = getattr(turtle, COMMANDS[record.name][0])
        method(*record.args)
        count += 1
    logger.debug("executed %d commands", count)
    return count
