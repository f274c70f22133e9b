"""Structured command log for turtle3d turtles.

A ``Turtle`` optionally carries a ``CommandLog``; every public command
it executes appends one ``CommandRecord``.  The log renders back to
the compact script form (``Move(1);``, ``SetPenStyle('red');``) that
``turtle3d.script`` parses, so a recorded session can be replayed.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Tuple


def _format_arg(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class CommandRecord:
    """One command issued to a turtle."""
    name: str                       # canonical command name, e.g. 'Move'
    args: Tuple[Any, ...] = ()

    def to_script(self) -> str:
        return f"{self.name}({', '.join(_format_arg(a) for a in self.args)});"


@dataclass
class CommandLog:
    """Append-only sink of ``CommandRecord`` entries."""
    records: List[CommandRecord] = field(default_factory=list)

    def append(self, record: CommandRecord) -> None:
        self.records.append(record)

    def clear(self) -> None:
        self.records.clear()

    def names(self) -> List[str]:
        return [r.name for r in self.records]

    def __iter__(self) -> Iterator[CommandRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index):
        return self.records[index]

    def to_script(self) -> str:
        """Render the log as script text, one command per line."""
        return "".join(r.to_script() + "\n" for r in self.records)
