"""Section-based document assembly.

Long generated documents are described as an ordered list of
:class:`Section` descriptors.  Each descriptor carries a predicate deciding
whether it applies to a given subject and a function producing its text;
:func:`render_sections` is the only place that evaluates them.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any


def always(_: Any) -> bool:
    return True


@dataclass(frozen=True)
class Section:
    """One named block of a generated document."""

    name: str
    content: Callable[[Any], str]
    include: Callable[[Any], bool] = always


def select_sections(sections: Sequence[Section], subject: Any) -> list[Section]:
    """Return the sections whose predicate holds for *subject*, in order."""
    return [section for section in sections if section.include(subject)]


def render_sections(sections: Sequence[Section], subject: Any, separator: str = "\n") -> str:
    """Render every included section and join the results with *separator*."""
    return separator.join(
        section.content(subject) for section in select_sections(sections, subject)
    )
