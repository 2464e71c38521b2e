"""
Generic editing of the ordered list sections (experience, education).

One implementation serves both sections: the section name only decides which
tuple on the document is touched and which record type a new blank entry has.
Every function returns a new document; an impossible edit (index out of range,
cancelled drag) returns the document unchanged instead of raising.
"""

from __future__ import annotations
import logging
from dataclasses import replace
from typing import Optional, Sequence, Tuple, TypeVar

from schema_resume import ResumeDocument, entry_type, field_names

log = logging.getLogger(__name__)

T = TypeVar("T")


# ───────────────────────────────────────── pure list ops ──
def _in_range(items: Sequence, index: int) -> bool:
    return 0 <= index < len(items)


def reorder(items: Sequence[T], source: int, destination: Optional[int]) -> Tuple[T, ...]:
    """Move items[source] to position `destination` (splice semantics).

    `destination=None` is a cancelled drag and leaves the order alone.
    A destination past either end lands on the first/last slot.
    """
    items = tuple(items)
    if destination is None or not _in_range(items, source):
        return items
    rest = list(items)
    moved = rest.pop(source)
    destination = max(0, min(destination, len(rest)))
    rest.insert(destination, moved)
    return tuple(rest)


def remove_at(items: Sequence[T], index: int) -> Tuple[T, ...]:
    items = tuple(items)
    if not _in_range(items, index):
        return items
    return items[:index] + items[index + 1:]


# ───────────────────────────────────────── document ops ──
def _items(doc: ResumeDocument, section: str) -> tuple:
    entry_type(section)  # validates the section name
    return getattr(doc, section)


def append_entry(doc: ResumeDocument, section: str) -> ResumeDocument:
    """Add a blank entry at the end of `section`."""
    new = entry_type(section)()
    log.debug("append %s entry (now %d)", section, len(_items(doc, section)) + 1)
    return replace(doc, **{section: _items(doc, section) + (new,)})


def remove_entry(doc: ResumeDocument, section: str, index: int) -> ResumeDocument:
    items = _items(doc, section)
    if not _in_range(items, index):
        log.debug("remove %s[%s] ignored: out of range", section, index)
        return doc
    log.debug("remove %s[%d]", section, index)
    return replace(doc, **{section: remove_at(items, index)})


def reorder_entries(
    doc: ResumeDocument, section: str, source: int, destination: Optional[int]
) -> ResumeDocument:
    items = _items(doc, section)
    log.debug("reorder %s %s -> %s", section, source, destination)
    return replace(doc, **{section: reorder(items, source, destination)})


def set_entry_field(
    doc: ResumeDocument, section: str, index: int, field_name: str, value: str
) -> ResumeDocument:
    """Replace one field of one entry; all other entries are the same objects."""
    if field_name not in field_names(entry_type(section)):
        raise ValueError(f"{section} entries have no field {field_name!r}")
    items = _items(doc, section)
    if not _in_range(items, index):
        return doc
    updated = replace(items[index], **{field_name: value})
    return replace(doc, **{section: items[:index] + (updated,) + items[index + 1:]})
