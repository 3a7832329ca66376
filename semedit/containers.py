"""
semedit.containers — Editors for sequences, pairs and mappings
===============================================================

Every editor here focuses on zero, one or many elements of a container
and rebuilds a container of the SAME type around the edited elements:

    list        → list
    tuple       → tuple
    namedtuple  → namedtuple (via _make)
    str         → str (edited characters are joined back)
    set         → set,  frozenset → frozenset
    dict        → dict (other mutable mappings are shallow-copied)
    mappingproxy → mappingproxy
    range       → list (a range cannot hold edited elements)

Any other read-only mapping comes back as a dict.

Absence is never an error.  Editing the first element of an empty list,
the value of a key that is not there, or the contents of None leaves
the whole unchanged.  Only a request that cannot mean anything fails:
an index past the end (IndexOutOfRange) or a non-positive stride
(InvalidStride).
"""

import copy
import logging
from collections.abc import Mapping, MutableMapping, Sequence, Set
from types import MappingProxyType
from typing import Any, Callable, Hashable, Iterable

from .core import Editor, Transform
from .exceptions import IndexOutOfRange, InvalidStride

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  REBUILDING CONTAINERS
# ═══════════════════════════════════════════════════════════════════

def _rebuild(container: Any, items: Iterable[Any]) -> Any:
    """Build a container of the same type as `container` from `items`."""
    if isinstance(container, str):
        return "".join(items)
    if isinstance(container, tuple):
        if hasattr(container, "_make"):  # namedtuple
            return container._make(items)
        return tuple(items)
    if isinstance(container, list):
        return list(items)
    if isinstance(container, frozenset):
        return frozenset(items)
    if isinstance(container, set):
        return set(items)
    if isinstance(container, range):
        return list(items)
    return type(container)(items)


def _updated_mapping(mapping: Mapping, updates: dict) -> Mapping:
    """A copy of `mapping` with `updates` assigned.  The original is untouched."""
    if not updates:
        return mapping
    if type(mapping) is dict:
        new = dict(mapping)
    elif isinstance(mapping, MutableMapping):
        new = copy.copy(mapping)
    else:
        new = dict(mapping)
    new.update(updates)
    if isinstance(mapping, MappingProxyType):
        return MappingProxyType(new)
    return new


def _require_sequence(whole: Any, editor_name: str) -> None:
    if not isinstance(whole, Sequence):
        raise TypeError(f"{editor_name} needs a sequence, got {type(whole).__name__}")


# ═══════════════════════════════════════════════════════════════════
#  INDEX
# ═══════════════════════════════════════════════════════════════════

def index(i: int) -> Editor:
    """
    Edit the element at zero-based position `i`.

        index(2)(lambda x: x + 100)([1, 2, 3, 4, 5])  → [1, 2, 103, 4, 5]

    Raises IndexOutOfRange when applied to a sequence where `i` is
    negative or `i >= len(sequence)`.  Negative indices are NOT
    counted from the end.
    """
    if not isinstance(i, int) or isinstance(i, bool):
        raise TypeError(f"index() takes an int, got {type(i).__name__}")

    name = f"index({i})"

    def run(f: Transform) -> Transform:
        def edit_at(seq: Sequence) -> Sequence:
            _require_sequence(seq, name)
            n = len(seq)
            if i < 0 or i >= n:
                logger.debug("%s applied to sequence of length %d", name, n)
                raise IndexOutOfRange(i, n)
            return _rebuild(seq, (f(x) if k == i else x for k, x in enumerate(seq)))
        return edit_at

    return Editor(run, name)


# ═══════════════════════════════════════════════════════════════════
#  MAP-LIFT: every element, optional value
# ═══════════════════════════════════════════════════════════════════

def _run_each(f: Transform) -> Transform:
    def edit_all(container: Any) -> Any:
        if container is None:
            return None
        if isinstance(container, Mapping):
            return _updated_mapping(container, {k: f(v) for k, v in container.items()})
        if isinstance(container, (Sequence, Set)):
            if not container:
                return container
            return _rebuild(container, (f(x) for x in container))
        raise TypeError(f"each needs a container, got {type(container).__name__}")
    return edit_all


each: Editor = Editor(_run_each, "each")


def _run_maybe(f: Transform) -> Transform:
    def edit_present(value: Any) -> Any:
        return None if value is None else f(value)
    return edit_present


maybe: Editor = Editor(_run_maybe, "maybe")


# ═══════════════════════════════════════════════════════════════════
#  POSITIONAL SELECTIONS
# ═══════════════════════════════════════════════════════════════════

def _run_first(f: Transform) -> Transform:
    def edit_first(seq: Sequence) -> Sequence:
        _require_sequence(seq, "first")
        if not seq:
            return seq
        return _rebuild(seq, (f(x) if k == 0 else x for k, x in enumerate(seq)))
    return edit_first


def _run_last(f: Transform) -> Transform:
    def edit_last(seq: Sequence) -> Sequence:
        _require_sequence(seq, "last")
        if not seq:
            return seq
        end = len(seq) - 1
        return _rebuild(seq, (f(x) if k == end else x for k, x in enumerate(seq)))
    return edit_last


first: Editor = Editor(_run_first, "first")
last: Editor = Editor(_run_last, "last")


def on_matching(predicate: Callable[[Any], bool]) -> Editor:
    """
    Edit every element for which `predicate` is true; order is kept.

        on_matching(lambda x: x % 2 == 0)(neg)([1, 2, 3, 4])  → [1, -2, 3, -4]
    """
    name = f"on_matching({getattr(predicate, '__name__', 'predicate')})"

    def run(f: Transform) -> Transform:
        def edit_matching(container: Any) -> Any:
            if not isinstance(container, (Sequence, Set)):
                raise TypeError(f"{name} needs a sequence or set, got {type(container).__name__}")
            return _rebuild(container, (f(x) if predicate(x) else x for x in container))
        return edit_matching

    return Editor(run, name)


def on_every(n: int) -> Editor:
    """
    Edit the elements at positions 0, n, 2n, ...

        on_every(3)(lambda _: 0)([1, 2, 3, 4, 5, 6, 7, 8, 9])
            → [0, 2, 3, 0, 5, 6, 0, 8, 9]

    Raises InvalidStride right away when `n` is not a positive int.
    """
    if not isinstance(n, int) or isinstance(n, bool) or n <= 0:
        logger.debug("on_every rejected stride %r", n)
        raise InvalidStride(n)

    name = f"on_every({n})"

    def run(f: Transform) -> Transform:
        def edit_strided(seq: Sequence) -> Sequence:
            _require_sequence(seq, name)
            return _rebuild(seq, (f(x) if k % n == 0 else x for k, x in enumerate(seq)))
        return edit_strided

    return Editor(run, name)


# ═══════════════════════════════════════════════════════════════════
#  PAIRS
# ═══════════════════════════════════════════════════════════════════

def _pair_editor(position: int, name: str) -> Editor:
    def run(f: Transform) -> Transform:
        def edit_component(pair: Sequence) -> Sequence:
            _require_sequence(pair, name)
            if len(pair) != 2:
                raise TypeError(f"{name} needs a pair, got {len(pair)} elements")
            a, b = pair
            if position == 0:
                return _rebuild(pair, (f(a), b))
            return _rebuild(pair, (a, f(b)))
        return edit_component
    return Editor(run, name)


left: Editor = _pair_editor(0, "left")
right: Editor = _pair_editor(1, "right")


# ═══════════════════════════════════════════════════════════════════
#  KEYED MAPPINGS
# ═══════════════════════════════════════════════════════════════════

def on_values(keys: Iterable[Hashable]) -> Editor:
    """
    Edit the values stored under `keys`.  Keys that are absent are
    skipped; the mapping gains no new entries.
    """
    if isinstance(keys, (str, bytes)):
        raise TypeError(f"on_values() takes an iterable of keys, got {type(keys).__name__}; use on_value() for one key")
    keys = tuple(keys)
    name = f"on_values({', '.join(repr(k) for k in keys)})"

    def run(f: Transform) -> Transform:
        def edit_values(mapping: Mapping) -> Mapping:
            if not isinstance(mapping, Mapping):
                raise TypeError(f"{name} needs a mapping, got {type(mapping).__name__}")
            updates = {k: f(mapping[k]) for k in keys if k in mapping}
            return _updated_mapping(mapping, updates)
        return edit_values

    return Editor(run, name)


def on_value(key: Hashable) -> Editor:
    """Edit the value stored under `key`; a missing key changes nothing."""
    e = on_values((key,))
    return Editor(e.run, f"on_value({key!r})")
