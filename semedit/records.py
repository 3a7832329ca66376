"""
semedit.records — Field editors
================================

One editor per (record shape, field).  Rather than writing them by
hand, `on_field(name)` builds the editor for any field name, and
`field_editors(RecordType)` builds all of them for a declared type:

    @dataclass(frozen=True)
    class Person:
        name: str
        age: int

    P = field_editors(Person)
    P.age(lambda a: a + 1)(Person("Ada", 36))   → Person("Ada", 37)

The edited record is a new value; the original is unchanged.
Supported records, in the order they are tried:

    dataclass instance   dataclasses.replace (copy.copy for init=False fields)
    namedtuple           _replace
    mapping              shallow copy, then assign the key
    other object         copy.copy, then setattr
"""

import copy
import dataclasses
import logging
from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any

from .containers import _updated_mapping
from .core import Editor, Transform
from .exceptions import FieldNotFound

logger = logging.getLogger(__name__)


def _is_namedtuple(obj: Any) -> bool:
    return isinstance(obj, tuple) and hasattr(obj, "_fields") and hasattr(obj, "_replace")


def _missing(field: str, record: Any) -> FieldNotFound:
    logger.debug("field %r not found on %s", field, type(record).__name__)
    return FieldNotFound(field, type(record))


def _edit_field(record: Any, field: str, f: Transform) -> Any:
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        declared = {fd.name: fd for fd in dataclasses.fields(record)}
        if field not in declared:
            raise _missing(field, record)
        value = f(getattr(record, field))
        if declared[field].init:
            return dataclasses.replace(record, **{field: value})
        # replace() rejects init=False fields.
        new = copy.copy(record)
        object.__setattr__(new, field, value)
        return new

    if _is_namedtuple(record):
        if field not in record._fields:
            raise _missing(field, record)
        return record._replace(**{field: f(getattr(record, field))})

    if isinstance(record, Mapping):
        if field not in record:
            raise _missing(field, record)
        return _updated_mapping(record, {field: f(record[field])})

    if not hasattr(record, field):
        raise _missing(field, record)
    new = copy.copy(record)
    setattr(new, field, f(getattr(record, field)))
    return new


def on_field(field: str) -> Editor:
    """Edit the field called `field`.  Raises FieldNotFound if the record has none."""

    def run(f: Transform) -> Transform:
        def edit_record(record: Any) -> Any:
            return _edit_field(record, field, f)
        return edit_record

    return Editor(run, f"on_field({field!r})")


def field_editors(record_type: type) -> SimpleNamespace:
    """
    Generate one editor per declared field of a dataclass or namedtuple
    type, as attributes of a namespace.
    """
    if dataclasses.is_dataclass(record_type) and isinstance(record_type, type):
        names = [fd.name for fd in dataclasses.fields(record_type)]
    elif isinstance(record_type, type) and issubclass(record_type, tuple) and hasattr(record_type, "_fields"):
        names = list(record_type._fields)
    else:
        raise TypeError(f"field_editors() needs a dataclass or namedtuple type, got {record_type!r}")
    return SimpleNamespace(**{name: on_field(name) for name in names})
