"""Tests for semedit.records — field editors."""

import sys
import os
from dataclasses import dataclass, field
from typing import NamedTuple
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from semedit.records import on_field, field_editors
from semedit.containers import each, index
from semedit.exceptions import FieldNotFound
from semedit.laws import identity_law


@dataclass(frozen=True)
class Person:
    name: str
    age: int
    tags: list = field(default_factory=list)


class Pair(NamedTuple):
    left: int
    right: int


@dataclass(frozen=True)
class Counter:
    start: int
    cache: int = field(init=False, default=0)

    def __post_init__(self):
        object.__setattr__(self, "cache", self.start * 10)


class Plain:
    def __init__(self, x):
        self.x = x


# ═══════════════════════════════════════════════════════════════════
#  ON_FIELD
# ═══════════════════════════════════════════════════════════════════

class TestOnField:

    def test_dataclass(self):
        ada = Person("Ada", 36)
        older = on_field("age")(lambda a: a + 1)(ada)
        assert older == Person("Ada", 37)
        assert ada.age == 36

    def test_namedtuple(self):
        assert on_field("right")(str)(Pair(1, 2)) == Pair(1, "2")

    def test_mapping(self):
        assert on_field("k")(len)({"k": "abc", "j": 1}) == {"k": 3, "j": 1}

    def test_plain_object(self):
        p = Plain(1)
        q = on_field("x")(lambda v: v * 10)(p)
        assert q.x == 10
        assert p.x == 1
        assert q is not p

    @pytest.mark.parametrize("record", [
        Person("Ada", 36),
        Pair(1, 2),
        {"k": 1},
        Plain(1),
    ])
    def test_missing_field(self, record):
        with pytest.raises(FieldNotFound) as info:
            on_field("nope")(str)(record)
        assert info.value.field == "nope"
        assert info.value.record_type is type(record)

    def test_missing_field_is_lookup_error(self):
        with pytest.raises(LookupError):
            on_field("nope")(str)({"k": 1})

    def test_init_false_field(self):
        c = Counter(1)
        bumped = on_field("cache")(lambda v: v + 1)(c)
        assert bumped.cache == 11
        assert bumped.start == 1
        assert c.cache == 10

    def test_composes_with_containers(self):
        people = [Person("ada", 36, ["x"]), Person("alan", 41)]
        result = (index(0) >> on_field("tags") >> each)(str.upper)(people)
        assert result[0].tags == ["X"]
        assert result[1] is people[1]
        assert people[0].tags == ["x"]


# ═══════════════════════════════════════════════════════════════════
#  FIELD_EDITORS
# ═══════════════════════════════════════════════════════════════════

class TestFieldEditors:

    def test_dataclass_fields(self):
        P = field_editors(Person)
        assert P.name(str.upper)(Person("ada", 1)) == Person("ADA", 1)
        assert P.age(lambda a: a * 2)(Person("ada", 1)) == Person("ada", 2)
        assert hasattr(P, "tags")

    def test_namedtuple_fields(self):
        F = field_editors(Pair)
        assert F.left(lambda v: v + 1)(Pair(1, 2)) == Pair(2, 2)
        assert sorted(vars(F)) == ["left", "right"]

    def test_path_through_generated_editors(self):
        P = field_editors(Person)
        people = [Person("ada", 36), Person("alan", 41)]
        assert (each >> P.age)(lambda a: a + 1)(people) == [Person("ada", 37), Person("alan", 42)]

    def test_init_false_field_editor_is_lawful(self):
        C = field_editors(Counter)
        assert identity_law(C.cache, Counter(1))
        assert C.cache(lambda v: v * 2)(Counter(2)).cache == 40

    @pytest.mark.parametrize("not_a_record", [Plain, dict, Person("a", 1), 42])
    def test_rejects_other_types(self, not_a_record):
        with pytest.raises(TypeError):
            field_editors(not_a_record)
