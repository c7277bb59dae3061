"""
People records and the grow-up pipeline over them.

A person is a record with ``name``, ``age`` and ``methods`` fields. The
pipeline ages everyone in place, keeps the adults and picks the youngest.
"""

import logging
from typing import Iterable, List, Optional

from functions import FunctionValue
from lazy import iterate
from records import MethodTable, Record, get_field, make_method_table, make_record, set_field
from reducers import field_key, min_by

logger = logging.getLogger('record_pipeline.people')

ADULT_AGE = 18

SAMPLE_PEOPLE = (
    ("Ben", 19),
    ("Matthew", 17),
    ("Emma", 15),
)


def person_methods(adult_age: int = ADULT_AGE) -> MethodTable:
    """Method table shared by person records; ``is_adult`` closes over ``adult_age``."""
    def is_adult(self):
        return get_field(self, "age") >= adult_age

    def describe(self):
        return f"{get_field(self, 'name')} ({get_field(self, 'age')})"

    return make_method_table({"is_adult": is_adult, "describe": describe})


def make_person(name: str, age: int, methods: Optional[MethodTable] = None) -> Record:
    if methods is None:
        methods = person_methods()
    return make_record([("name", name), ("age", age), ("methods", methods)])


def grow_up(increment: int) -> FunctionValue:
    """Return a one-argument function adding ``increment`` to a person's age.

    The person is updated in place and returned, so every reference to it
    sees the new age.
    """
    def grow(person):
        set_field(person, "age", get_field(person, "age") + increment)
        return person

    return FunctionValue(grow, name=f"grow_up({increment})")


def sample_people(methods: Optional[MethodTable] = None) -> List[Record]:
    if methods is None:
        methods = person_methods()
    return [make_person(name, age, methods) for name, age in SAMPLE_PEOPLE]


def youngest_adult(people: Iterable[Record], increment: int = 2, key_field: str = "age") -> Record:
    """Age everyone by ``increment`` and return the adult with the smallest key.

    Raises EmptySequenceError when nobody is an adult afterwards.
    """
    logger.debug("Selecting youngest adult (increment=%d, key=%s)", increment, key_field)
    return (
        iterate(people)
        .map(grow_up(increment))
        .filter(lambda person: person.is_adult())
        .reduce(min_by(field_key(key_field)))
    )
