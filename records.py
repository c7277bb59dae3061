"""
Records with a fixed set of mutable fields, and method tables attached to them.

A record's fields are decided when it is built: values can be replaced but no
field can be added or removed. One field (``methods`` unless told otherwise)
may hold a MethodTable; its entries receive the record as their first
argument, so ``person.is_adult()`` is ``table["is_adult"](person)``.

Attribute reads of ``get``, ``set``, ``invoke``, ``as_dict``, ``field_names``
and ``method_table`` return the Record methods, not fields of those names;
use get_field() and set_field() for such fields.
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, Iterator, Tuple, Union

from functions import FunctionValue
from utils import ArityError, DuplicateFieldError, UnknownFieldError, UnknownMethodError

METHODS_FIELD = "methods"

FieldSource = Union[Mapping, Iterable[Tuple[str, Any]]]


class MethodTable(Mapping):
    """Read-only mapping of method name to a function taking ``self`` first."""

    def __init__(self, entries: Union[Mapping, Iterable[Tuple[str, Callable]]]):
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        methods: Dict[str, FunctionValue] = {}
        for name, fn in pairs:
            if not isinstance(fn, FunctionValue):
                fn = FunctionValue(fn, name=name)
            if name in methods:
                raise DuplicateFieldError(name)
            if fn.arity < 1:
                # every method receives its owning record
                raise ArityError(name, 1, fn.arity)
            methods[name] = fn
        self._methods = methods

    def __getitem__(self, name: str) -> FunctionValue:
        return self._methods[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._methods)

    def __len__(self) -> int:
        return len(self._methods)

    def __repr__(self) -> str:
        return f"<MethodTable {', '.join(self._methods)}>"


class Record:
    """Fixed-shape aggregate of named, independently mutable fields."""

    __slots__ = ("_fields", "_methods_field")

    def __init__(self, fields: FieldSource, methods_field: str = METHODS_FIELD):
        pairs = fields.items() if isinstance(fields, Mapping) else fields
        data: Dict[str, Any] = {}
        for name, value in pairs:
            if name in data:
                raise DuplicateFieldError(name)
            data[name] = value
        object.__setattr__(self, "_fields", data)
        object.__setattr__(self, "_methods_field", methods_field)

    # --------- field access ----------
    def get(self, name: str) -> Any:
        try:
            return self._fields[name]
        except KeyError:
            raise UnknownFieldError(name) from None

    def set(self, name: str, value: Any) -> None:
        if name not in self._fields:
            raise UnknownFieldError(name)
        self._fields[name] = value

    def field_names(self) -> Tuple[str, ...]:
        return tuple(self._fields)

    def as_dict(self, include_methods: bool = False) -> Dict[str, Any]:
        """Copy of the field values, method tables left out unless asked for."""
        return {
            name: value for name, value in self._fields.items()
            if include_methods or not isinstance(value, MethodTable)
        }

    # --------- method dispatch ----------
    @property
    def method_table(self):
        table = self._fields.get(self._methods_field)
        return table if isinstance(table, MethodTable) else None

    def invoke(self, name: str, *args: Any) -> Any:
        table = self.method_table
        if table is None or name not in table:
            raise UnknownMethodError(name)
        return table[name](self, *args)

    # --------- attribute sugar ----------
    def __getattr__(self, name: str) -> Any:
        # only reached when normal lookup fails
        if name in Record.__slots__ or name.startswith("__"):
            raise AttributeError(name)
        fields = self._fields
        if name in fields:
            return fields[name]
        table = self.method_table
        if table is not None and name in table:
            return table[name].partial(self)
        raise UnknownFieldError(name)

    def __setattr__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __delattr__(self, name: str) -> None:
        raise TypeError("Record fields cannot be removed")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self._fields == other._fields

    __hash__ = None

    def __repr__(self) -> str:
        parts = ", ".join(f"{name}={value!r}" for name, value in self._fields.items())
        return f"Record({parts})"


def make_record(fields: FieldSource, methods_field: str = METHODS_FIELD) -> Record:
    """Build a record; a repeated field name raises DuplicateFieldError."""
    return Record(fields, methods_field=methods_field)


def make_method_table(entries) -> MethodTable:
    return MethodTable(entries)


def get_field(record: Record, name: str) -> Any:
    return record.get(name)


def set_field(record: Record, name: str, value: Any) -> None:
    record.set(name, value)


def invoke(record: Record, method_name: str, *args: Any) -> Any:
    """Call ``method_name`` from the record's method table with the record first."""
    return record.invoke(method_name, *args)


def format_value(value: Any) -> str:
    """Render a value for display: records as ``{name: Ben, age: 21}``, lists as ``[a, b]``."""
    if isinstance(value, Record):
        inner = ", ".join(
            f"{name}: {format_value(v)}" for name, v in value.as_dict().items()
        )
        return "{" + inner + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_value(v) for v in value) + "]"
    return str(value)
