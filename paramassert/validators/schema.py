"""Schema model — the four tagged schema variants, their builders, and the shorthand parser.

Shorthand grammar:

    'b' | 'n' | 's' joined by ':' [ ',r' ]     primitive union; ',r' = optional field
    {name: schema, ...}                         keyed object
    [schema] | [schema, 'f'] | [schema, 'F']    array of one element type
    callable(value) -> bool                     predicate

Examples:

    'n:s,r'                                     number or string; optional
    {'id': 's:n,r', 'info': {'name': 's', 'phones': ['s,r']}}
    ['n', 'F']                                  numbers; field required, may be empty
    [{'id': 's,r'}]                             element may be absent => array optional
    [['n']]                                     2-d numbers, no empty rows
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Sequence, Union

from paramassert.validators.base import BaseValidator
from paramassert.validators.classify import TypeCategory
from paramassert.validators.models import PathKey, SchemaError

OPTIONAL_MARK = "r"


class Primitive(str, Enum):
    """Primitive type tokens usable in a primitive-union schema."""

    BOOLEAN = "b"
    NUMBER = "n"
    STRING = "s"

    @property
    def category(self) -> TypeCategory:
        return _PRIMITIVE_CATEGORIES[self]


_PRIMITIVE_CATEGORIES = {
    Primitive.BOOLEAN: TypeCategory.BOOLEAN,
    Primitive.NUMBER: TypeCategory.NUMBER,
    Primitive.STRING: TypeCategory.STRING,
}


class ForceFlag(str, Enum):
    """Array force flags.

    FORCED: the array field is required; emptiness still follows the element schema.
    FORCED_ALLOW_EMPTY: the array field is required and [] is always accepted.
    """

    FORCED = "f"
    FORCED_ALLOW_EMPTY = "F"

    @property
    def level(self) -> int:
        return 1 if self is ForceFlag.FORCED else 2


@dataclass(frozen=True)
class PrimitiveSchema:
    types: tuple[Primitive, ...]
    optional: bool = False

    def __post_init__(self):
        if not self.types:
            raise SchemaError("primitive schema declares no types")
        coerced = []
        for token in self.types:
            try:
                coerced.append(Primitive(token))
            except ValueError:
                raise SchemaError(f"unknown primitive type {token!r}") from None
        object.__setattr__(self, "types", tuple(coerced))
        if len(set(self.types)) != len(self.types):
            raise SchemaError(f"duplicate primitive type in {self.to_shorthand()!r}")

    @property
    def categories(self) -> frozenset[TypeCategory]:
        return frozenset(t.category for t in self.types)

    def to_shorthand(self) -> str:
        text = ":".join(t.value for t in self.types)
        return f"{text},{OPTIONAL_MARK}" if self.optional else text


@dataclass(frozen=True)
class ObjectSchema:
    properties: Mapping[str, "Schema"] = field(default_factory=dict)

    def to_shorthand(self) -> dict:
        return {name: sub.to_shorthand() for name, sub in self.properties.items()}


@dataclass(frozen=True)
class ArraySchema:
    element: "Schema"
    force: Optional[ForceFlag] = None

    @property
    def force_level(self) -> int:
        return self.force.level if self.force is not None else 0

    def to_shorthand(self) -> list:
        shorthand = [self.element.to_shorthand()]
        if self.force is not None:
            shorthand.append(self.force.value)
        return shorthand


@dataclass(frozen=True)
class PredicateSchema:
    func: Callable[[Any], bool]

    def __post_init__(self):
        if not callable(self.func):
            raise SchemaError(f"predicate must be callable, got {type(self.func).__name__}")

    def to_shorthand(self) -> Callable[[Any], bool]:
        return self.func


# A compiled BaseValidator may stand in for any node and is used as-is
Schema = Union[PrimitiveSchema, ObjectSchema, ArraySchema, PredicateSchema, BaseValidator]

SCHEMA_TYPES = (PrimitiveSchema, ObjectSchema, ArraySchema, PredicateSchema, BaseValidator)


# ── Builders ──


def primitive(*types: Union[str, Primitive], optional: bool = False) -> PrimitiveSchema:
    """Build a primitive-union schema, e.g. ``primitive("n", "s", optional=True)``."""
    parsed = []
    for token in types:
        try:
            parsed.append(Primitive(token))
        except ValueError:
            raise SchemaError(f"unknown primitive type {token!r}") from None
    return PrimitiveSchema(types=tuple(parsed), optional=optional)


def obj(properties: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> ObjectSchema:
    """Build an object schema from a mapping and/or keyword arguments."""
    merged = dict(properties or {})
    merged.update(kwargs)
    return _parse_object(merged, ())


def array_of(element: Any, force: Union[str, ForceFlag, None] = None) -> ArraySchema:
    """Build an array schema; ``force`` is None, 'f' or 'F'."""
    return ArraySchema(
        element=parse_schema(element, (0,)),
        force=_parse_force(force, ()) if force is not None else None,
    )


def predicate(func: Callable[[Any], bool]) -> PredicateSchema:
    return PredicateSchema(func=func)


# ── Shorthand parser ──


def parse_schema(raw: Any, path: Sequence[PathKey] = ()) -> Schema:
    """Turn shorthand (or an already-built schema) into a tagged schema.

    Raises:
        SchemaError: if any node in the tree is malformed. ``path`` locates it.
    """
    if isinstance(raw, SCHEMA_TYPES):
        return raw
    if isinstance(raw, str):
        return _parse_primitive(raw, path)
    if isinstance(raw, Mapping):
        return _parse_object(raw, path)
    if isinstance(raw, (list, tuple)):
        return _parse_array(raw, path)
    if callable(raw):
        return PredicateSchema(func=raw)
    raise SchemaError(f"unsupported schema of type {type(raw).__name__}", path)


def _parse_primitive(raw: str, path: Sequence[PathKey]) -> PrimitiveSchema:
    parts = raw.split(",")
    if len(parts) > 2:
        raise SchemaError(f"too many ',' segments in {raw!r}", path)
    optional = False
    if len(parts) == 2:
        if parts[1] != OPTIONAL_MARK:
            raise SchemaError(f"unknown field flag {parts[1]!r} in {raw!r}", path)
        optional = True

    types: list[Primitive] = []
    for token in parts[0].split(":"):
        try:
            kind = Primitive(token)
        except ValueError:
            raise SchemaError(f"unknown primitive type {token!r} in {raw!r}", path) from None
        if kind in types:
            raise SchemaError(f"duplicate primitive type {token!r} in {raw!r}", path)
        types.append(kind)
    return PrimitiveSchema(types=tuple(types), optional=optional)


def _parse_object(raw: Mapping, path: Sequence[PathKey]) -> ObjectSchema:
    properties: dict[str, Schema] = {}
    for name, sub in raw.items():
        if not isinstance(name, str):
            raise SchemaError(f"property names must be strings, got {name!r}", path)
        properties[name] = parse_schema(sub, tuple(path) + (name,))
    return ObjectSchema(properties=properties)


def _parse_array(raw: Sequence, path: Sequence[PathKey]) -> ArraySchema:
    if len(raw) == 0 or len(raw) > 2:
        raise SchemaError(f"array schema must have 1 or 2 items, got {len(raw)}", path)
    force = _parse_force(raw[1], path) if len(raw) == 2 else None
    element = parse_schema(raw[0], tuple(path) + (0,))
    return ArraySchema(element=element, force=force)


def _parse_force(raw: Any, path: Sequence[PathKey]) -> ForceFlag:
    try:
        return ForceFlag(raw)
    except ValueError:
        raise SchemaError(f"unknown array flag {raw!r}", path) from None
