"""
Declarative object-to-object mapping between records and transfer models.

A `MappingProfile` holds one `TypeMap` per (source, destination) pair:

    profile = MappingProfile()
    profile.create_map(Brand, BrandModel, reverse=True)
    profile.create_map(UserRegistrationModel, User, after_map=_registration_defaults)

`Mapper.map(source, BrandModel)` then:
  1. copies every destination field whose name exists on the source
     (plus explicit `members` renames),
  2. maps nested models / lists of models through their own registered maps,
  3. builds the destination with `model_construct` (no validation, so mapping
     never fails on absent optional source fields; undeclared fields keep the
     destination defaults),
  4. runs the `after_map` hooks in declaration order.
"""

import types
import typing
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, TypeVar

from pydantic import BaseModel

from ecommerce.models.common import PaginationModel

D = TypeVar("D", bound=BaseModel)

AfterMap = Callable[[Any, Any], None]

_MISSING = object()


@dataclass(frozen=True)
class TypeMap:
    source: type
    destination: type[BaseModel]
    # destination field -> source attribute
    members: Mapping[str, str] = field(default_factory=dict)
    after_map: tuple[AfterMap, ...] = ()

    def source_name_for(self, dest_field: str) -> str:
        return self.members.get(dest_field, dest_field)


class MappingProfile:
    def __init__(self):
        self._maps: dict[tuple[type, type], TypeMap] = {}

    def create_map(
        self,
        source: type,
        destination: type[BaseModel],
        *,
        members: Mapping[str, str] | None = None,
        after_map: AfterMap | typing.Iterable[AfterMap] | None = None,
        reverse: bool = False,
    ) -> TypeMap:
        if after_map is None:
            hooks: tuple[AfterMap, ...] = ()
        elif callable(after_map):
            hooks = (after_map,)
        else:
            hooks = tuple(after_map)

        type_map = TypeMap(source, destination, dict(members or {}), hooks)
        self._maps[(source, destination)] = type_map

        if reverse:
            # hooks are one-directional; renames are inverted
            inverted = {src: dest for dest, src in type_map.members.items()}
            self._maps[(destination, source)] = TypeMap(destination, source, inverted)
        return type_map

    def find(self, source: type, destination: type) -> TypeMap | None:
        for klass in getattr(source, "__mro__", (source,)):
            type_map = self._maps.get((klass, destination))
            if type_map is not None:
                return type_map
        return None

    def __contains__(self, pair: tuple[type, type]) -> bool:
        return self.find(*pair) is not None

    def __len__(self) -> int:
        return len(self._maps)


def _read(source: Any, name: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(name, _MISSING)
    return getattr(source, name, _MISSING)


def _nested_model(annotation: Any) -> tuple[type[BaseModel] | None, bool]:
    """
    Return (model class, is_list) when a field holds a model or a list of models.
    Optional[...] wrappers are looked through.
    """
    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)
    if origin in (list, tuple):
        inner = _nested_model(args[0])[0] if args else None
        return inner, inner is not None
    if origin in (typing.Union, types.UnionType):
        for arg in args:
            if arg is not type(None):
                return _nested_model(arg)
        return None, False
    if origin is None and isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation, False
    return None, False


class Mapper:
    def __init__(self, profile: MappingProfile):
        self.profile = profile

    def map(self, source: Any, destination: type[D]) -> D:
        if type(source) is destination:
            return source.model_copy()

        source_type = type(source)
        type_map = self.profile.find(source_type, destination)
        if type_map is None:
            if isinstance(source, Mapping):
                type_map = TypeMap(dict, destination)
            else:
                raise LookupError(f"No mapping registered from {source_type.__name__} to {destination.__name__}")

        values: dict[str, Any] = {}
        for name, info in destination.model_fields.items():
            value = _read(source, type_map.source_name_for(name))
            if value is _MISSING:
                continue
            values[name] = self._map_nested(value, info.annotation)

        result = destination.model_construct(**values)
        for hook in type_map.after_map:
            hook(source, result)
        return result

    def map_many(self, sources: typing.Iterable[Any], destination: type[D]) -> list[D]:
        return [self.map(item, destination) for item in sources]

    def map_page(self, page: PaginationModel, destination: type[D]) -> PaginationModel[D]:
        """Map every item of a page, keeping order and paging metadata."""
        return PaginationModel[destination](
            items=self.map_many(page.items, destination),
            page_index=page.page_index,
            page_size=page.page_size,
            total_count=page.total_count,
        )

    def _map_nested(self, value: Any, annotation: Any) -> Any:
        target, is_list = _nested_model(annotation)
        if target is None or value is None:
            return value
        if is_list and isinstance(value, (list, tuple)):
            return [self._map_one(item, target) for item in value]
        return self._map_one(value, target)

    def _map_one(self, value: Any, target: type[BaseModel]) -> Any:
        if isinstance(value, target):
            return value
        if isinstance(value, (BaseModel, Mapping)):
            return self.map(value, target)
        return value
