"""
YAML configuration loading for vocabulary.

A configuration file is parsed into plain dicts and lists and then
normalized: every mapping becomes a ConfigNode whose fields can be read
as attributes or looked up explicitly with lookup(), every sequence
becomes a new list, and scalars pass through untouched.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Iterator, List, Mapping, Optional, Set, Union

import yaml

from .errors import ConfigCycleError, ConfigDepthError, InvalidArgumentError

LOG = logging.getLogger(__name__)

MAX_DEPTH = 256


class ConfigNode:
    """
    A read-only, ordered mapping of field names to configuration values.

    Every field is available as an attribute (``node.archive_dir``) and
    by subscript (``node["archive_dir"]``). The node has no public
    methods, so no field name is shadowed; use lookup() for a lookup
    that returns a default when the field is absent.
    """

    __slots__ = ("__fields",)

    def __init__(self, fields: Optional[Mapping[str, "ConfigValue"]] = None) -> None:
        object.__setattr__(self, "_ConfigNode__fields", dict(fields or {}))

    def __getattr__(self, name: str) -> "ConfigValue":
        try:
            fields = object.__getattribute__(self, "_ConfigNode__fields")
        except AttributeError:
            raise AttributeError(name) from None
        try:
            return fields[name]
        except KeyError:
            raise AttributeError(f"configuration has no field {name!r}") from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ConfigNode is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("ConfigNode is read-only")

    def __reduce__(self) -> Any:
        return (ConfigNode, (self.__fields,))

    def __getitem__(self, key: str) -> "ConfigValue":
        return self.__fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.__fields)

    def __len__(self) -> int:
        return len(self.__fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigNode):
            return NotImplemented
        return self.__fields == other.__fields

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        inner = ", ".join(f"{key}={value!r}" for key, value in self.__fields.items())
        return f"ConfigNode({inner})"

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | {k for k in self.__fields if k.isidentifier()})


Scalar = Union[str, int, float, bool, None]
ConfigValue = Union[Scalar, List[Any], ConfigNode]


def lookup(node: ConfigNode, key: str, default: ConfigValue = None) -> ConfigValue:
    """
    Return the field key of node, or default when node has no such field.
    """

    return node[key] if key in node else default


def to_plain(value: ConfigValue) -> Any:
    """
    Convert a normalized value back into plain nested dicts and lists.
    """

    if isinstance(value, ConfigNode):
        return {key: to_plain(value[key]) for key in value}
    if isinstance(value, list):
        return [to_plain(item) for item in value]
    return value


def normalize(value: Any) -> ConfigValue:
    """
    Return a deep copy of value with every mapping turned into a ConfigNode.

    Sequences keep their length and order, mapping fields keep their
    order, and scalars are returned as-is. The input is never modified.

    Raises ConfigCycleError if a container contains itself,
    ConfigDepthError if nesting exceeds MAX_DEPTH, and
    InvalidArgumentError if two keys of one mapping have the same
    string form (such as 1 and "1").
    """

    return _normalize(value, depth=0, active=set())


def _normalize(value: Any, depth: int, active: Set[int]) -> ConfigValue:
    if isinstance(value, ConfigNode):
        value = {key: value[key] for key in value}
    elif not isinstance(value, (Mapping, list, tuple)):
        return value

    if depth >= MAX_DEPTH:
        raise ConfigDepthError(
            f"structure too deep: nesting exceeds {MAX_DEPTH} levels"
        )

    # Only the current path is tracked; shared acyclic references are fine.
    marker = id(value)
    if marker in active:
        raise ConfigCycleError(
            f"structure refers back to itself at depth {depth}"
        )
    active.add(marker)
    try:
        if isinstance(value, Mapping):
            return ConfigNode(_normalize_fields(value, depth, active))
        return [_normalize(item, depth + 1, active) for item in value]
    finally:
        active.discard(marker)


def _normalize_fields(value: Mapping[Any, Any], depth: int, active: Set[int]) -> Dict[str, ConfigValue]:
    fields: Dict[str, ConfigValue] = {}
    for key, item in value.items():
        name = str(key)
        if name in fields:
            raise InvalidArgumentError(
                f"mapping has more than one key named {name!r} at depth {depth}"
            )
        fields[name] = _normalize(item, depth + 1, active)
    return fields


def read_config(filename: Union[str, "os.PathLike[str]"], encoding: str = "UTF-8") -> ConfigNode:
    """
    Read a YAML configuration file and return it as a ConfigNode.

    The top level of the document must be a mapping.
    """

    if not isinstance(filename, (str, os.PathLike)):
        raise InvalidArgumentError(
            "filename argument should be a string or path, "
            f"but it is ({type(filename).__name__})"
        )

    LOG.debug("Loading this config file: %s", filename)
    with open(filename, "r", encoding=encoding) as handle:
        raw = yaml.safe_load(handle)

    result = normalize(raw)

    if not isinstance(result, ConfigNode):
        raise InvalidArgumentError(
            "configuration file should contain a mapping at the top level, "
            f"but it contains ({type(result).__name__})"
        )

    return result
