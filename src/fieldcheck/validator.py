"""
Required-field validator.

Walks any value, descending through optionals, containers and structs, and
collects every required field whose current value is empty.

Containers are followed by their declared element type only; the stored
values are never iterated. A list of three offending structs therefore yields
the same issues as an empty list.

Struct instances are walked without a depth limit; only revisiting an
instance already on the current path stops the walk. The ``max_depth``
setting bounds the type-only walk, which never records issues.
"""

from __future__ import annotations

import collections.abc
import queue
import types
import typing
from typing import Any, List, Optional, Set

from fieldcheck.config.settings import Settings
from fieldcheck.fields import describe, is_struct_instance, is_struct_type
from fieldcheck.models.issue import ValidationIssue
from fieldcheck.utils.error_handling import ValidationError
from fieldcheck.utils.logging_config import get_logger

logger = get_logger(__name__)

_UNION_ORIGINS = (typing.Union, types.UnionType)

# Field kinds, as far as emptiness is concerned
_DYNAMIC = "dynamic"
_STRING = "string"
_OTHER = "other"

# Read once at import so a bad environment fails there, not inside validate().
_settings = Settings.from_environment()


def validate(
    value: Any,
    type_hint: Any = None,
    settings: Optional[Settings] = None,
) -> None:
    """
    Raise ValidationError listing every empty required field in ``value``.

    ``type_hint`` declares the static shape of ``value``; it only matters when
    ``value`` is a bare container or None, since those are walked by type.
    """
    issues = collect_issues(value, type_hint=type_hint, settings=settings)
    if issues:
        raise ValidationError(issues)


def collect_issues(
    value: Any,
    type_hint: Any = None,
    settings: Optional[Settings] = None,
) -> List[ValidationIssue]:
    """Same walk as validate() but returns the issues instead of raising."""
    examiner = _Examiner(settings or _settings)
    examiner.examine(value, type_hint, 0)
    logger.debug(
        "Validation finished",
        extra={
            "value_type": type(value).__name__,
            "issue_count": len(examiner.issues),
        },
    )
    return examiner.issues


def is_empty(value: Any, annotation: Any = None) -> bool:
    """
    Decide emptiness by the field's declared kind.

    - Optional, Union, Any and object fields are empty only when None.
    - str fields are empty when None or zero-length.
    - every other declared kind is never empty, so 0, False and [] pass.

    Without a usable annotation the runtime value decides: None or "".
    """
    kind = _kind(annotation)
    if kind == _DYNAMIC:
        return value is None
    if kind == _OTHER:
        return False
    if value is None:
        return True
    return isinstance(value, str) and len(value) == 0


def _kind(annotation: Any) -> Optional[str]:
    if annotation is None:
        return None
    if annotation is typing.Any or annotation is object:
        return _DYNAMIC
    origin = typing.get_origin(annotation)
    if origin is typing.Annotated:
        return _kind(typing.get_args(annotation)[0])
    if origin in _UNION_ORIGINS:
        return _DYNAMIC
    if origin is not None:
        return _OTHER
    if isinstance(annotation, type):
        return _STRING if issubclass(annotation, str) else _OTHER
    # Unresolved forward references and type variables.
    return None


class _Examiner:
    """State for a single validation call."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.issues: List[ValidationIssue] = []
        self._instances: Set[int] = set()
        self._types: Set[type] = set()

    def examine(self, value: Any, hint: Any, depth: int) -> None:
        if value is None:
            # A nil value is never dereferenced; only its declared shape is.
            if hint is not None:
                self.examine_type(hint, depth + 1)
            return

        if is_struct_instance(value):
            self._examine_struct(value, depth)
        elif _is_container(value):
            for element in _element_types(hint):
                self.examine_type(element, depth + 1)

    # Type-only walk: there are no values here, so it never records issues.
    def examine_type(self, tp: Any, depth: int) -> None:
        origin = typing.get_origin(tp)
        if origin is typing.Annotated:
            self.examine_type(typing.get_args(tp)[0], depth)
        elif origin in _UNION_ORIGINS:
            for member in typing.get_args(tp):
                if member is not type(None):
                    self.examine_type(member, depth)
        elif _is_container_origin(origin):
            for element in _container_args(origin, typing.get_args(tp)):
                self.examine_type(element, depth + 1)
        elif is_struct_type(tp):
            if self._too_deep(depth):
                return
            if tp in self._types:
                logger.debug(
                    "Recursive type truncated", extra={"type": tp.__name__}
                )
                return
            self._types.add(tp)
            try:
                for descriptor in describe(tp):
                    self.examine_type(descriptor.annotation, depth + 1)
            finally:
                self._types.discard(tp)

    def _examine_struct(self, obj: Any, depth: int) -> None:
        key = id(obj)
        if key in self._instances:
            logger.warning(
                "Cyclic reference truncated", extra={"type": type(obj).__name__}
            )
            return
        self._instances.add(key)
        try:
            for descriptor in describe(type(obj)):
                # Unassigned init=False fields read as None.
                field_value = getattr(obj, descriptor.name, None)
                if descriptor.is_required and is_empty(
                    field_value, descriptor.annotation
                ):
                    self.issues.append(
                        ValidationIssue.required_but_empty(descriptor.display_name)
                    )
                self.examine(field_value, descriptor.annotation, depth + 1)
        finally:
            self._instances.discard(key)

    def _too_deep(self, depth: int) -> bool:
        if depth <= self.settings.max_depth:
            return False
        logger.warning(
            "Maximum validation depth reached",
            extra={"max_depth": self.settings.max_depth},
        )
        return True


def _is_container(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(
        value,
        (
            collections.abc.Collection,
            collections.abc.Iterator,
            queue.Queue,
        ),
    )


def _is_container_origin(origin: Any) -> bool:
    if not isinstance(origin, type):
        return False
    if issubclass(origin, (str, bytes, bytearray)):
        return False
    return issubclass(origin, (collections.abc.Iterable, queue.Queue))


def _container_args(origin: type, args: tuple) -> List[Any]:
    if not args:
        return []
    if issubclass(origin, collections.abc.Mapping):
        return [args[-1]]
    if issubclass(origin, tuple):
        return [arg for arg in args if arg is not Ellipsis]
    return [args[0]]


def _element_types(hint: Any) -> List[Any]:
    """Element types declared by a container annotation, through Optional/Union."""
    if hint is None:
        return []
    origin = typing.get_origin(hint)
    if origin is typing.Annotated:
        return _element_types(typing.get_args(hint)[0])
    if origin in _UNION_ORIGINS:
        elements: List[Any] = []
        for member in typing.get_args(hint):
            elements.extend(_element_types(member))
        return elements
    if _is_container_origin(origin):
        return _container_args(origin, typing.get_args(hint))
    return []
