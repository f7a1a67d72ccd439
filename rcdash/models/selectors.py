"""Structured label selector value objects.

A LabelSelector is an ordered tuple of Requirements, ANDed together. The empty
selector has no requirements and matches every object.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum

from rcdash.errors import SelectorError

_NAME_MAX_LEN = 63
_PREFIX_MAX_LEN = 253

_RE_NAME = re.compile(r"([A-Za-z0-9][-A-Za-z0-9_.]*)?[A-Za-z0-9]")
_RE_DNS_SUBDOMAIN = re.compile(r"[a-z0-9]([-a-z0-9]*[a-z0-9])?(\.[a-z0-9]([-a-z0-9]*[a-z0-9])?)*")


class Operator(StrEnum):
    """Selector requirement operators."""

    EQUALS = "="
    NOT_EQUALS = "!="
    IN = "in"
    NOT_IN = "notin"
    EXISTS = "exists"
    DOES_NOT_EXIST = "!"


_SINGLE_VALUE_OPS = frozenset({Operator.EQUALS, Operator.NOT_EQUALS})
_SET_OPS = frozenset({Operator.IN, Operator.NOT_IN})


def validate_label_key(key: str) -> None:
    """Raise SelectorError unless *key* is a valid ``[prefix/]name`` label key."""
    prefix, sep, name = key.rpartition("/")
    if sep:
        if not prefix or len(prefix) > _PREFIX_MAX_LEN or not _RE_DNS_SUBDOMAIN.fullmatch(prefix):
            raise SelectorError(f"invalid label key {key!r}: prefix must be a DNS subdomain", key=key)
    if not name or len(name) > _NAME_MAX_LEN or not _RE_NAME.fullmatch(name):
        raise SelectorError(
            f"invalid label key {key!r}: name must be 1-{_NAME_MAX_LEN} alphanumeric characters, "
            "'-', '_' or '.', starting and ending with an alphanumeric character",
            key=key,
        )


def validate_label_value(key: str, value: str) -> None:
    """Raise SelectorError unless *value* is a valid label value (may be empty)."""
    if value == "":
        return
    if len(value) > _NAME_MAX_LEN or not _RE_NAME.fullmatch(value):
        raise SelectorError(
            f"invalid label value {value!r} for key {key!r}: must be empty or at most "
            f"{_NAME_MAX_LEN} alphanumeric characters, '-', '_' or '.'",
            key=key,
            value=value,
        )


@dataclass(frozen=True)
class Requirement:
    """A single ``key <op> values`` constraint.

    Build instances with :meth:`new`, which validates the key, the values and
    the value count for the operator.
    """

    key: str
    operator: Operator
    values: frozenset[str] = frozenset()

    @classmethod
    def new(cls, key: str, operator: Operator, values: Iterable[str] = ()) -> Requirement:
        value_set = frozenset(values)
        validate_label_key(key)
        if operator in _SINGLE_VALUE_OPS and len(value_set) != 1:
            raise SelectorError(f"operator {operator!s} on {key!r} needs exactly one value", key=key)
        if operator in _SET_OPS and not value_set:
            raise SelectorError(f"operator {operator!s} on {key!r} needs at least one value", key=key)
        if operator not in _SINGLE_VALUE_OPS | _SET_OPS and value_set:
            raise SelectorError(f"operator {operator!s} on {key!r} takes no values", key=key)
        for value in sorted(value_set):
            validate_label_value(key, value)
        return cls(key=key, operator=operator, values=value_set)

    def matches(self, labels: Mapping[str, str]) -> bool:
        """Return True if *labels* satisfy this requirement."""
        present = self.key in labels
        match self.operator:
            case Operator.EQUALS | Operator.IN:
                return present and labels[self.key] in self.values
            case Operator.NOT_EQUALS | Operator.NOT_IN:
                return not present or labels[self.key] not in self.values
            case Operator.EXISTS:
                return present
            case Operator.DOES_NOT_EXIST:
                return not present
        return False

    def __str__(self) -> str:
        match self.operator:
            case Operator.EQUALS | Operator.NOT_EQUALS:
                (value,) = self.values
                return f"{self.key}{self.operator}{value}"
            case Operator.IN | Operator.NOT_IN:
                return f"{self.key} {self.operator} ({','.join(sorted(self.values))})"
            case Operator.EXISTS:
                return self.key
            case _:
                return f"!{self.key}"


@dataclass(frozen=True)
class LabelSelector:
    """Conjunction of requirements. ``LabelSelector()`` selects everything."""

    requirements: tuple[Requirement, ...] = ()

    def empty(self) -> bool:
        return not self.requirements

    def matches(self, labels: Mapping[str, str]) -> bool:
        return all(req.matches(labels) for req in self.requirements)

    def __str__(self) -> str:
        # Rendered as the Kubernetes API ``labelSelector`` query parameter.
        return ",".join(str(req) for req in self.requirements)
