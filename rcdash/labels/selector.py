"""Translate ``{key: value}`` label maps into structured selectors."""

from __future__ import annotations

from collections.abc import Mapping

from rcdash.models.selectors import LabelSelector, Operator, Requirement


def to_label_selector(labels: Mapping[str, str]) -> LabelSelector:
    """Build a selector with one ``key=value`` requirement per map entry.

    Requirements are ordered by key so equal maps always give equal
    selectors. An empty map gives the empty selector, which matches every
    object; it is never treated as "select nothing".

    Raises:
        SelectorError: a key or value is not a valid label key/value.
    """
    return LabelSelector(
        requirements=tuple(Requirement.new(key, Operator.EQUALS, (value,)) for key, value in sorted(labels.items()))
    )
