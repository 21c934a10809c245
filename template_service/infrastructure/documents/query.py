"""Typed filter and update builders for the document store."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class Filter:
    """Conjunction of field equality conditions; empty matches every document."""

    equals: tuple[tuple[str, Any], ...] = ()

    @classmethod
    def all(cls) -> "Filter":
        return cls()

    @classmethod
    def eq(cls, name: str, value: Any) -> "Filter":
        return cls(((name, value),))

    def matches(self, document: Mapping[str, Any]) -> bool:
        return all(name in document and document[name] == value for name, value in self.equals)


@dataclass(frozen=True, slots=True)
class Update:
    """Field assignments applied to a single matched document."""

    set_fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def set(cls, **values: Any) -> "Update":
        return cls(dict(values))

    def apply(self, document: Mapping[str, Any]) -> dict[str, Any]:
        updated = dict(document)
        updated.update(self.set_fields)
        return updated


__all__ = ["Filter", "Update"]
