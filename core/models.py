"""Cluster models: a label, the words that define it, and the entries assigned to it."""

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from extractors.names import name_of

T = TypeVar("T")

_JSON_TYPES = (str, int, float, bool, dict, type(None))


def _entry_to_json(entry: Any, get_name: Callable[[Any], str]) -> Any:
    if isinstance(entry, _JSON_TYPES):
        return entry
    return get_name(entry)


@dataclass
class Cluster(Generic[T]):
    label: str
    word_set: frozenset[str] = frozenset()
    entries: list[T] = field(default_factory=list)  # most recently assigned first

    def __post_init__(self):
        self.word_set = frozenset(self.word_set)

    def copy(self) -> "Cluster[T]":
        return Cluster(label=self.label, word_set=self.word_set, entries=list(self.entries))

    def to_dict(self, get_name: Callable[[Any], str] = name_of) -> dict:
        return {
            "label": self.label,
            "word_set": sorted(self.word_set),
            "size": len(self.entries),
            "entries": [_entry_to_json(e, get_name) for e in self.entries],
        }


@dataclass
class ClusterResult(Generic[T]):
    clusters: list[Cluster[T]] = field(default_factory=list)
    rejected: dict[str, list[T]] = field(default_factory=dict)  # item name -> items, most recent first

    def to_dict(self, get_name: Callable[[Any], str] = name_of) -> dict:
        return {
            "clusters": [c.to_dict(get_name) for c in self.clusters],
            "rejected": {
                name: [_entry_to_json(e, get_name) for e in entries]
                for name, entries in self.rejected.items()
            },
        }


@dataclass
class SeedSpec:
    """Raw seed for a predefined cluster: its label and the phrase its words come from."""
    label: str
    name: str
