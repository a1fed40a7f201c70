"""Tests for core models: Cluster, ClusterResult, SeedSpec."""

from dataclasses import dataclass
from typing import get_type_hints

from core.models import Cluster, ClusterResult, SeedSpec, T


@dataclass
class Ticket:
    ticket_id: int
    name: str


class TestCluster:
    def test_defaults(self):
        c = Cluster(label="empty")
        assert c.word_set == frozenset()
        assert c.entries == []

    def test_word_set_coerced_to_frozenset(self):
        c = Cluster(label="l", word_set={"a", "b"})
        assert isinstance(c.word_set, frozenset)
        assert c.word_set == {"a", "b"}

    def test_copy_is_independent(self):
        c = Cluster(label="l", word_set={"a"}, entries=["x"])
        d = c.copy()
        d.entries.insert(0, "y")
        assert c.entries == ["x"]
        assert d.word_set == c.word_set

    def test_to_dict_sorts_words(self):
        c = Cluster(label="l", word_set={"b", "a"}, entries=["a b"])
        assert c.to_dict() == {"label": "l", "word_set": ["a", "b"], "size": 1, "entries": ["a b"]}

    def test_to_dict_names_objects(self):
        c = Cluster(label="l", entries=[Ticket(1, "dental plaque")])
        assert c.to_dict()["entries"] == ["dental plaque"]
        assert c.to_dict(lambda t: str(t.ticket_id))["entries"] == ["1"]


    def test_generic_over_entry_type(self):
        hints = get_type_hints(Cluster)
        assert hints["word_set"] == frozenset[str]
        assert hints["entries"] == list[T]
        c = Cluster[Ticket](label="l", entries=[Ticket(1, "a")])
        assert c.entries[0].ticket_id == 1


class TestClusterResult:
    def test_empty(self):
        assert ClusterResult().to_dict() == {"clusters": [], "rejected": {}}

    def test_to_dict(self):
        res = ClusterResult(
            clusters=[Cluster(label="l", word_set={"a"}, entries=[{"name": "a", "id": 1}])],
            rejected={"zz": [Ticket(2, "zz")]},
        )
        d = res.to_dict()
        assert d["clusters"][0]["entries"] == [{"name": "a", "id": 1}]
        assert d["rejected"] == {"zz": ["zz"]}


    def test_rejected_typed_by_entry(self):
        assert get_type_hints(ClusterResult)["rejected"] == dict[str, list[T]]


class TestSeedSpec:
    def test_fields(self):
        s = SeedSpec(label="dental", name="dental plaque")
        assert s.label == "dental"
        assert s.name == "dental plaque"
