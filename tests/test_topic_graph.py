"""Tests for topic_graph.py"""

import json

from calibration.topic_graph import TopicGraph
from calibration.topics import HIGH_IMPACT_TOPICS, RELATED_TOPICS, TOPIC_CATALOG

from conftest import LINEAR, SLOPES


def test_graph_structure(graph):
    stats = graph.get_stats()
    assert stats["total_topics"] == len(TOPIC_CATALOG)
    assert stats["total_edges"] == sum(len(v) for v in RELATED_TOPICS.values())
    assert not stats["symmetric"]
    assert graph.topics == TOPIC_CATALOG


def test_bundled_table_only_references_known_topics():
    for source, targets in RELATED_TOPICS.items():
        assert source in TOPIC_CATALOG
        assert set(targets) <= set(TOPIC_CATALOG)
    assert set(HIGH_IMPACT_TOPICS) <= set(TOPIC_CATALOG)


def test_related_and_reverse_lookups(graph):
    assert graph.related_topics(LINEAR) == [
        "Algebra: Systems of Linear Equations",
        "Algebra: Inequalities",
        SLOPES,
    ]
    assert LINEAR in graph.topics_relating_to(SLOPES)
    assert LINEAR in graph
    assert "Nope" not in graph
    assert graph.related_topics("Nope") == []
    assert graph.topics_relating_to("Nope") == []


def test_unknown_targets_and_self_loops_dropped():
    graph = TopicGraph(catalog=["A", "B"], relationships={"A": ["A", "B", "C"], "C": ["A"]})
    assert graph.related_topics("A") == ["B"]
    assert graph.topics_relating_to("A") == []


def test_symmetric_mode_adds_reverse_edges():
    graph = TopicGraph(catalog=["A", "B"], relationships={"A": ["B"]}, symmetric=True)
    assert graph.related_topics("B") == ["A"]
    assert graph.get_stats()["isolated_topics"] == []


def test_from_json(tmp_path):
    path = tmp_path / "topics.json"
    path.write_text(json.dumps({"topics": ["A", "B", "C"], "related": {"A": ["B"]}}))

    graph = TopicGraph.from_json(path)
    assert graph.topics == ["A", "B", "C"]
    assert graph.related_topics("A") == ["B"]
    assert graph.get_stats()["isolated_topics"] == ["C"]
