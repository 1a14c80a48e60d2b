"""
Topic Graph - Directed relationship table between topics.

Uses networkx for the graph:
- Nodes are the known topic catalog (in catalog order)
- Edge A -> B means mastering A lets B inherit an inferred tier
- Only the declared direction propagates unless symmetric=True
"""

import json
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import networkx as nx

from .topics import RELATED_TOPICS, TOPIC_CATALOG


class TopicGraph:
    """
    Catalog of known topics plus their "related topic" edges.

    Related ids that are not in the catalog are dropped when the graph
    is built, so inference never creates profiles for unknown topics.
    """

    def __init__(self, catalog: Optional[Iterable[str]] = None,
                 relationships: Optional[Dict[str, List[str]]] = None,
                 symmetric: bool = False):
        """Build the graph from a catalog and a relationship mapping."""
        self.graph = nx.DiGraph()
        self.symmetric = symmetric
        self.catalog: List[str] = list(TOPIC_CATALOG if catalog is None else catalog)
        relationships = RELATED_TOPICS if relationships is None else relationships

        self._build_graph(relationships)

    def _build_graph(self, relationships: Dict[str, List[str]]):
        """Create nodes for the catalog and edges for declared relationships."""
        for topic_id in self.catalog:
            self.graph.add_node(topic_id)

        for source, targets in relationships.items():
            if source not in self.graph:
                continue
            for target in targets:
                if target not in self.graph or target == source:
                    continue
                self.graph.add_edge(source, target)
                if self.symmetric:
                    self.graph.add_edge(target, source)

    @classmethod
    def from_json(cls, path, symmetric: bool = False) -> "TopicGraph":
        """
        Load a graph from a JSON file.

        Expected shape:
            {"topics": [...], "related": {"topic": ["related", ...]}}
        """
        with open(Path(path), 'r') as f:
            data = json.load(f)

        return cls(catalog=data.get("topics", []),
                   relationships=data.get("related", {}),
                   symmetric=symmetric)

    # ==================== Query Methods ====================

    def __contains__(self, topic_id: str) -> bool:
        return topic_id in self.graph

    @property
    def topics(self) -> List[str]:
        """All known topic ids, in catalog order."""
        return list(self.catalog)

    def related_topics(self, topic_id: str) -> List[str]:
        """
        Topics that inherit an estimate when `topic_id` is mastered.

        Unknown topics have no relations.
        """
        if topic_id not in self.graph:
            return []
        return list(self.graph.successors(topic_id))

    def topics_relating_to(self, topic_id: str) -> List[str]:
        """Reverse lookup: topics whose mastery would propagate to `topic_id`."""
        if topic_id not in self.graph:
            return []
        return list(self.graph.predecessors(topic_id))

    def get_stats(self) -> dict:
        """Graph statistics."""
        return {
            "total_topics": self.graph.number_of_nodes(),
            "total_edges": self.graph.number_of_edges(),
            "isolated_topics": sorted(nx.isolates(self.graph)),
            "symmetric": self.symmetric,
        }
