"""HashTable and Graph engines."""

import pytest

from structures import Graph, HashTable, Reason, char_code_total


# ---------------------------------------------------------------------------
# HashTable
# ---------------------------------------------------------------------------
def test_apple_lands_in_char_code_bucket(table):
    expected = sum(ord(ch) for ch in "apple") % 10
    assert table.insert("apple", "red fruit") == expected
    assert table.get("apple") == "red fruit"
    assert expected in [i for i, chain in table.entries() if chain]


def test_hash_is_stable(table):
    assert table.hash("banana") == table.hash("banana")
    assert HashTable(bucket_count=10).hash("banana") == table.hash("banana")


def test_hash_counts_utf16_code_units():
    # U+1F600 is the surrogate pair D83D DE00
    assert char_code_total("\U0001F600") == 0xD83D + 0xDE00 == 112189
    assert HashTable(10).hash("\U0001F600") == 9
    assert char_code_total("apple") == sum(ord(ch) for ch in "apple")


def test_reinsert_updates_in_place(table):
    table.insert("k", "v1")
    table.insert("k", "v2")
    assert table.get("k") == "v2"
    assert len(table) == 1
    keys = [e.key for _, chain in table.entries() for e in chain]
    assert keys.count("k") == 1


def test_collisions_chain_in_one_bucket(table):
    # same characters, same sum, same bucket
    first = table.insert("ab", 1)
    second = table.insert("ba", 2)
    assert first == second
    assert [e.key for e in table.bucket(first)] == ["ab", "ba"]
    assert table.get("ba") == 2


def test_delete_reports_not_found(table):
    table.insert("apple", "red fruit")
    missing = table.delete("pear")
    assert not missing.success and missing.reason is Reason.NOT_FOUND
    removed = table.delete("apple")
    assert removed.success and removed.value == "red fruit"
    assert not table.has("apple")
    assert table.get("apple") is None


def test_entries_include_empty_buckets(table):
    assert len(table.entries()) == 10
    assert all(chain == [] for _, chain in table.entries())
    assert table.load_factor() == 0


def test_bucket_count_must_be_positive():
    with pytest.raises(ValueError):
        HashTable(bucket_count=0)


def test_payload_is_generic():
    table = HashTable(bucket_count=3)
    table.insert("point", {"x": 1})
    assert table.get("point") == {"x": 1}


# ---------------------------------------------------------------------------
# Graph
# ---------------------------------------------------------------------------
def test_add_edge_is_symmetric_and_idempotent():
    g = Graph()
    assert g.add_edge("a", "b").success
    repeat = g.add_edge("b", "a")
    assert repeat.reason is Reason.DUPLICATE
    assert g.get_edges() == [("a", "b")]
    assert g.neighbours("a") == ["b"] and g.neighbours("b") == ["a"]


def test_add_edge_creates_missing_vertices():
    g = Graph()
    g.add_edge("x", "y")
    assert g.get_vertices() == ["x", "y"]


def test_self_loops_are_rejected():
    g = Graph()
    assert g.add_edge("a", "a").reason is Reason.SELF_LOOP
    assert g.get_vertices() == []


def test_add_vertex_is_idempotent():
    g = Graph()
    assert g.add_vertex("a").success
    assert g.add_vertex("a").reason is Reason.DUPLICATE
    assert g.vertex_count() == 1


def test_remove_vertex_drops_incident_edges(graph):
    assert graph.remove_vertex("A").success
    assert not graph.has_vertex("A")
    assert graph.get_edges() == [("B", "D"), ("C", "D")]
    assert "A" not in graph.neighbours("B")
    assert graph.remove_vertex("A").reason is Reason.NOT_FOUND


def test_remove_edge(graph):
    assert graph.remove_edge("D", "B").success
    assert not graph.has_edge("B", "D")
    assert graph.remove_edge("B", "D").reason is Reason.NOT_FOUND
    assert graph.edge_count() == 3


def test_traversal_orders(graph):
    assert graph.depth_first("A") == ["A", "B", "D", "C"]
    assert graph.breadth_first("A") == ["A", "B", "C", "D"]


@pytest.mark.parametrize("start", ["A", "B", "C", "D"])
def test_traversals_visit_every_vertex_once(graph, start):
    for order in (graph.depth_first(start), graph.breadth_first(start)):
        assert sorted(order) == ["A", "B", "C", "D"]
        assert order[0] == start


def test_traversal_from_unknown_vertex_is_empty(graph):
    assert graph.depth_first("Z") == []
    assert graph.breadth_first("Z") == []


def test_traversal_only_reaches_component():
    g = Graph()
    g.add_edge("a", "b")
    g.add_edge("c", "d")
    assert g.breadth_first("a") == ["a", "b"]
    assert g.depth_first("d") == ["d", "c"]


def test_to_dict(graph):
    data = graph.to_dict()
    assert data["vertices"] == ["A", "B", "C", "D"]
    assert data["edges"] == [["A", "B"], ["A", "C"], ["B", "D"], ["C", "D"]]
    assert data["adjacency"]["D"] == ["B", "C"]
