"""Tests for options.py module."""

import numbers

import pytest

from traversals import InvalidInputError, TraversalOptions, bfs, dfs, normalize_graph, resolve_options
from traversals.options import root_sequence


class NodeNumber:
    """Integral value that is not an int, like a numpy integer."""

    def __init__(self, value):
        self.value = value

    def __int__(self):
        return self.value


numbers.Integral.register(NodeNumber)


class TestNormalizeGraph:
    """Tests for normalize_graph function."""

    def test_coerces_entries(self, dirty_cyclic_graph, cyclic_graph):
        """Bare numbers become singletons and None becomes empty."""
        assert normalize_graph(dirty_cyclic_graph) == cyclic_graph

    def test_other_entries_become_empty(self):
        """Strings, floats, mappings and booleans are not adjacency."""
        assert normalize_graph(["1", 2.0, {"a": 1}, True, (3,)]) == [[], [], [], [], [3]]

    def test_input_not_mutated(self, dirty_cyclic_graph):
        """Normalization returns a copy."""
        normalize_graph(dirty_cyclic_graph)

        assert dirty_cyclic_graph[2] == 3
        assert dirty_cyclic_graph[8] is None

    @pytest.mark.parametrize("graph", ["hello", b"bytes", 42, {0: [1]}, None])
    def test_rejects_non_sequences(self, graph):
        """The graph itself must be a list or tuple."""
        with pytest.raises(InvalidInputError):
            normalize_graph(graph)

    def test_error_is_type_error(self):
        """InvalidInputError can be caught as TypeError."""
        with pytest.raises(TypeError):
            normalize_graph("hello")

    @pytest.mark.parametrize("graph", [[[-1], []], [[5], []], [[1], 2], [["a"], []], [[0.0]], [[True]]])
    def test_rejects_targets_outside_graph(self, graph):
        """Every target must be a node number in range."""
        with pytest.raises(InvalidInputError, match="has an edge to"):
            normalize_graph(graph)

    def test_accepts_other_integral_types(self):
        """Integral values that are not int are converted to int."""
        graph = normalize_graph([[NodeNumber(1)], NodeNumber(0)])

        assert graph == [[1], [0]]
        assert all(type(target) is int for targets in graph for target in targets)


class TestResolveOptions:
    """Tests for resolve_options function."""

    def test_graph_and_mapping(self, cyclic_graph):
        """(graph, mapping) puts the graph into nodes."""
        opts = resolve_options(cyclic_graph, {"start_index": 2})

        assert opts.nodes is cyclic_graph
        assert opts.start_index == 2

    def test_options_with_nodes(self, cyclic_graph):
        """A single options argument carries its own nodes."""
        opts = resolve_options(TraversalOptions(nodes=cyclic_graph, flat=True))

        assert opts.nodes is cyclic_graph
        assert opts.flat is True

    def test_mapping_with_nodes(self, cyclic_graph):
        """A plain mapping works as the only argument too."""
        opts = resolve_options({"nodes": cyclic_graph, "edges": False})

        assert opts.nodes is cyclic_graph
        assert opts.edges is False

    def test_placeholder_gives_defaults(self):
        """No arguments at all resolve to the defaults."""
        assert resolve_options() == TraversalOptions()

    def test_overrides_applied_last(self, cyclic_graph):
        """Keyword overrides win over the options argument."""
        opts = resolve_options(cyclic_graph, {"start_index": 2}, start_index=5)

        assert opts.start_index == 5

    def test_options_not_mutated(self, cyclic_graph):
        """The caller's options object is left alone."""
        original = TraversalOptions(start_index=1)
        mapping = {"start_index": 1}

        resolve_options(cyclic_graph, original, start_index=3)
        resolve_options(cyclic_graph, mapping, start_index=3)

        assert original.start_index == 1
        assert original.nodes == []
        assert mapping == {"start_index": 1}

    def test_unknown_mapping_key(self, cyclic_graph):
        """Misspelled option names are rejected."""
        with pytest.raises(InvalidInputError, match="startIndex"):
            resolve_options(cyclic_graph, {"startIndex": 1})

    def test_unknown_override(self, cyclic_graph):
        """Misspelled keyword overrides are rejected."""
        with pytest.raises(InvalidInputError, match="bogus"):
            resolve_options(cyclic_graph, bogus=True)

    def test_options_given_twice(self, cyclic_graph):
        """Options as first argument leave no room for a second options."""
        with pytest.raises(InvalidInputError):
            resolve_options({"nodes": cyclic_graph}, {"flat": True})

    def test_bad_options_type(self, cyclic_graph):
        """Options must be a TraversalOptions or a mapping."""
        with pytest.raises(InvalidInputError):
            resolve_options(cyclic_graph, "flat")


class TestRootSequence:
    """Tests for root_sequence function."""

    def test_spanning_tree(self):
        """Spanning tree mode has the start as its only root."""
        assert root_sequence(5, 3, spanning_tree=True) == [3]

    def test_forest_wraps(self):
        """Forest mode covers every node once, starting at the start."""
        assert root_sequence(5, 3, spanning_tree=False) == [3, 4, 0, 1, 2]

    @pytest.mark.parametrize("start_index, expected", [(-1, 4), (-5, 0), (7, 2), (None, 0), (True, 0)])
    def test_start_index_normalized(self, start_index, expected):
        """Start indices wrap modulo the node count; non-integers mean 0."""
        assert root_sequence(5, start_index, spanning_tree=True) == [expected]

    def test_integral_start_index(self):
        """An integral start index that is not an int is used as given."""
        assert root_sequence(5, NodeNumber(3), spanning_tree=True) == [3]

    def test_empty(self):
        """No nodes, no roots."""
        assert root_sequence(0, 3, spanning_tree=False) == []


class TestEntryPointInput:
    """Tests for the input handling of the traversal entry points."""

    @pytest.mark.parametrize("graph", ["hello", 42, 3.5])
    def test_rejects_non_sequence_graph(self, graph):
        """A graph that is not a list or tuple raises."""
        with pytest.raises(InvalidInputError):
            dfs(graph)

    def test_rejects_bad_nodes_in_options(self):
        """A bad node list inside the options raises too."""
        with pytest.raises(InvalidInputError):
            dfs({"nodes": "blah", "start_index": -9})

    def test_options_with_nodes_and_bad_start(self, dirty_cyclic_graph, cyclic_pre_order):
        """Options-only call with a negative start that wraps to 0."""
        result = dfs({"nodes": dirty_cyclic_graph, "start_index": -len(dirty_cyclic_graph)})

        assert result.pre_order == cyclic_pre_order

    def test_tuple_graph(self, cyclic_graph, cyclic_pre_order):
        """Tuples are accepted for the graph and its entries."""
        graph = tuple(tuple(targets) for targets in cyclic_graph)

        assert dfs(graph).pre_order == cyclic_pre_order

    def test_trusted_skips_normalization(self, cyclic_graph, cyclic_pre_order):
        """Trusted input is walked as given."""
        result = dfs(cyclic_graph, trusted=True)

        assert result.pre_order == cyclic_pre_order

    @pytest.mark.parametrize("traverse", [dfs, bfs])
    @pytest.mark.parametrize("graph", [[[-1], []], [[5], []], [[1], ["a"]]])
    def test_rejects_out_of_range_targets(self, traverse, graph):
        """Both traversals reject edges that leave the graph."""
        with pytest.raises(InvalidInputError):
            traverse(graph, spanning_tree=False)

    def test_trusted_skips_target_check(self):
        """Trusted input is walked as given, without a range check."""
        result = dfs([[-1], []], trusted=True, spanning_tree=False, edges=False)

        assert result.pre_order == [0, -1]

    def test_no_arguments(self):
        """Calling with nothing walks the empty default graph."""
        result = dfs()

        assert result.pre_order == []
        assert result.roots == []
