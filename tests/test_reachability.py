"""Tests for the reachability engine and graph rendering."""

import pytest

from type_reach.analysis.reachability import (
    compute_reachable,
    expand_once,
    induced_edges,
    redirect_umbrella,
)
from type_reach.analysis.render import render_dot, write_dot


@pytest.fixture
def chain_graph():
    return {
        "A": {"Seed"},
        "B": {"A"},
        "C": {"Unrelated"},
    }


# ── Closure ───────────────────────────────────────────────────

class TestComputeReachable:
    def test_closure_end_to_end(self, chain_graph):
        result = compute_reachable(chain_graph, {"Seed"})
        assert result.reachable == {"Seed", "A", "B"}
        assert result.passes == [{"A"}, {"B"}]

    def test_seeds_without_definitions(self):
        result = compute_reachable({}, {"UnsafeCell"})
        assert result.reachable == {"UnsafeCell"}
        assert result.passes == []

    def test_empty_seed_set(self, chain_graph):
        assert compute_reachable(chain_graph, set()).reachable == frozenset()

    def test_self_reference_alone_is_not_reachable(self):
        result = compute_reachable({"A": {"A"}}, {"Seed"})
        assert result.reachable == {"Seed"}

    def test_self_reference_with_seed(self):
        graph = {"A": {"A", "Seed"}}
        result = compute_reachable(graph, {"Seed"})
        assert result.reachable == {"Seed", "A"}
        assert ("A", "A") in induced_edges(graph, result.reachable)

    def test_cycle_reached_through_one_member(self):
        graph = {"A": {"B"}, "B": {"A", "Seed"}, "C": {"A"}}
        result = compute_reachable(graph, {"Seed"})
        assert result.reachable == {"Seed", "A", "B", "C"}

    def test_disjoint_components(self):
        graph = {
            "A": {"Seed"}, "B": {"A"},
            "X": {"Y"}, "Y": {"Z"},
        }
        result = compute_reachable(graph, {"Seed"})
        assert result.reachable == {"Seed", "A", "B"}

    def test_wide_pass_promotes_together(self):
        graph = {"A": {"Seed"}, "B": {"Seed"}, "C": {"A", "B"}}
        result = compute_reachable(graph, {"Seed"})
        assert result.passes == [{"A", "B"}, {"C"}]

    def test_input_graph_not_mutated(self, chain_graph):
        before = {k: set(v) for k, v in chain_graph.items()}
        compute_reachable(chain_graph, {"Seed"})
        assert chain_graph == before


class TestExpandOnce:
    def test_monotonic_growth(self, chain_graph):
        reachable = {"Seed"}
        remaining = dict(chain_graph)
        while True:
            added = expand_once(remaining, reachable)
            if not added:
                break
            before = set(reachable)
            reachable |= added
            for name in added:
                del remaining[name]
            assert reachable >= before

    def test_idempotent_at_fixed_point(self, chain_graph):
        result = compute_reachable(chain_graph, {"Seed"})
        remaining = {k: v for k, v in chain_graph.items() if k not in result.reachable}
        assert expand_once(remaining, result.reachable) == set()


# ── Umbrella redirection ──────────────────────────────────────

class TestRedirectUmbrella:
    def test_suppress_and_inject(self):
        graph = {"Cell": {"Natural"}, "Id": {"Cell"}, "Counter": {"Cell"}}
        redirected = redirect_umbrella(graph, "Cell", ["UnsafeCell"], ["Id"])
        assert redirected == {"Cell": {"UnsafeCell"}, "Counter": {"Cell"}}

    def test_original_untouched(self):
        graph = {"Cell": {"Natural"}, "Id": {"Cell"}}
        redirect_umbrella(graph, "Cell", ["UnsafeCell"], ["Id"])
        assert graph == {"Cell": {"Natural"}, "Id": {"Cell"}}

    def test_umbrella_reachable_without_definition(self):
        graph = redirect_umbrella({"Counter": {"Cell"}}, "Cell", ["UnsafeCell"])
        result = compute_reachable(graph, ["UnsafeCell"])
        assert result.reachable == {"UnsafeCell", "Cell", "Counter"}

    def test_suppressed_name_is_not_a_source(self):
        graph = redirect_umbrella({"Id": {"UnsafeCell"}}, "Cell", ["UnsafeCell"], ["Id"])
        result = compute_reachable(graph, ["UnsafeCell"])
        assert "Id" not in result.reachable

    def test_no_umbrella(self):
        graph = redirect_umbrella({"Cell": {"Natural"}}, None, ["UnsafeCell"])
        assert graph == {"Cell": {"Natural"}}


# ── Rendering ─────────────────────────────────────────────────

class TestRenderDot:
    def test_empty_graph(self):
        assert render_dot({}, {"UnsafeCell"}) == "digraph G {\n}"

    def test_induced_edges_only(self, chain_graph):
        result = compute_reachable(chain_graph, {"Seed"})
        text = render_dot(chain_graph, result.reachable)
        assert text == (
            "digraph G {\n"
            '  "A" -> "Seed";\n'
            '  "B" -> "A";\n'
            "}"
        )
        assert '"C"' not in text

    def test_names_quoted_verbatim(self):
        text = render_dot({"u8": {"Seed"}}, {"u8", "Seed"})
        assert '  "u8" -> "Seed";\n' in text

    def test_write_dot(self, tmp_path):
        out = write_dot(tmp_path / "graph.dot", "digraph G {\n}")
        assert out.read_text() == "digraph G {\n}"

    def test_write_dot_missing_directory(self, tmp_path):
        with pytest.raises(OSError):
            write_dot(tmp_path / "missing" / "graph.dot", "digraph G {\n}")
