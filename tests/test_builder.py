"""Tests for build_flow_graph."""

from collections import Counter

from journeyflow import Journey, NodeKey, build_flow_graph


def _expected_link_values(journeys):
    expected = Counter()
    for j in journeys:
        for i in range(len(j.path) - 1):
            expected[(NodeKey(i, j.path[i]), NodeKey(i + 1, j.path[i + 1]))] += j.count
    return expected


class TestScenarios:
    def test_single_journey(self, single_journey):
        g = build_flow_graph(single_journey)
        assert len(g) == 2
        assert [(str(l.key), l.value) for l in g.links] == [("0_/a|1_/b", 10)]
        assert g.get_node("0_/a").total_flow == 10
        assert g.get_node("1_/b").total_flow == 10

    def test_fork_wiring(self, fork_journeys):
        g = build_flow_graph(fork_journeys)
        a = g.get_node("0_/a")
        assert [l.value for l in a.outgoing] == [5, 3]
        assert a.incoming == []
        assert g.get_node("1_/b").incoming[0] is a.outgoing[0]

    def test_transitions_accumulate(self, journey):
        g = build_flow_graph([journey("/a", "/b", count=2), journey("/a", "/b", "/c", count=5)])
        assert g.get_link("0_/a|1_/b").value == 7
        assert g.get_link("1_/b|2_/c").value == 5
        assert len(g.links) == 2

    def test_same_label_in_different_layers(self, journey):
        g = build_flow_graph([journey("/a", "/a", "/a", count=1)])
        assert len(g) == 3
        assert [str(n.key) for n in g.nodes] == ["0_/a", "1_/a", "2_/a"]


class TestLinkValues:
    def test_link_value_is_sum_of_matching_journeys(self, site_journeys):
        g = build_flow_graph(site_journeys)
        actual = {(l.source, l.target): l.value for l in g.links}
        assert actual == dict(_expected_link_values(site_journeys))

    def test_at_most_one_link_per_pair(self, site_graph):
        keys = [l.key for l in site_graph.links]
        assert len(keys) == len(set(keys))

    def test_every_link_advances_one_layer(self, site_graph):
        assert all(l.target.layer == l.source.layer + 1 for l in site_graph.links)


class TestFlowTotals:
    def test_total_flow_rule(self, site_graph):
        for node in site_graph.nodes:
            in_sum = sum(l.value for l in node.incoming)
            out_sum = sum(l.value for l in node.outgoing)
            expected = out_sum if node.layer == 0 else in_sum
            assert node.total_flow == expected

    def test_isolated_first_step_has_zero_flow(self, site_graph):
        assert site_graph.get_node("0_/about").total_flow == 0

    def test_incoming_outgoing_lists_cover_every_link(self, site_graph):
        outgoing = [l for n in site_graph.nodes for l in n.outgoing]
        incoming = [l for n in site_graph.nodes for l in n.incoming]
        assert sorted(map(str, (l.key for l in outgoing))) == sorted(map(str, (l.key for l in site_graph.links)))
        assert sorted(map(str, (l.key for l in incoming))) == sorted(map(str, (l.key for l in site_graph.links)))


class TestPercentage:
    def test_first_matching_journey_wins(self, site_graph):
        # /pricing at step 1 appears in journeys with 40.0 and 16.7
        assert site_graph.get_node("1_/pricing").percentage == 40.0
        assert site_graph.get_node("1_/docs").percentage == 30.0
        assert site_graph.get_node("0_/blog/post").percentage == 8.3

    def test_search_covers_journeys_past_cutoff(self, journey):
        journeys = [journey("/a", count=5, percentage=10.0), journey("/a", "/b", count=1, percentage=99.0)]
        g = build_flow_graph(journeys, max_journeys=1)
        assert g.get_node("0_/a").percentage == 10.0


class TestCutoff:
    def test_only_leading_journeys_used(self, site_journeys):
        g = build_flow_graph(site_journeys, max_journeys=2)
        assert {n.label for n in g.nodes} == {"/", "/pricing", "/signup", "/docs", "/docs/install"}
        assert g.get_node("0_/blog/post") is None
        assert g.journeys == tuple(site_journeys)
        assert g.max_journeys == 2

    def test_cutoff_larger_than_input(self, site_journeys):
        assert len(build_flow_graph(site_journeys, max_journeys=100)) == len(build_flow_graph(site_journeys))

    def test_zero_cutoff_gives_empty_graph(self, site_journeys):
        g = build_flow_graph(site_journeys, max_journeys=0)
        assert len(g) == 0
        assert g.links == []

    def test_negative_cutoff_gives_empty_graph(self, site_journeys):
        assert len(build_flow_graph(site_journeys, max_journeys=-3)) == 0


class TestEdgeCases:
    def test_empty_input(self):
        g = build_flow_graph([])
        assert len(g) == 0
        assert g.links == []

    def test_empty_path_contributes_nothing(self, journey):
        g = build_flow_graph([Journey((), 10), journey("/a", count=1)])
        assert [str(n.key) for n in g.nodes] == ["0_/a"]

    def test_idempotent(self, site_journeys):
        g1 = build_flow_graph(site_journeys)
        g2 = build_flow_graph(site_journeys)
        assert {(n.key, n.total_flow, n.percentage) for n in g1.nodes} == {
            (n.key, n.total_flow, n.percentage) for n in g2.nodes
        }
        assert {(l.key, l.value) for l in g1.links} == {(l.key, l.value) for l in g2.links}

    def test_accepts_generator(self, site_journeys):
        g = build_flow_graph(j for j in site_journeys)
        assert len(g.journeys) == len(site_journeys)
