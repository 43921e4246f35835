"""Tests for segment-based coloring."""

import pytest

from journeyflow import Link, NodeKey, SegmentColorer, build_flow_graph, segment_key
from journeyflow.styles import DEFAULT_COLOR, FALLBACK_LINK_COLOR, PALETTE


class TestSegmentKey:
    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("/docs/intro", "/docs"),
            ("/docs", "/docs"),
            ("//docs//intro", "/docs"),
            ("docs/intro", "/docs"),
            ("/", "/"),
            ("", ""),
        ],
    )
    def test_first_segment(self, label, expected):
        assert segment_key(label) == expected


class TestSegmentColorer:
    def test_recurring_segments_get_palette_in_first_seen_order(self):
        colorer = SegmentColorer(["/blog/a", "/docs/x", "/docs/y", "/about", "/blog/b"])
        assert colorer.segment_colors == {"/blog": PALETTE[0], "/docs": PALETTE[1]}

    def test_single_segments_are_neutral(self):
        colorer = SegmentColorer(["/about", "/docs/a", "/docs/b"])
        assert colorer.color_for_label("/about") == DEFAULT_COLOR
        assert colorer.color_for_label("/docs/a") == PALETTE[0]

    def test_unknown_label_is_neutral(self):
        assert SegmentColorer(["/a", "/a"]).color_for_label("/zzz") == DEFAULT_COLOR

    def test_palette_wraps_round_robin(self):
        labels = [f"/s{i}" for i in range(len(PALETTE) + 2) for _ in range(2)]
        colorer = SegmentColorer(labels)
        assert colorer.color_for_label("/s0") == PALETTE[0]
        assert colorer.color_for_label(f"/s{len(PALETTE)}") == PALETTE[0]
        assert colorer.color_for_label(f"/s{len(PALETTE) + 1}") == PALETTE[1]

    def test_same_label_in_two_layers_counts_twice(self, journey):
        g = build_flow_graph([journey("/home", "/home", count=1)])
        colorer = SegmentColorer.for_graph(g)
        assert colorer.color_for(g.get_node("0_/home")) == PALETTE[0]

    def test_site_graph_colors(self, site_graph):
        colorer = SegmentColorer.for_graph(site_graph)
        assert colorer.segment_colors == {"/docs": PALETTE[0]}
        assert colorer.color_for(site_graph.get_node("2_/docs/install")) == PALETTE[0]
        assert colorer.color_for(site_graph.get_node("1_/pricing")) == DEFAULT_COLOR

    def test_missing_node_gets_default(self):
        assert SegmentColorer([]).color_for(None) == DEFAULT_COLOR

    def test_custom_palette(self):
        colorer = SegmentColorer(["/a/1", "/a/2"], palette=("red",), default="grey")
        assert colorer.color_for_label("/a") == "red"
        assert colorer.color_for_label("/b") == "grey"


class TestLinkColor:
    def test_link_inherits_source_color(self, site_graph):
        colorer = SegmentColorer.for_graph(site_graph)
        assert colorer.link_color(site_graph.get_link("1_/docs|2_/docs/install")) == PALETTE[0]
        assert colorer.link_color(site_graph.get_link("0_/|1_/docs")) == DEFAULT_COLOR

    def test_unresolvable_source_falls_back(self, site_graph):
        colorer = SegmentColorer.for_graph(site_graph)
        stray = Link(NodeKey(0, "/gone"), NodeKey(1, "/docs"), 1)
        assert colorer.link_color(stray) == FALLBACK_LINK_COLOR

    def test_colorer_without_graph_falls_back(self, site_graph):
        colorer = SegmentColorer(["/docs/a", "/docs/b"])
        assert colorer.link_color(site_graph.links[0]) == FALLBACK_LINK_COLOR
