"""Tests for the render-ready diagram export."""

import json

import pytest

from journeyflow import LayoutConfig, build_diagram
from journeyflow.styles import DEFAULT_COLOR, PALETTE


@pytest.fixture
def diagram(site_journeys):
    return build_diagram(site_journeys, config=LayoutConfig(steps=3, width=900), domain="example.com")


class TestBuildDiagram:
    def test_pipeline_runs_end_to_end(self, diagram):
        data = diagram.to_dict()
        assert data["width"] == 900
        assert data["layer_width"] == 300
        assert data["height"] >= 200
        assert len(data["nodes"]) == 8
        assert len(data["links"]) == 6

    def test_json_serializable(self, diagram):
        json.dumps(diagram.to_dict())

    def test_cutoff_passed_through(self, site_journeys):
        d = build_diagram(site_journeys, max_journeys=1, config=LayoutConfig(steps=3))
        assert [n["id"] for n in d.to_dict()["nodes"]] == ["0_/", "1_/pricing", "2_/signup"]

    def test_empty_input(self):
        data = build_diagram([]).to_dict()
        assert data["nodes"] == []
        assert data["links"] == []
        assert data["height"] == 200


class TestNodeExport:
    def test_node_fields(self, diagram):
        node = next(n for n in diagram.to_dict()["nodes"] if n["id"] == "1_/pricing")
        assert node["label"] == "/pricing"
        assert node["layer"] == 1
        assert node["x"] == 300
        assert node["width"] == 30
        assert node["top"] == node["y"] - node["height"] / 2
        assert node["count"] == 170
        assert node["percentage"] == 40.0
        assert node["color"] == DEFAULT_COLOR
        assert node["href"] == "https://example.com/pricing"

    def test_no_href_without_domain(self, site_journeys):
        d = build_diagram(site_journeys, config=LayoutConfig(steps=3))
        assert all("href" not in n for n in d.to_dict()["nodes"])

    def test_recurring_segment_color(self, diagram):
        colors = {n["id"]: n["color"] for n in diagram.to_dict()["nodes"]}
        assert colors["1_/docs"] == colors["2_/docs"] == colors["2_/docs/install"] == PALETTE[0]


class TestLinkExport:
    def test_link_fields(self, diagram):
        link = next(l for l in diagram.to_dict()["links"] if l["id"] == "1_/docs|2_/docs/install")
        assert link["source"] == "1_/docs"
        assert link["target"] == "2_/docs/install"
        assert link["value"] == 115
        assert link["color"] == PALETTE[0]
        assert link["path"].startswith("M 330,")

    def test_share_sums_to_hundred(self, diagram):
        shares = [l["share"] for l in diagram.to_dict()["links"]]
        assert sum(shares) == pytest.approx(100)

    def test_hit_width_floor(self, diagram):
        for link in diagram.to_dict()["links"]:
            assert link["hit_width"] == max(link["thickness"], 16)

    def test_largest_link_has_max_thickness(self, diagram):
        links = diagram.to_dict()["links"]
        assert max(l["thickness"] for l in links) == 100


class TestDiagramHighlight:
    def test_delegates_to_traversal(self, diagram):
        result = diagram.highlight("1_/pricing|2_/signup")
        assert result.to_dict()["links"] == ["0_/|1_/pricing", "1_/pricing|2_/signup"]

    def test_unknown_seed(self, diagram):
        assert not diagram.highlight("5_/nowhere")
