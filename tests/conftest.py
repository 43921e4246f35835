"""Shared journey fixtures."""

import json

import pytest

from journeyflow import Journey, build_flow_graph


def _journey(*path, count=1, percentage=0.0):
    return Journey(path=tuple(path), count=count, percentage=percentage)


@pytest.fixture
def journey():
    """Shorthand Journey constructor: journey("/a", "/b", count=3)."""
    return _journey


@pytest.fixture
def single_journey():
    return [_journey("/a", "/b", count=10, percentage=100.0)]


@pytest.fixture
def fork_journeys():
    """/a splits into /b (5) and /c (3)."""
    return [
        _journey("/a", "/b", count=5, percentage=62.5),
        _journey("/a", "/c", count=3, percentage=37.5),
    ]


@pytest.fixture
def site_journeys():
    """Three-step journeys with a shared landing page and recurring /docs routes."""
    return [
        _journey("/", "/pricing", "/signup", count=120, percentage=40.0),
        _journey("/", "/docs", "/docs/install", count=90, percentage=30.0),
        _journey("/", "/pricing", "/docs", count=50, percentage=16.7),
        _journey("/blog/post", "/docs", "/docs/install", count=25, percentage=8.3),
        _journey("/about", count=15, percentage=5.0),
    ]


@pytest.fixture
def site_graph(site_journeys):
    return build_flow_graph(site_journeys)


@pytest.fixture
def journeys_file(tmp_path, site_journeys):
    path = tmp_path / "journeys.json"
    path.write_text(json.dumps([j.to_dict() for j in site_journeys]))
    return path
