"""
Unit tests for the metadata column catalog.
"""

import pytest

from gamanage.metadata import Metadata, apply_filter


@pytest.fixture
def metadata(column_items):
    return Metadata(column_items)


def test_all_returns_input_columns(metadata, column_items):
    assert metadata.all() is column_items


def test_metrics_and_dimensions_partition(metadata):
    assert [c["id"] for c in metadata.all_metrics()] == [
        "ga:sessions",
        "ga:visits",
        "ga:metricXX",
        "ga:goalXXCompletions",
    ]
    assert [c["id"] for c in metadata.all_dimensions()] == [
        "ga:browser",
        "ga:dimensionXX",
        "ga:customVarNameXX",
    ]


def test_unrecognized_types_only_in_all(metadata):
    all_ids = [c["id"] for c in metadata.all()]
    metric_ids = [c["id"] for c in metadata.all_metrics()]
    dimension_ids = [c["id"] for c in metadata.all_dimensions()]

    assert "ga:segment" in all_ids
    assert "ga:segment" not in metric_ids
    assert "ga:segment" not in dimension_ids


def test_sublists_keep_relative_order(metadata):
    all_columns = list(metadata.all())
    for sublist in (metadata.all_metrics(), metadata.all_dimensions()):
        positions = [all_columns.index(column) for column in sublist]
        assert positions == sorted(positions)


def test_get_returns_attributes(metadata, column_items):
    assert metadata.get("ga:sessions") is column_items[0]["attributes"]
    assert metadata.get("ga:unknown") is None


def test_get_last_duplicate_wins():
    metadata = Metadata(
        [
            {"id": "ga:users", "attributes": {"type": "METRIC", "uiName": "Users"}},
            {"id": "ga:users", "attributes": {"type": "METRIC", "uiName": "Users (new)"}},
        ]
    )
    assert metadata.get("ga:users")["uiName"] == "Users (new)"
    assert len(metadata.all_metrics()) == 2


def test_object_filter_requires_every_key(metadata):
    result = metadata.all({"type": "METRIC", "status": "PUBLIC"})
    assert [c["id"] for c in result] == ["ga:sessions", "ga:metricXX", "ga:goalXXCompletions"]


def test_object_filter_on_sublists(metadata):
    assert [c["id"] for c in metadata.all_metrics({"status": "DEPRECATED"})] == ["ga:visits"]
    assert [c["id"] for c in metadata.all_dimensions({"group": "Platform or Device"})] == [
        "ga:browser"
    ]


def test_object_filter_uses_strict_equality():
    columns = [
        {"id": "ga:a", "attributes": {"type": "METRIC", "allowedInSegments": "true"}},
        {"id": "ga:b", "attributes": {"type": "METRIC", "allowedInSegments": True}},
        {"id": "ga:c", "attributes": {"type": "METRIC", "allowedInSegments": 1}},
        {"id": "ga:d", "attributes": {"type": "METRIC"}},
    ]
    assert [c["id"] for c in apply_filter(columns, {"allowedInSegments": "true"})] == ["ga:a"]
    assert [c["id"] for c in apply_filter(columns, {"allowedInSegments": True})] == ["ga:b"]
    assert [c["id"] for c in apply_filter(columns, {"allowedInSegments": 1})] == ["ga:c"]
    assert [c["id"] for c in apply_filter(columns, {"allowedInSegments": None})] == []


def test_function_filter_matches_object_filter(metadata):
    by_object = metadata.all({"type": "METRIC", "status": "PUBLIC"})
    by_function = metadata.all(
        lambda attributes, column_id: attributes["type"] == "METRIC"
        and attributes["status"] == "PUBLIC"
    )
    assert by_function == by_object


def test_function_filter_receives_id(metadata):
    seen = []

    def _filter(attributes, column_id):
        seen.append(column_id)
        return column_id.endswith("XX")

    result = metadata.all_dimensions(_filter)

    assert seen == ["ga:browser", "ga:dimensionXX", "ga:customVarNameXX"]
    assert [c["id"] for c in result] == ["ga:dimensionXX", "ga:customVarNameXX"]


def test_filter_does_not_mutate_source_lists(metadata):
    before = list(metadata.all_metrics())
    metadata.all_metrics({"status": "DEPRECATED"})
    assert list(metadata.all_metrics()) == before


def test_object_filter_compares_containers_by_content():
    columns = [
        {"id": "ga:a", "attributes": {"type": "METRIC", "tags": ["core"]}},
        {"id": "ga:b", "attributes": {"type": "METRIC", "tags": ["extra"]}},
    ]
    assert [c["id"] for c in apply_filter(columns, {"tags": ["core"]})] == ["ga:a"]
