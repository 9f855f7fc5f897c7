"""Pytest configuration and fixtures for record table tests."""

import pytest

from record_table.models import Column


@pytest.fixture
def people():
    """Three flat records used by the end-to-end examples."""
    return [
        {"id": 1, "name": "Bob", "age": 30},
        {"id": 2, "name": "Ann", "age": 25},
        {"id": 3, "name": "Cid", "age": 25},
    ]


@pytest.fixture
def people_columns():
    return [
        Column(key="name", searchable=True, sortable=True),
        Column(key="age", sortable=True),
    ]


@pytest.fixture
def nested_records():
    """Records with nested mappings, lists and missing branches."""
    return [
        {"id": 1, "user": {"profile": {"name": "Alice", "city": "Oslo"}}, "tags": ["admin", "ops"], "score": 7},
        {"id": 2, "user": {"profile": {"name": "bob", "city": "Berlin"}}, "tags": ["dev"], "score": 12},
        {"id": 3, "user": None, "tags": [], "score": None},
        {"id": 4, "user": {"profile": {"name": "Carla", "city": "Lisbon"}}, "tags": ["ops"], "score": 12},
        {"id": 5, "user": {"profile": {}}, "score": 3},
    ]


@pytest.fixture
def nested_columns():
    return [
        Column(key="user.profile.name", label="Name", searchable=True, sortable=True),
        Column(key="user.profile.city", label="City", searchable=True),
        Column(key="tags.0", label="First tag", searchable=True, sortable=True),
        Column(key="score", label="Score", sortable=True, align="right"),
    ]


def ids(records):
    return [record["id"] for record in records]
