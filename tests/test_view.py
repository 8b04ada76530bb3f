import pytest
from pydantic import ValidationError

from pages_catalog.catalog.view import apply_view, matches, to_card, topic_vocabulary
from pages_catalog.config import Settings
from pages_catalog.models.project import ProjectRecord
from pages_catalog.models.view import ViewState
from pages_catalog.utils.dates import format_date, sort_records


def names(records):
    return [r.name for r in records]


def test_search_is_case_insensitive(sample_records):
    assert names(apply_view(sample_records, ViewState(query="a"))) == ["A"]
    assert names(apply_view(sample_records, ViewState(query="  A "))) == ["A"]


def test_tag_filter_exact(sample_records):
    assert names(apply_view(sample_records, ViewState(tag="y"))) == ["B"]
    assert names(apply_view(sample_records, ViewState(tag="Y"))) == []


def test_sort_orders(sample_records):
    assert names(apply_view(sample_records, ViewState(sort="asc"))) == ["A", "B"]
    assert names(apply_view(sample_records, ViewState(sort="desc"))) == ["B", "A"]


def test_empty_tag_means_all(sample_records):
    assert len(apply_view(sample_records, ViewState(tag=""))) == 2
    assert len(apply_view(sample_records, ViewState(tag=None))) == 2


def test_search_matches_description_and_tolerates_missing_name():
    record = ProjectRecord(name=None, description="Static Docs site")
    assert matches(record, ViewState(query="docs"))
    assert not matches(record, ViewState(query="blog"))


def test_search_and_tag_must_both_hold():
    record = ProjectRecord(name="docs", topics=["web"])
    assert matches(record, ViewState(query="doc", tag="web"))
    assert not matches(record, ViewState(query="doc", tag="cli"))


def test_state_is_immutable():
    state = ViewState(query="a")
    with pytest.raises(ValidationError):
        state.query = "b"
    assert state.query == "a"


def test_topic_vocabulary_sorted_distinct_literal():
    records = [
        ProjectRecord(name="1", topics=["web", "Web"]),
        ProjectRecord(name="2", topics=["api", "web"]),
        ProjectRecord(name="3"),
    ]
    assert topic_vocabulary(records) == ["Web", "api", "web"]


def test_equal_dates_keep_input_order_and_bad_dates_last():
    records = [
        ProjectRecord(name="bad", date="not a date"),
        ProjectRecord(name="first", date="2023-01-01T00:00:00Z"),
        ProjectRecord(name="second", date="2023-01-01T00:00:00Z"),
        ProjectRecord(name="newer", date="2024-01-01"),
    ]
    assert names(sort_records(records, descending=True)) == ["newer", "first", "second", "bad"]
    assert names(sort_records(records, descending=False)) == ["first", "second", "newer", "bad"]


def test_format_date():
    assert format_date("2024-03-05T10:00:00Z") == "2024-03-05"
    assert format_date("2024-03-05") == "2024-03-05"
    assert format_date("yesterday") == ""
    assert format_date("") == ""
    assert format_date(None) == ""


def test_card_fallbacks():
    settings = Settings()
    card = to_card(ProjectRecord(name=None, date="garbage"), settings)

    assert card.title == settings.untitled_label
    assert card.description == ""
    assert card.href == "#"
    assert card.image == settings.placeholder_image
    assert card.image
    assert card.tags == []
    assert card.date_label == ""


def test_card_fields():
    settings = Settings(date_label_prefix="Updated")
    record = ProjectRecord(
        name="site",
        url="https://octo.github.io/site/",
        description="desc",
        topics=["web"],
        date="2024-03-05T10:00:00Z",
        screenshot="https://img.example/site.png",
    )
    card = to_card(record, settings)

    assert card.href == "https://octo.github.io/site/"
    assert card.image == "https://img.example/site.png"
    assert card.tags == ["web"]
    assert card.date_label == "Updated 2024-03-05"
