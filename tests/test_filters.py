"""Tests for job_tracker.filters."""
from __future__ import annotations

import datetime as dt

import pytest

from conftest import make_record
from job_tracker.filters import filter_records, match_date, match_status
from job_tracker.models import FilterSpec, JobRecord, JobStatus
from job_tracker.store import StoreResult


@pytest.fixture
def collection():
    return [
        make_record("1", status="Applied", date="2024-01-10"),
        make_record("2", status="Interview", date="2024-01-10T18:45:00.000Z"),
        make_record("3", status="Offer", date="2024-02-01"),
        make_record("4", status="Rejected", date="2024-01-10T23:30:00-05:00"),
        make_record("5", status="Applied", date=None),
        make_record("6", status="Interview", date="not a date"),
    ]


class TestMatchers:
    def test_all_matches_every_status(self):
        spec = FilterSpec()
        for status in JobStatus:
            assert match_status(make_record(status=status.value), spec)

    def test_status_must_equal(self):
        spec = FilterSpec(status="Offer")
        assert match_status(make_record(status="Offer"), spec)
        assert not match_status(make_record(status="Applied"), spec)

    def test_no_date_filter_matches_missing_dates(self):
        assert match_date(make_record(date=None), FilterSpec(date=""))

    def test_missing_or_unparseable_date_never_matches_a_day(self):
        spec = FilterSpec(date="2024-01-10")
        assert not match_date(make_record(date=None), spec)
        assert not match_date(make_record(date="someday"), spec)

    def test_time_of_day_is_ignored(self):
        spec = FilterSpec(date=dt.date(2024, 1, 10))
        assert match_date(make_record(date="2024-01-10T23:59:59Z"), spec)


class TestFilterRecords:
    def test_all_and_no_date_returns_everything_in_order(self, collection):
        result = filter_records(collection, FilterSpec(status="all", date=""))
        assert result == collection
        assert all(a is b for a, b in zip(result, collection))
        assert [r.id for r in result] == ["1", "2", "3", "4", "5", "6"]

    def test_default_spec_is_unfiltered(self, collection):
        assert filter_records(collection) == collection

    @pytest.mark.parametrize(
        "status,expected",
        [
            ("Applied", ["1", "5"]),
            ("Interview", ["2", "6"]),
            ("Offer", ["3"]),
            ("Rejected", ["4"]),
        ],
    )
    def test_filter_by_status(self, collection, status, expected):
        assert [r.id for r in filter_records(collection, FilterSpec(status=status))] == expected

    def test_filter_by_date_uses_written_day(self, collection):
        result = filter_records(collection, FilterSpec(date="2024-01-10"))
        assert [r.id for r in result] == ["1", "2", "4"]

    def test_status_and_date_combine(self, collection):
        result = filter_records(collection, FilterSpec(status="Interview", date="2024-01-10"))
        assert [r.id for r in result] == ["2"]

    def test_inclusion_matches_predicates(self, collection):
        specs = [FilterSpec(status=s, date=d) for s in ["all", *JobStatus] for d in (None, "2024-01-10", "2024-02-01")]
        for spec in specs:
            result = filter_records(collection, spec)
            expected = [r for r in collection if match_status(r, spec) and match_date(r, spec)]
            assert result == expected

    @pytest.mark.parametrize(
        "bad",
        [None, "oops", 42, {"1": "x"}, StoreResult(ok=False, records=()), ValueError("load failed")],
    )
    def test_non_sequence_input_gives_empty_list(self, bad):
        assert filter_records(bad, FilterSpec()) == []

    def test_raw_dicts_are_returned_as_given(self):
        offer = {"_id": "a", "status": "Offer", "date": "2024-02-01"}
        raw = [offer, {"company": "no status"}, "garbage"]

        result = filter_records(raw, FilterSpec(status="Offer"))

        assert len(result) == 1
        assert result[0] is offer
        assert not isinstance(result[0], JobRecord)

    def test_all_and_no_date_keeps_partial_dicts(self):
        raw = [{"id": 1}, {"id": 2, "status": "Offer"}, {"id": 3, "date": "nope"}]

        result = filter_records(raw, FilterSpec(status="all", date=""))

        assert result == raw
        assert all(a is b for a, b in zip(result, raw))

    def test_scenario_with_raw_dicts(self):
        collection = [
            {"id": 1, "status": "Applied", "date": "2024-01-10"},
            {"id": 2, "status": "Offer", "date": "2024-02-01"},
        ]
        assert filter_records(collection, FilterSpec(status="Offer", date="")) == [collection[1]]
        assert filter_records(collection, FilterSpec(status="all", date="2024-01-10")) == [collection[0]]
        assert filter_records(collection, FilterSpec(status="all", date="")) == collection

    def test_scenario(self):
        collection = [
            make_record(1, status="Applied", date="2024-01-10"),
            make_record(2, status="Offer", date="2024-02-01"),
        ]
        by_status = filter_records(collection, FilterSpec(status="Offer", date=""))
        assert [r.id for r in by_status] == ["2"]
        by_date = filter_records(collection, FilterSpec(status="all", date="2024-01-10"))
        assert [r.id for r in by_date] == ["1"]
