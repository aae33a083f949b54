import logging

import requests

from leetcode_stats.state import (
    FETCH_FAILED, FETCH_FAILED_MESSAGE, NOT_FOUND, NOT_FOUND_MESSAGE,
    LOADING_TEXT, Data, Error, Idle, Loading, StatsResult, classify, load_stats, panels, summary,
)


def test_error_status_is_not_found():
    assert classify({"status": "error"}) == Error(NOT_FOUND, NOT_FOUND_MESSAGE)


def test_success_payload_becomes_data(success_payload):
    state = classify(success_payload)
    assert isinstance(state, Data)
    stats = state.stats
    assert stats.total_solved == 500
    assert stats.ranking == 12345
    assert (stats.easy_solved, stats.total_easy) == (200, 300)
    assert (stats.medium_solved, stats.total_medium) == (250, 500)
    assert (stats.hard_solved, stats.total_hard) == (50, 200)


def test_missing_status_is_still_success(success_payload):
    del success_payload["status"]
    assert isinstance(classify(success_payload), Data)


def test_load_stats_scenarios(success_payload):
    assert load_stats("leetcoder1", fetch=lambda u: success_payload) == Data(StatsResult.from_json(success_payload))
    assert load_stats("nonexistentuser999", fetch=lambda u: {"status": "error"}) == Error(NOT_FOUND, NOT_FOUND_MESSAGE)


def test_load_stats_passes_username_verbatim(success_payload):
    seen = []

    def fetch(username):
        seen.append(username)
        return success_payload

    load_stats("  Mixed Case ", fetch=fetch)
    load_stats("", fetch=fetch)
    assert seen == ["  Mixed Case ", ""]


def test_transport_and_parse_failures_collapse(caplog):
    def down(username):
        raise requests.ConnectionError("network down")

    def bad_json(username):
        raise ValueError("Expecting value")

    with caplog.at_level(logging.ERROR, logger="leetcode_stats.state"):
        for fetch in (down, bad_json, lambda u: ["not", "an", "object"], lambda u: {"status": "success"}):
            assert load_stats("leetcoder1", fetch=fetch) == Error(FETCH_FAILED, FETCH_FAILED_MESSAGE)
    assert "Failed to fetch stats" in caplog.text


def test_messages_are_distinct():
    assert NOT_FOUND_MESSAGE != FETCH_FAILED_MESSAGE


def test_summary_lines(success_payload):
    assert summary(StatsResult.from_json(success_payload)) == (
        "Total Problems Solved: 500",
        "Ranking: #12345",
    )


def test_panels_per_state(success_payload):
    assert panels(Idle()) == ("", "", False)
    assert panels(Loading("leetcoder1")) == (LOADING_TEXT, "", False)
    assert panels(Error(NOT_FOUND, NOT_FOUND_MESSAGE)) == ("", NOT_FOUND_MESSAGE, False)
    assert panels(Error(FETCH_FAILED, FETCH_FAILED_MESSAGE)) == ("", FETCH_FAILED_MESSAGE, False)
    assert panels(Data(StatsResult.from_json(success_payload))) == ("", "", True)
