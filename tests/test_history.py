import pytest

from homework_monitor.history import ResultHistory
from homework_monitor.models import AnalysisResult, FocusStatus

FOCUSED = AnalysisResult(FocusStatus.FOCUSED, "很棒，继续保持", 0.9)
ABSENT = AnalysisResult(FocusStatus.ABSENT, "人去哪里了", 0.8)


def test_append_and_get():
    history = ResultHistory()
    history.append("42", 100, FOCUSED)
    history.append("42", 200, ABSENT)

    entries = history.get("42")

    assert [e.result for e in entries] == [FOCUSED, ABSENT]
    assert entries[0].timestamp == 100


def test_unknown_sender_is_empty():
    history = ResultHistory()

    assert history.get("nobody") == []
    assert history.latest("nobody") is None


def test_latest_returns_most_recent():
    history = ResultHistory()
    history.append("42", 100, FOCUSED)
    history.append("42", 200, ABSENT)

    assert history.latest("42").result == ABSENT


def test_bounded_per_sender():
    history = ResultHistory(max_per_sender=3)
    list(map(lambda ts: history.append("42", ts, FOCUSED), range(5)))

    assert [e.timestamp for e in history.get("42")] == [2, 3, 4]


def test_senders_are_isolated():
    history = ResultHistory()
    history.append("1", 100, FOCUSED)
    history.append("2", 100, ABSENT)

    history.clear("1")

    assert history.get("1") == []
    assert history.latest("2").result == ABSENT


def test_get_returns_a_copy():
    history = ResultHistory()
    history.append("42", 100, FOCUSED)

    history.get("42").clear()

    assert len(history.get("42")) == 1


@pytest.mark.parametrize("size", [0, -3])
def test_non_positive_bound_is_rejected(size):
    with pytest.raises(ValueError, match="max_per_sender"):
        ResultHistory(max_per_sender=size)


def test_bound_of_one_keeps_only_latest():
    history = ResultHistory(max_per_sender=1)
    list(map(lambda ts: history.append("42", ts, FOCUSED), range(50)))

    assert [e.timestamp for e in history.get("42")] == [49]
