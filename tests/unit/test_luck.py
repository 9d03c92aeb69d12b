"""Unit tests for luck categories."""

import pytest

from omikuji.fortune import LUCK_CATEGORIES, named_scores, top_scores


def test_sixteen_unique_categories():
    assert len(LUCK_CATEGORIES) == 16
    assert len(set(LUCK_CATEGORIES)) == 16


def test_named_scores_keeps_slot_order():
    scores = list(range(16))
    named = named_scores(scores)
    assert list(named) == list(LUCK_CATEGORIES)
    assert named["wish"] == 0
    assert named["friendship"] == 15


def test_named_scores_wrong_length():
    with pytest.raises(ValueError, match="16 luck scores"):
        named_scores([1, 2, 3])


def test_top_scores_descending():
    scores = [10, 200, 30, 250, 5, 90, 90, 0, 1, 2, 3, 4, 6, 7, 8, 100]
    assert top_scores(scores) == [
        ("travel", 250),
        ("awaited_person", 200),
        ("friendship", 100),
        ("study", 90),
        ("speculation", 90),
    ]


def test_top_scores_ties_keep_category_order():
    scores = [50] * 16
    top = top_scores(scores, n=3)
    assert [name for name, _ in top] == list(LUCK_CATEGORIES[:3])


def test_top_scores_rejects_non_positive():
    with pytest.raises(ValueError):
        top_scores([0] * 16, n=0)
