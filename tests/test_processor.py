from __future__ import annotations

import itertools
import random

from core.classifier import Classifier
from core.models import Message, RunStatistics, UserProfile, merge_statistics
from core.processor import BatchProcessor


def _en(text: str) -> Message:
    return Message(text=text, user=UserProfile(lang="en"))


def _processor() -> BatchProcessor:
    return BatchProcessor(Classifier())


def test_batch_keeps_passing_texts_in_order() -> None:
    messages = [
        _en("first @a"),
        Message(text="no user"),
        _en("日本語です"),
        _en("second #b"),
        Message(text="german", user=UserProfile(lang="de")),
        _en("third http://x.co"),
        _en("ñandú ok"),
        Message(text="french", user=UserProfile(lang="fr")),
        _en("ünïcödé"),
        Message(text="missing lang", user=UserProfile()),
    ]

    result = _processor().process(messages)

    assert result.raw_passing == ["first @a", "second #b", "third http://x.co", "ñandú ok"]
    assert result.filtered_passing == ["first", "second", "third", "ñandú ok"]
    assert len(result.raw_passing) == len(result.filtered_passing) == 4


def test_batch_statistics() -> None:
    messages = [
        _en("hello world"),
        _en("ñandú ok"),
        _en("日本語"),
        Message(text="hello"),
        Message(text="日本語", user=UserProfile(lang="ja")),
    ]

    stats = _processor().process(messages).statistics

    assert stats == RunStatistics(
        total=5,
        declared_english=3,
        ascii_ok=3,
        passed=2,
        passed_with_non_ascii=1,
    )


def test_non_ascii_count_uses_raw_text() -> None:
    # The only non-ASCII character sits in a token the filter removes.
    result = _processor().process([_en("hello #café")])

    assert result.filtered_passing == ["hello"]
    assert result.statistics.passed_with_non_ascii == 1


def test_empty_batch() -> None:
    result = _processor().process([])

    assert result.raw_passing == []
    assert result.filtered_passing == []
    assert result.statistics == RunStatistics()


def test_statistics_invariants_hold_for_random_batches() -> None:
    rng = random.Random(7)
    alphabet = "abc é日 "
    langs = ["en", "de", None]
    for _ in range(50):
        batch = []
        for _ in range(rng.randint(0, 12)):
            text = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 10)))
            lang = rng.choice(langs)
            batch.append(Message(text=text, user=UserProfile(lang=lang) if lang else None))
        stats = _processor().process(batch).statistics
        assert stats.passed <= min(stats.declared_english, stats.ascii_ok) <= stats.total
        assert stats.passed_with_non_ascii <= stats.passed


def test_merge_is_order_independent() -> None:
    batches = [
        RunStatistics(10, 6, 8, 5, 1),
        RunStatistics(3, 3, 2, 2, 0),
        RunStatistics(7, 1, 7, 1, 1),
    ]
    expected = RunStatistics(20, 10, 17, 8, 2)

    for order in itertools.permutations(batches):
        assert merge_statistics(order) == expected

    left = (batches[0] + batches[1]) + batches[2]
    right = batches[0] + (batches[1] + batches[2])
    assert left == right == expected
    assert merge_statistics([]) == RunStatistics()
    assert batches[0] + RunStatistics() == batches[0]
