import pytest

from conftest import TODAY, draw
from lotto_picker.analysis.frequency import analyze_frequency
from lotto_picker.analysis.patterns import analyze_patterns
from lotto_picker.analysis.weighting import rank_numbers, uniform_backfill, weighted_sample


def _rank(draws, game):
    return rank_numbers(
        analyze_frequency(draws, game, today=TODAY), analyze_patterns(draws, game), game,
    )


def test_ranking_covers_every_number_once(lotto, two_draws):
    ranking = _rank(two_draws, lotto)
    assert sorted(ranking.numbers) == list(range(1, lotto.max_num + 1))


def test_ranking_is_descending(powerball):
    draws = [draw([1, 5, 9, 20, 30]), draw([5, 9, 21, 31, 69]), draw([5, 22, 32, 40, 50])]
    scores = [e.score for e in _rank(draws, powerball).entries]
    assert scores == sorted(scores, reverse=True)


def test_always_drawn_beats_never_drawn(lotto):
    draws = [draw([5, 10 + i, 20 + i, 30 + i, 40 + i, 50]) for i in range(3)]
    ranking = {e.number: e.score for e in _rank(draws, lotto).entries}
    assert ranking[5] > ranking[9]
    assert ranking[9] == 0


def test_scores_for_two_draw_scenario(lotto, two_draws):
    ranking = _rank(two_draws, lotto)
    scores = {e.number: e.score for e in ranking.entries}
    assert scores[1] == pytest.approx(2 * 0.7 * (1 + (1 / 21.5) * 0.2))
    assert scores[7] == pytest.approx(1 * 0.7 * (1 + (7 / 21.5) * 0.2))
    assert ranking.numbers[:6] == [5, 4, 3, 2, 1, 7]


def test_recent_draws_add_weight(lotto):
    draws = [draw([1, 2, 3, 4, 5, 6], on=TODAY), draw([7, 8, 9, 10, 11, 12])]
    scores = {e.number: e.score for e in _rank(draws, lotto).entries}
    assert scores[1] > scores[7]


def test_ties_break_by_ascending_number(lotto):
    ranking = _rank([], lotto)
    assert ranking.numbers == list(range(1, lotto.max_num + 1))
    assert all(e.score == 0 for e in ranking.entries)


def test_weighted_sample_prefers_only_weighted_number(rng):
    assert weighted_sample({5: 10}, 1, 54, rng) == [5]


def test_weighted_sample_without_replacement(rng):
    counts = {n: n for n in range(1, 70)}
    picked = weighted_sample(counts, 5, 69, rng)
    assert len(picked) == 5
    assert len(set(picked)) == 5
    assert all(1 <= n <= 69 for n in picked)


def test_weighted_sample_exhausted_pool_backfills(rng):
    picked = weighted_sample({3: 2, 8: 1, 99: 50}, 6, 54, rng)
    assert {3, 8} <= set(picked)
    assert 99 not in picked
    assert len(set(picked)) == 6
    assert all(1 <= n <= 54 for n in picked)


def test_weighted_sample_empty_pool_is_uniform(rng):
    picked = weighted_sample({}, 6, 54, rng)
    assert len(set(picked)) == 6
    assert all(1 <= n <= 54 for n in picked)
    assert weighted_sample(None, 1, 26, rng)[0] in range(1, 27)


def test_uniform_backfill_rejects_impossible_count(rng):
    with pytest.raises(ValueError):
        uniform_backfill([], 7, 6, rng)
