import aiohttp
import numpy as np
import pytest

from conftest import FakeGenerator, FakeSource, FakeStore, lotto_row
from lotto_picker.exceptions import DatasetNotFound, EmptyDataset, UnknownGame


async def test_frequency_picks_take_top_of_ranking(make_service, store):
    service = make_service()
    picks = await service.generate_picks("lotto", draws=3)
    assert len(picks) == 3
    for pick in picks:
        assert pick.pick_type == "frequency"
        assert pick.numbers == (1, 2, 3, 4, 5, 7)
        assert pick.secondary is None
    assert store.saved == picks


async def test_alias_resolves_to_lotto(make_service):
    picks = await make_service().generate_picks("lottotexas")
    assert picks[0].game == "lotto"


async def test_weighted_sampling_uses_observed_numbers(make_service):
    service = make_service()
    picks = await service.generate_picks(
        "lotto", draws=5, sampling="weighted", rng=np.random.default_rng(7),
    )
    for pick in picks:
        assert set(pick.numbers) <= {1, 2, 3, 4, 5, 6, 7}
        assert len(set(pick.numbers)) == 6


async def test_random_picks(make_service):
    picks = await make_service().generate_picks("powerball", draws=4, pick_type="random")
    for pick in picks:
        assert pick.pick_type == "random"
        assert len(set(pick.numbers)) == 5
        assert all(1 <= n <= 69 for n in pick.numbers)
        assert 1 <= pick.secondary <= 26


async def test_ai_pick_uses_generated_numbers(make_service):
    generator = FakeGenerator(result=[54, 10, 20, 30, 40, 50])
    picks = await make_service(generator=generator).generate_picks("lotto", pick_type="ai")
    assert picks[0].pick_type == "ai"
    assert picks[0].numbers == (10, 20, 30, 40, 50, 54)
    assert generator.contexts[0].game.game_id == "lotto"


async def test_ai_pick_shortfall_is_backfilled(make_service):
    generator = FakeGenerator(result=[11, 12])
    pick = (await make_service(generator=generator).generate_picks("powerball", pick_type="ai"))[0]
    assert pick.pick_type == "ai"
    assert {11, 12} <= set(pick.numbers)
    assert len(set(pick.numbers)) == 5
    assert 1 <= pick.secondary <= 26


@pytest.mark.parametrize("generator", [
    FakeGenerator(result=None),
    FakeGenerator(result=[0, 99, 500]),
    FakeGenerator(error=aiohttp.ClientError("connection refused")),
    FakeGenerator(error=RuntimeError("boom")),
])
async def test_ai_failure_falls_back_to_frequency(make_service, generator):
    picks = await make_service(generator=generator).generate_picks("lotto", draws=2, pick_type="ai")
    for pick in picks:
        assert pick.pick_type == "frequency"
        assert pick.numbers == (1, 2, 3, 4, 5, 7)


async def test_ai_disabled_falls_back(make_service):
    generator = FakeGenerator(result=[10, 20, 30, 40, 50, 54])
    picks = await make_service(generator=generator, ai_enabled=False).generate_picks("lotto", pick_type="ai")
    assert picks[0].pick_type == "frequency"
    assert generator.contexts == []


async def test_fallback_pick_is_valid_for_powerball(make_service):
    pick = (await make_service(generator=FakeGenerator()).generate_picks("powerball", pick_type="ai"))[0]
    assert pick.pick_type == "frequency"
    assert len(set(pick.numbers)) == 5
    assert all(1 <= n <= 69 for n in pick.numbers)
    assert 1 <= pick.secondary <= 26


async def test_store_failure_does_not_lose_picks(make_service):
    service = make_service(store_=FakeStore(fail=True))
    picks = await service.generate_picks("lotto", draws=2)
    assert len(picks) == 2


async def test_unknown_game(make_service):
    with pytest.raises(UnknownGame):
        await make_service().generate_picks("keno")


async def test_missing_dataset(make_service):
    service = make_service(source_=FakeSource({}))
    with pytest.raises(DatasetNotFound):
        await service.generate_picks("lotto")


async def test_empty_dataset_is_fatal(make_service, store):
    service = make_service(source_=FakeSource({"lotto": [lotto_row([1, 1, 2, 3, 4, 5]), {}]}))
    snapshot = await service.get_snapshot("lotto")
    assert snapshot.draws == ()
    assert snapshot.dropped == 2
    with pytest.raises(EmptyDataset):
        await service.generate_picks("lotto")
    with pytest.raises(EmptyDataset):
        await service.get_analysis("lotto")
    assert store.saved == []


async def test_invalid_arguments(make_service):
    service = make_service()
    with pytest.raises(ValueError):
        await service.generate_picks("lotto", draws=0)
    with pytest.raises(ValueError):
        await service.generate_picks("lotto", pick_type="psychic")
    with pytest.raises(ValueError):
        await service.generate_picks("lotto", sampling="loaded")


async def test_dataset_loaded_once_and_cached(make_service, source):
    service = make_service()
    await service.generate_picks("lotto")
    await service.get_analysis("lotto")
    assert source.calls == 1
    assert ("lotto", "frequency") in service.cache
    assert ("lotto", "patterns") in service.cache


async def test_reload_bumps_version_and_invalidates(make_service, source):
    service = make_service()
    await service.get_analysis("lotto")
    source.rows_by_game["lotto"].append(lotto_row([40, 41, 42, 43, 44, 45]))

    snapshot = await service.reload("lotto")
    assert snapshot.version == 2
    assert len(snapshot.draws) == 3
    assert ("lotto", "frequency") not in service.cache

    analysis = await service.get_analysis("lotto")
    assert analysis.total_draws == 3


async def test_analysis_summary(make_service):
    analysis = await make_service().get_analysis("lotto")
    assert analysis.game_name == "Lotto Texas"
    assert analysis.total_draws == 2
    assert analysis.dropped_rows == 0
    assert [f.number for f in analysis.frequency.hot[:5]] == [1, 2, 3, 4, 5]
    assert analysis.frequency.recent_draws == 0
    assert analysis.patterns.sum_range.min == 21
    assert analysis.patterns.sum_range.max == 22
    assert analysis.patterns.sum_range.average == 21.5
    assert analysis.patterns.common_pairs[0].numbers == [1, 2]
    assert analysis.patterns.common_pairs[0].count == 2
    assert analysis.patterns.common_triplets[0].numbers == [1, 2, 3]
    assert analysis.secondary is None


async def test_powerball_analysis_has_secondary(make_service):
    analysis = await make_service().get_analysis("powerball")
    assert analysis.secondary.hot[0].number == 7
    assert analysis.secondary.hot[0].count == 2


async def test_ranking(make_service):
    ranking = await make_service().get_ranking("lotto")
    assert ranking.numbers[:6] == [5, 4, 3, 2, 1, 7]
    assert len(ranking.entries) == 54
