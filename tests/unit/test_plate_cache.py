import pytest

from garage_search.domain.services.plate_cache import PlateCache


class TestPlateCache:
    """Wholesale TTL refresh of the typeahead plate cache"""

    @pytest.fixture
    def cache(self, vehicle_directory, clock):
        return PlateCache(loader=vehicle_directory.find_currently_parked, ttl_seconds=30.0, clock=clock)

    def test_starts_expired(self, cache):
        assert cache.is_expired()
        assert cache.last_refreshed is None
        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_reads_within_ttl_share_one_load(self, cache, vehicle_directory, clock):
        first = await cache.get_plates()
        clock.advance(29.9)
        second = await cache.get_plates()

        assert first == second == ["ABC123", "XABC9", "ZZZ000", "AB1234"]
        assert vehicle_directory.parked_calls == 1

    @pytest.mark.asyncio
    async def test_reload_once_ttl_elapses(self, cache, vehicle_directory, clock):
        await cache.get_plates()
        clock.advance(30.0)

        assert cache.is_expired()
        await cache.get_plates()
        await cache.get_plates()

        assert vehicle_directory.parked_calls == 2

    @pytest.mark.asyncio
    async def test_stale_within_ttl(self, cache, vehicle_directory, vehicle_factory, clock):
        await cache.get_plates()
        vehicle_directory.add(vehicle_factory("NEW999", "F3-B1-S1"))

        assert "NEW999" not in await cache.get_plates()

        clock.advance(31)
        assert "NEW999" in await cache.get_plates()

    @pytest.mark.asyncio
    async def test_clear_forces_reload(self, cache, vehicle_directory):
        await cache.get_plates()
        cache.clear()

        assert cache.is_expired()
        assert len(cache) == 0

        await cache.get_plates()
        assert vehicle_directory.parked_calls == 2

    @pytest.mark.asyncio
    async def test_keys_are_normalized(self, vehicle_factory, clock):
        async def loader():
            return [vehicle_factory("ab-123", "S1"), vehicle_factory("xy 9", "S2")]

        cache = PlateCache(loader=loader, clock=clock)
        entries = await cache.get_entries()

        assert [e.plate for e in entries] == ["AB123", "XY9"]
        assert entries[0].vehicle.license_plate == "ab-123"
        assert all(e.inserted_at == clock.now for e in entries)

    @pytest.mark.asyncio
    async def test_failed_refresh_keeps_previous_entries(self, vehicle_factory, clock):
        calls = []

        async def loader():
            calls.append(1)
            if len(calls) > 1:
                raise RuntimeError("database offline")
            return [vehicle_factory("ABC123", "S1")]

        cache = PlateCache(loader=loader, ttl_seconds=10, clock=clock)
        await cache.get_plates()
        clock.advance(10)

        with pytest.raises(RuntimeError):
            await cache.get_plates()

        assert len(cache) == 1
        assert cache.last_refreshed == 1000.0

    @pytest.mark.asyncio
    async def test_stats(self, cache, clock):
        assert cache.get_stats() == {
            "record_count": 0,
            "ttl_seconds": 30.0,
            "age_seconds": None,
            "expired": True,
        }

        await cache.get_plates()
        clock.advance(5)

        stats = cache.get_stats()
        assert stats["record_count"] == 4
        assert stats["age_seconds"] == 5.0
        assert stats["expired"] is False
