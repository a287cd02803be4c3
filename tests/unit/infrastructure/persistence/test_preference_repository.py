from datetime import datetime
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from redis.exceptions import ConnectionError as RedisConnectionError
from sqlalchemy.exc import SQLAlchemyError

from domain.exceptions.currency import CacheError
from domain.models.currency import UserPreference
from infrastructure.persistence.database import Database
from infrastructure.persistence.repositories.preference import PreferenceRepository


@pytest_asyncio.fixture
async def database(tmp_path):
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_tables()
    yield db
    await db.close()


@pytest.fixture
def mock_cache():
    cache = AsyncMock()
    cache.get_preference.return_value = None
    return cache


@pytest.mark.asyncio
async def test_get_preference_missing_user_returns_none(database, mock_cache):
    async with database.session_factory() as session:
        repo = PreferenceRepository(db_session=session, cache_service=mock_cache)
        assert await repo.get_preference('nobody') is None

    mock_cache.set_preference.assert_not_called()


@pytest.mark.asyncio
async def test_save_then_load_from_database(database, mock_cache):
    async with database.session_factory() as session:
        repo = PreferenceRepository(db_session=session, cache_service=mock_cache)
        saved = await repo.save_preference('user-1', 'EUR')

    assert saved.preferred_currency == 'EUR'
    mock_cache.set_preference.assert_called_once_with(saved)

    async with database.session_factory() as session:
        repo = PreferenceRepository(db_session=session, cache_service=mock_cache)
        loaded = await repo.get_preference('user-1')

    assert loaded == UserPreference(user_id='user-1', preferred_currency='EUR')
    assert mock_cache.set_preference.call_count == 2


@pytest.mark.asyncio
async def test_save_updates_existing_row(database, mock_cache):
    async with database.session_factory() as session:
        repo = PreferenceRepository(db_session=session, cache_service=mock_cache)
        await repo.save_preference('user-1', 'EUR')

    async with database.session_factory() as session:
        repo = PreferenceRepository(db_session=session, cache_service=mock_cache)
        await repo.save_preference('user-1', 'PLN')

    async with database.session_factory() as session:
        repo = PreferenceRepository(db_session=session, cache_service=mock_cache)
        loaded = await repo.get_preference('user-1')

    assert loaded.preferred_currency == 'PLN'


@pytest.mark.asyncio
async def test_cache_hit_skips_database(database, mock_cache):
    cached = UserPreference(
        user_id='user-1', preferred_currency='GBP', updated_at=datetime(2025, 1, 1)
    )
    mock_cache.get_preference.return_value = cached

    async with database.session_factory() as session:
        repo = PreferenceRepository(db_session=session, cache_service=mock_cache)
        assert await repo.get_preference('user-1') is cached

    mock_cache.set_preference.assert_not_called()


@pytest.mark.asyncio
async def test_corrupt_cache_entry_falls_back_to_database(database, mock_cache):
    async with database.session_factory() as session:
        repo = PreferenceRepository(db_session=session, cache_service=mock_cache)
        await repo.save_preference('user-1', 'JPY')

    mock_cache.get_preference.side_effect = CacheError('Invalid json data')

    async with database.session_factory() as session:
        repo = PreferenceRepository(db_session=session, cache_service=mock_cache)
        loaded = await repo.get_preference('user-1')

    assert loaded.preferred_currency == 'JPY'


# ============================================================================
# TEST: cache outages and failed commits
# ============================================================================

@pytest.mark.asyncio
async def test_cache_outage_reads_from_database(database, mock_cache):
    async with database.session_factory() as session:
        repo = PreferenceRepository(db_session=session, cache_service=mock_cache)
        await repo.save_preference('user-1', 'EUR')

    mock_cache.get_preference.side_effect = RedisConnectionError('down')
    mock_cache.set_preference.side_effect = RedisConnectionError('down')

    async with database.session_factory() as session:
        repo = PreferenceRepository(db_session=session, cache_service=mock_cache)
        loaded = await repo.get_preference('user-1')

    assert loaded.preferred_currency == 'EUR'


@pytest.mark.asyncio
async def test_cache_outage_does_not_fail_save(database, mock_cache):
    mock_cache.set_preference.side_effect = RedisConnectionError('down')

    async with database.session_factory() as session:
        repo = PreferenceRepository(db_session=session, cache_service=mock_cache)
        saved = await repo.save_preference('user-1', 'GBP')

    assert saved.preferred_currency == 'GBP'

    mock_cache.set_preference.side_effect = None
    async with database.session_factory() as session:
        repo = PreferenceRepository(db_session=session, cache_service=mock_cache)
        assert (await repo.get_preference('user-1')).preferred_currency == 'GBP'


@pytest.mark.asyncio
async def test_failed_commit_does_not_touch_cache(database, mock_cache):
    async with database.session_factory() as session:
        session.commit = AsyncMock(side_effect=SQLAlchemyError('commit failed'))
        repo = PreferenceRepository(db_session=session, cache_service=mock_cache)

        with pytest.raises(SQLAlchemyError):
            await repo.save_preference('user-1', 'EUR')

    mock_cache.set_preference.assert_not_called()

    async with database.session_factory() as session:
        repo = PreferenceRepository(db_session=session, cache_service=mock_cache)
        assert await repo.get_preference('user-1') is None
