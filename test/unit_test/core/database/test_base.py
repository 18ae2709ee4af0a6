"""
Unit tests for database base helpers and engine utilities.
"""

import time

import pytest

from blich_cms.core.database.base import epoch_millis, new_object_id, utc_now
from blich_cms.core.database.utils import normalize_database_url


class TestIdentifiers:
    def test_object_id_layout(self):
        object_id = new_object_id()

        assert len(object_id) == 24
        assert object_id == object_id.lower()
        assert abs(int(object_id[:8], 16) - int(time.time())) <= 2

    def test_object_ids_are_unique(self):
        assert len({new_object_id() for _ in range(100)}) == 100


class TestClocks:
    def test_epoch_millis(self):
        assert abs(epoch_millis() - int(time.time() * 1000)) < 5000

    def test_utc_now_is_aware(self):
        assert utc_now().utcoffset().total_seconds() == 0


class TestNormalizeDatabaseUrl:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("postgres://u:p@db/cms", "postgresql+asyncpg://u:p@db/cms"),
            ("postgresql://u:p@db/cms", "postgresql+asyncpg://u:p@db/cms"),
            ("postgresql+psycopg://u:p@db/cms", "postgresql+asyncpg://u:p@db/cms"),
            ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
        ],
    )
    def test_normalize(self, url, expected):
        assert normalize_database_url(url) == expected
