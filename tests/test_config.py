"""
Employee API: Settings Tests
===============================

What:  Tests for the Settings validators and derived properties.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from employee_api.config import Settings
from employee_api.database import build_engine


class TestSettings:

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(log_level="LOUD")

    @pytest.mark.parametrize("raw", ["api/employees", "/api/employees/", " /api/employees "])
    def test_prefix_normalized(self, raw):
        assert Settings(employees_prefix=raw).employees_prefix == "/api/employees"

    def test_root_prefix_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(employees_prefix="/")

    def test_cors_origins_split(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_sqlite_engine_skips_pool_sizing(self, tmp_path):
        settings = Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'x.db'}")

        engine = build_engine(settings)

        assert settings.is_sqlite
        assert engine.url.drivername == "sqlite+aiosqlite"
