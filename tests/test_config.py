import random

import pytest
from pydantic import ValidationError

from rut_lib import Rut
from rut_lib.core.config import AppSettings, build_random_source
from rut_lib.core.domain.models import Format


class TestAppSettings:
    def test_defaults(self, clean_env):
        settings = AppSettings()
        assert settings.default_format is Format.DASH
        assert settings.random_seed is None
        assert settings.generate_count == 1
        assert settings.show_banner is True

    def test_reads_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("RUT_LIB_DEFAULT_FORMAT", "dots")
        monkeypatch.setenv("RUT_LIB_RANDOM_SEED", "42")
        monkeypatch.setenv("RUT_LIB_GENERATE_COUNT", "7")
        settings = AppSettings()
        assert settings.default_format is Format.DOTS
        assert settings.random_seed == 42
        assert settings.generate_count == 7

    def test_reads_dotenv(self, clean_env):
        (clean_env / ".env").write_text("RUT_LIB_DEFAULT_FORMAT=none\n", encoding="utf-8")
        assert AppSettings().default_format is Format.NONE

    def test_rejects_invalid_count(self, clean_env, monkeypatch):
        monkeypatch.setenv("RUT_LIB_GENERATE_COUNT", "0")
        with pytest.raises(ValidationError):
            AppSettings()


class TestBuildRandomSource:
    def test_system_source_without_seed(self, clean_env):
        source = build_random_source(AppSettings())
        assert isinstance(source, random.SystemRandom)

    def test_seed_from_settings(self, clean_env):
        settings = AppSettings(random_seed=9)
        first = Rut.randomize(build_random_source(settings))
        second = Rut.randomize(build_random_source(settings))
        assert first == second

    def test_explicit_seed_wins(self, clean_env):
        settings = AppSettings(random_seed=9)
        expected = Rut.randomize(random.Random(3))
        assert Rut.randomize(build_random_source(settings, seed=3)) == expected
