"""Tests for core.settings and core.factory modules.

Covers:
- IdSettings instantiation with defaults
- Environment variable override
- Field validation
- get_settings caching
- build_generator / create_validator
"""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from seqid.core.errors import InvalidConfigError
from seqid.core.factory import build_generator, create_validator
from seqid.core.sequencers import RangeSequencer
from seqid.core.settings import IdSettings, clear_settings_cache, get_settings
from seqid.core.validators import LuhnValidator, NoValidator, ValidatorKind


class TestIdSettingsDefaults:
    def test_default_sequence_range(self):
        s = IdSettings()
        assert s.sequence_min == 0
        assert s.sequence_max == 9999
        assert s.sequence_initial is None

    def test_default_validator_is_luhn(self):
        assert IdSettings().validator is ValidatorKind.LUHN

    def test_default_origin_is_none(self):
        assert IdSettings().origin is None

    def test_default_logging(self):
        s = IdSettings()
        assert s.log_level == "INFO"
        assert s.log_format == "auto"
        assert s.json_logs is None


class TestIdSettingsEnvOverride:
    def test_sequence_from_env(self, monkeypatch):
        monkeypatch.setenv("SEQID_SEQUENCE_MIN", "100")
        monkeypatch.setenv("SEQID_SEQUENCE_MAX", "199")
        monkeypatch.setenv("SEQID_SEQUENCE_INITIAL", "150")
        s = IdSettings()
        assert (s.sequence_min, s.sequence_max, s.sequence_initial) == (100, 199, 150)

    def test_validator_from_env(self, monkeypatch):
        monkeypatch.setenv("SEQID_VALIDATOR", "none")
        assert IdSettings().validator is ValidatorKind.NONE

    def test_origin_from_env(self, monkeypatch):
        monkeypatch.setenv("SEQID_ORIGIN", "2024-01-01T00:00:00+00:00")
        assert IdSettings().origin == datetime(2024, 1, 1, tzinfo=UTC)

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("SEQUENCE_MAX", "5")
        assert IdSettings().sequence_max == 9999

    def test_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("SEQID_SEQUENCE_MAX=42\n", encoding="utf-8")
        assert IdSettings().sequence_max == 42


class TestIdSettingsValidation:
    def test_log_level_normalized(self):
        assert IdSettings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            IdSettings(log_level="chatty")

    def test_unknown_log_format_rejected(self):
        with pytest.raises(ValidationError):
            IdSettings(log_format="xml")

    @pytest.mark.parametrize(("fmt", "expected"), [("json", True), ("console", False), ("AUTO", None)])
    def test_json_logs(self, fmt, expected):
        assert IdSettings(log_format=fmt).json_logs is expected

    def test_unknown_validator_rejected(self):
        with pytest.raises(ValidationError):
            IdSettings(validator="crc32")

    def test_inverted_range_accepted(self):
        s = IdSettings(sequence_min=10, sequence_max=1)
        assert s.sequence_min == 10


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_force_reload(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("SEQID_SEQUENCE_MAX", "7")
        assert get_settings() is first
        reloaded = get_settings(_force_reload=True)
        assert reloaded.sequence_max == 7

    def test_clear_cache(self):
        first = get_settings()
        clear_settings_cache()
        assert get_settings() is not first


class TestBuildGenerator:
    def test_from_explicit_settings(self):
        gen = build_generator(IdSettings(sequence_min=1, sequence_max=3, sequence_initial=2))
        assert isinstance(gen.sequencer, RangeSequencer)
        assert (gen.sequencer.minimum, gen.sequencer.maximum) == (1, 3)
        assert gen.sequencer.current == 2
        assert isinstance(gen.validator, LuhnValidator)
        assert gen.origin == 0

    def test_from_cached_settings(self, monkeypatch):
        monkeypatch.setenv("SEQID_VALIDATOR", "none")
        gen = build_generator()
        assert isinstance(gen.validator, NoValidator)

    def test_origin_applied(self):
        gen = build_generator(IdSettings(origin=datetime(2024, 1, 1, tzinfo=UTC)))
        assert gen.origin == 1_704_067_200

    def test_generated_ids_verify(self):
        gen = build_generator(IdSettings())
        assert gen.valid(gen.generate())

    def test_inverted_range_clamped_by_sequencer(self):
        gen = build_generator(IdSettings(sequence_min=5, sequence_max=2))
        assert gen.sequencer.minimum == 2


class TestCreateValidator:
    def test_known(self):
        assert isinstance(create_validator("none"), NoValidator)

    def test_unknown_raises_config_error(self):
        with pytest.raises(InvalidConfigError) as excinfo:
            create_validator("crc32")
        assert excinfo.value.key == "validator"
        assert isinstance(excinfo.value.__cause__, ValueError)
