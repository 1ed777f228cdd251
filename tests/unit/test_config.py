import pytest

from mdbench.config import DEFAULT_REPETITIONS, BenchConfig, env_bool
from mdbench.exceptions import ConfigError
from mdbench.sink import SinkMode


class TestBenchConfigDefaults:
    def test_defaults_match_original_harness(self) -> None:
        config = BenchConfig.from_env()
        assert config.repetitions == DEFAULT_REPETITIONS == 1000
        assert config.transform == "html"
        assert config.sink_mode is SinkMode.ACCUMULATE
        assert config.linkify is True
        assert config.log_level == "WARNING"

    def test_frozen(self) -> None:
        config = BenchConfig()
        with pytest.raises(AttributeError):
            config.repetitions = 5  # type: ignore[misc]

    @pytest.mark.parametrize("value", [0, -3])
    def test_rejects_non_positive_repetitions(self, value: int) -> None:
        with pytest.raises(ConfigError, match=">= 1"):
            BenchConfig(repetitions=value)

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ConfigError, match="Invalid log level"):
            BenchConfig(log_level="BASIC_FORMAT")


class TestBenchConfigFromEnv:
    def test_reads_all_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MDBENCH_REPETITIONS", "25")
        monkeypatch.setenv("MDBENCH_TRANSFORM", "Segments")
        monkeypatch.setenv("MDBENCH_SINK_MODE", "RESET")
        monkeypatch.setenv("MDBENCH_LINKIFY", "off")
        monkeypatch.setenv("MDBENCH_LOG_LEVEL", "debug")

        config = BenchConfig.from_env()

        assert config.repetitions == 25
        assert config.transform == "segments"
        assert config.sink_mode is SinkMode.RESET
        assert config.linkify is False
        assert config.log_level == "DEBUG"

    def test_blank_values_fall_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MDBENCH_REPETITIONS", "  ")
        monkeypatch.setenv("MDBENCH_SINK_MODE", "")
        config = BenchConfig.from_env()
        assert config.repetitions == 1000
        assert config.sink_mode is SinkMode.ACCUMULATE

    @pytest.mark.parametrize("raw", ["abc", "1.5", "0", "-10"])
    def test_invalid_repetitions(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("MDBENCH_REPETITIONS", raw)
        with pytest.raises(ConfigError):
            BenchConfig.from_env()

    def test_invalid_sink_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MDBENCH_SINK_MODE", "grow")
        with pytest.raises(ConfigError, match="Invalid sink mode"):
            BenchConfig.from_env()

    @pytest.mark.parametrize("raw", ["maybe", "2", "enabled"])
    def test_invalid_linkify(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("MDBENCH_LINKIFY", raw)
        with pytest.raises(ConfigError, match="Invalid boolean for MDBENCH_LINKIFY"):
            BenchConfig.from_env()

    @pytest.mark.parametrize("raw", ["LOUD", "basic_format", "verbose"])
    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("MDBENCH_LOG_LEVEL", raw)
        with pytest.raises(ConfigError, match="Invalid log level"):
            BenchConfig.from_env()

    @pytest.mark.parametrize("raw", ["info", " Error ", "critical"])
    def test_log_level_case_insensitive(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("MDBENCH_LOG_LEVEL", raw)
        assert BenchConfig.from_env().log_level == raw.strip().upper()


class TestEnvBool:
    @pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
    def test_truthy(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("MDBENCH_TEST_FLAG", raw)
        assert env_bool("MDBENCH_TEST_FLAG", default=False) is True

    @pytest.mark.parametrize("raw", ["0", "false", "No", "off"])
    def test_falsy(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("MDBENCH_TEST_FLAG", raw)
        assert env_bool("MDBENCH_TEST_FLAG", default=True) is False

    def test_unset_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("MDBENCH_TEST_FLAG", raising=False)
        assert env_bool("MDBENCH_TEST_FLAG", default=True) is True

    def test_garbage_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MDBENCH_TEST_FLAG", "maybe")
        with pytest.raises(ValueError, match="Invalid boolean for MDBENCH_TEST_FLAG"):
            env_bool("MDBENCH_TEST_FLAG", default=False)


class TestSinkModeParse:
    def test_passthrough(self) -> None:
        assert SinkMode.parse(SinkMode.RESET) is SinkMode.RESET

    def test_case_insensitive(self) -> None:
        assert SinkMode.parse(" Accumulate ") is SinkMode.ACCUMULATE

    def test_invalid(self) -> None:
        with pytest.raises(ValueError, match="expected one of: accumulate, reset"):
            SinkMode.parse("never")
