"""Unit tests for configuration loading, overrides, and validation."""

import pytest

from zone_analysis.config import Config, ConfigError, FastPathConfig


def write_config(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestDefaults:
    def test_defaults(self):
        config = Config()
        assert config.path is None
        assert config.parallel == 2
        assert config.verbose is False
        assert config.progress is False
        assert config.patterns == ["*.txt.gz"]
        assert config.extra_zones == ["com.zone.gz", "org.zone.gz"]
        assert config.stats_file == "stats"
        assert config.fast_path == FastPathConfig()

    def test_fast_path_matches_file_name_fragment(self):
        fast = FastPathConfig()
        assert fast.matches("com.zone.gz")
        assert not fast.matches("org.zone.gz")
        assert not fast.matches("example.txt.gz")


class TestLoad:
    def test_values_from_file(self, tmp_path):
        path = write_config(
            tmp_path,
            "directory: /data/zones\n"
            "parallel: 8\n"
            "progress: true\n"
            "patterns: ['*.zone']\n"
            "fast_path:\n"
            "  zones: [net.zone.gz]\n"
            "  types: [NS]\n"
            "  suffix: .net\n"
            "  chunk_lines: 1000\n",
        )
        config = Config(path)
        assert config.path == path
        assert config.directory == "/data/zones"
        assert config.parallel == 8
        assert config.progress is True
        assert config.patterns == ["*.zone"]
        assert config.extra_zones == ["com.zone.gz", "org.zone.gz"]
        assert config.fast_path.zones == ["net.zone.gz"]
        assert config.fast_path.types == ["ns"]
        assert config.fast_path.suffix == ".net"
        assert config.fast_path.origin == "com."
        assert config.fast_path.chunk_lines == 1000

    def test_empty_file_keeps_defaults(self, tmp_path):
        config = Config(write_config(tmp_path, ""))
        assert config.parallel == 2

    def test_single_pattern_string(self, tmp_path):
        config = Config(write_config(tmp_path, "patterns: '*.gz'\n"))
        assert config.patterns == ["*.gz"]

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(ConfigError, match="YAML parsing error"):
            Config(write_config(tmp_path, "parallel: [1,\n"))

    def test_non_mapping_top_level(self, tmp_path):
        with pytest.raises(ConfigError):
            Config(write_config(tmp_path, "- a\n- b\n"))

    def test_bad_parallel(self, tmp_path):
        with pytest.raises(ConfigError):
            Config(write_config(tmp_path, "parallel: many\n"))

    def test_patterns_must_be_a_list(self, tmp_path):
        with pytest.raises(ConfigError, match="patterns"):
            Config(write_config(tmp_path, "patterns: {a: 1}\n"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "absent.yaml"))


class TestOverrideAndValidate:
    def test_none_values_are_ignored(self):
        config = Config()
        config.override(directory="/tmp", parallel=None, verbose=True)
        assert config.directory == "/tmp"
        assert config.parallel == 2
        assert config.verbose is True

    def test_unknown_setting(self):
        with pytest.raises(ConfigError):
            Config().override(colour="blue")

    def test_method_names_are_not_settings(self):
        config = Config()
        with pytest.raises(ConfigError):
            config.override(load=1)
        with pytest.raises(ConfigError):
            config.override(fast_path={})
        assert callable(config.load)
        assert config.fast_path == FastPathConfig()

    def test_directory_required(self):
        with pytest.raises(ConfigError, match="must pass directory"):
            Config().validate()

    def test_directory_must_exist(self, tmp_path):
        config = Config()
        config.override(directory=str(tmp_path / "nope"))
        with pytest.raises(ConfigError):
            config.validate()

    def test_parallel_must_be_positive(self, tmp_path):
        config = Config()
        config.override(directory=str(tmp_path), parallel=0)
        with pytest.raises(ConfigError, match="parallel"):
            config.validate()

    def test_valid(self, tmp_path):
        config = Config()
        config.override(directory=str(tmp_path))
        config.validate()
