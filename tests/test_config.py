"""Tests for configuration loading."""

import pytest

from ccscan.config import AnalysisConfig, load_config
from ccscan.exceptions import CcscanError, InvalidConfigError


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """No user or project config files, no CCSCAN_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in ("THRESHOLD", "OUTPUT", "SUMMARY", "VERBOSITY", "WORKERS", "FOLLOW_SYMLINKS"):
        monkeypatch.delenv(f"CCSCAN_{key}", raising=False)
    return tmp_path


class TestAnalysisConfig:
    def test_defaults(self):
        config = AnalysisConfig()
        assert config.threshold == 10
        assert config.output == "table"
        assert config.summary is False
        assert config.exclude_dirs == ("__pycache__", "venv")
        assert config.extensions == (".py",)
        assert config.workers is None

    @pytest.mark.parametrize(
        "kwargs, key",
        [
            ({"threshold": -1}, "threshold"),
            ({"threshold": True}, "threshold"),
            ({"threshold": "10"}, "threshold"),
            ({"output": "xml"}, "output"),
            ({"verbosity": "loud"}, "verbosity"),
            ({"workers": 0}, "workers"),
            ({"extensions": ()}, "extensions"),
            ({"extensions": ("py",)}, "extensions"),
            ({"extensions": (1,)}, "extensions"),
            ({"extensions": ".py"}, "extensions"),
            ({"exclude_dirs": "venv"}, "exclude_dirs"),
            ({"exclude_dirs": ("venv", None)}, "exclude_dirs"),
        ],
    )
    def test_invalid_values(self, kwargs, key):
        with pytest.raises(InvalidConfigError) as excinfo:
            AnalysisConfig(**kwargs)
        assert excinfo.value.key == key

    def test_zero_threshold_allowed(self):
        assert AnalysisConfig(threshold=0).threshold == 0


class TestLoadConfig:
    def test_defaults_without_sources(self):
        assert load_config() == AnalysisConfig()

    def test_overrides_applied(self):
        config = load_config(threshold=15, output="json", summary=True)
        assert (config.threshold, config.output, config.summary) == (15, "json", True)

    def test_none_overrides_ignored(self):
        """Unset CLI options fall through to lower-priority sources."""
        assert load_config(threshold=None, output=None).threshold == 10

    def test_verbose_and_quiet_fold_into_verbosity(self):
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=False).verbosity == "normal"

    def test_project_config_file(self, isolated_env):
        (isolated_env / "ccscan.toml").write_text(
            'threshold = 7\nexclude_dirs = ["build", "venv"]\n'
        )
        config = load_config()
        assert config.threshold == 7
        assert config.exclude_dirs == ("build", "venv")

    def test_ccscan_table(self, isolated_env):
        """Settings may sit under a [ccscan] table."""
        (isolated_env / "ccscan.toml").write_text("[ccscan]\nsummary = true\n")
        assert load_config().summary is True

    def test_priority_order(self, isolated_env, monkeypatch):
        """global < project < explicit file < env < overrides."""
        (isolated_env / "home" / ".ccscan.toml").write_text("threshold = 1\nworkers = 2\n")
        (isolated_env / "ccscan.toml").write_text("threshold = 2\noutput = 'json'\n")
        explicit = isolated_env / "explicit.toml"
        explicit.write_text("threshold = 3\n")

        assert load_config().threshold == 2
        assert load_config().workers == 2
        assert load_config(config_file=explicit).threshold == 3

        monkeypatch.setenv("CCSCAN_THRESHOLD", "4")
        assert load_config(config_file=explicit).threshold == 4
        assert load_config(config_file=explicit, threshold=5).threshold == 5
        assert load_config().output == "json"

    def test_env_vars(self, monkeypatch):
        monkeypatch.setenv("CCSCAN_SUMMARY", "yes")
        monkeypatch.setenv("CCSCAN_WORKERS", "3")
        monkeypatch.setenv("CCSCAN_OUTPUT", "json")
        config = load_config()
        assert config.summary is True
        assert config.workers == 3
        assert config.output == "json"

    def test_bad_env_value(self, monkeypatch):
        monkeypatch.setenv("CCSCAN_THRESHOLD", "ten")
        with pytest.raises(InvalidConfigError, match="threshold"):
            load_config()

    def test_bad_bool_env_value(self, monkeypatch):
        monkeypatch.setenv("CCSCAN_SUMMARY", "maybe")
        with pytest.raises(InvalidConfigError):
            load_config()

    def test_unknown_key(self, isolated_env):
        (isolated_env / "ccscan.toml").write_text("colour = 'red'\n")
        with pytest.raises(InvalidConfigError, match="colour"):
            load_config()

    def test_invalid_toml(self, isolated_env):
        (isolated_env / "ccscan.toml").write_text("threshold = \n")
        with pytest.raises(CcscanError, match="Invalid config file"):
            load_config()

    def test_missing_explicit_file(self, isolated_env):
        with pytest.raises(CcscanError, match="Config file not found"):
            load_config(config_file=isolated_env / "nope.toml")

    @pytest.mark.parametrize(
        "line, key",
        [
            ("extensions = [1]", "extensions"),
            ("exclude_dirs = 'venv'", "exclude_dirs"),
        ],
    )
    def test_malformed_name_lists(self, isolated_env, line, key):
        """Name lists from TOML must hold strings."""
        (isolated_env / "ccscan.toml").write_text(line + "\n")
        with pytest.raises(InvalidConfigError) as excinfo:
            load_config()
        assert excinfo.value.key == key
