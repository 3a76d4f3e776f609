"""Tests for configuration loading"""

from pathlib import Path

import pytest

from magento_deploy.api.exceptions import ConfigError
from magento_deploy.constants import (
    DEFAULT_IGNORED_TYPES,
    ENV_DEPLOY_STRATEGY,
    ENV_ROOT_DIR,
    PROJECT_CONFIG_FILE,
)
from magento_deploy.models.config import DeployConfig, find_config_file


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    monkeypatch.delenv(ENV_ROOT_DIR, raising=False)
    monkeypatch.delenv(ENV_DEPLOY_STRATEGY, raising=False)


def write_config(directory: Path, content: str) -> Path:
    path = directory / PROJECT_CONFIG_FILE
    path.write_text(content)
    return path


def test_load_resolves_paths_against_config_dir(tmp_path) -> None:
    path = write_config(tmp_path, "root_dir: htdocs\nvendor_dir: lib/vendor\n")

    config = DeployConfig.load(path)

    assert config.root_dir == tmp_path.resolve() / "htdocs"
    assert config.vendor_dir == tmp_path.resolve() / "lib" / "vendor"
    assert config.installed_file == tmp_path.resolve() / "lib" / "vendor" / "composer" / "installed.json"


def test_defaults(tmp_path) -> None:
    config = DeployConfig.load(write_config(tmp_path, "root_dir: htdocs\n"))

    assert config.deploy_strategy == "symlink"
    assert config.force is False
    assert config.strategy_overrides == {}
    assert config.ignored_types == list(DEFAULT_IGNORED_TYPES)


def test_strategy_for_uses_overrides(tmp_path) -> None:
    config = DeployConfig.load(write_config(tmp_path, """
root_dir: htdocs
deploy_strategy: copy
strategy_overrides:
  acme/foo: symlink
"""))

    assert config.strategy_for("acme/foo") == "symlink"
    assert config.strategy_for("acme/bar") == "copy"


def test_environment_overrides_file(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv(ENV_DEPLOY_STRATEGY, "copy")
    monkeypatch.setenv(ENV_ROOT_DIR, str(tmp_path / "public"))

    config = DeployConfig.load(write_config(tmp_path, "root_dir: htdocs\n"))

    assert config.deploy_strategy == "copy"
    assert config.root_dir == tmp_path / "public"


def test_explicit_overrides_win(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv(ENV_DEPLOY_STRATEGY, "copy")

    config = DeployConfig.load(
        write_config(tmp_path, "root_dir: htdocs\n"),
        overrides={'deploy_strategy': 'none', 'force': None},
    )

    assert config.deploy_strategy == "none"
    assert config.force is False


def test_missing_root_dir_raises(tmp_path) -> None:
    with pytest.raises(ConfigError):
        DeployConfig.load(write_config(tmp_path, "vendor_dir: vendor\n"))


def test_invalid_yaml_raises(tmp_path) -> None:
    with pytest.raises(ConfigError):
        DeployConfig.load(write_config(tmp_path, "root_dir: [unclosed\n"))


def test_non_mapping_raises(tmp_path) -> None:
    with pytest.raises(ConfigError):
        DeployConfig.load(write_config(tmp_path, "- root_dir\n"))


def test_missing_config_file_raises(tmp_path) -> None:
    with pytest.raises(ConfigError):
        DeployConfig.load(tmp_path / "nope.yaml")


def test_find_config_file_walks_up(tmp_path) -> None:
    path = write_config(tmp_path, "root_dir: htdocs\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert find_config_file(nested) == path.resolve()
