"""Tests for hierarchical .env loading."""

import os
from pathlib import Path

import pytest

from animal_spotter.config.env_loader import EnvFileLoader, load_env_with_hierarchy

ENV_KEY = "ANIMAL_SPOTTER_USERNAME"


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A git project below a fake home directory."""
    home = tmp_path / "home"
    project_dir = home / "work" / "project"
    (project_dir / ".git").mkdir(parents=True)
    monkeypatch.setattr(Path, "home", lambda: home)
    return project_dir


@pytest.fixture
def clean_env():
    had_value = ENV_KEY in os.environ
    previous = os.environ.pop(ENV_KEY, None)
    yield
    os.environ.pop(ENV_KEY, None)
    if had_value:
        os.environ[ENV_KEY] = previous


class TestEnvFileLoader:
    """Test cases for EnvFileLoader."""

    def test_search_paths_stop_at_git_root(self, project: Path) -> None:
        loader = EnvFileLoader(project)
        home = Path.home()

        assert loader.get_search_paths() == [
            project / ".animal-spotter" / ".env",
            project / ".env",
            home / ".animal-spotter" / ".env",
            home / ".env",
        ]

    def test_search_walks_up_without_git(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        home = tmp_path / "home"
        nested = home / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.setattr(Path, "home", lambda: home)

        paths = EnvFileLoader(nested).get_search_paths()

        assert home / "a" / ".env" in paths
        assert paths.index(nested / ".env") < paths.index(home / "a" / ".env")

    def test_no_file_found(self, project: Path, clean_env) -> None:
        loader = EnvFileLoader(project)

        assert loader.load_env_file() is None
        assert loader.get_loaded_file() is None

    def test_loads_project_file(self, project: Path, clean_env) -> None:
        env_file = project / ".env"
        env_file.write_text(f"{ENV_KEY}=alice\n", encoding="utf-8")

        loader = EnvFileLoader(project)

        assert loader.load_env_file() == env_file
        assert os.environ[ENV_KEY] == "alice"
        assert loader.get_loaded_vars() == {ENV_KEY: "alice"}

    def test_prefers_config_dir_file(self, project: Path, clean_env) -> None:
        (project / ".env").write_text(f"{ENV_KEY}=plain\n", encoding="utf-8")
        config_dir = project / ".animal-spotter"
        config_dir.mkdir()
        (config_dir / ".env").write_text(f"{ENV_KEY}=preferred\n", encoding="utf-8")

        assert load_env_with_hierarchy(project) == config_dir / ".env"
        assert os.environ[ENV_KEY] == "preferred"

    def test_falls_back_to_home(self, project: Path, clean_env) -> None:
        home_env = Path.home() / ".env"
        home_env.write_text(f"{ENV_KEY}=from-home\n", encoding="utf-8")

        assert EnvFileLoader(project).load_env_file() == home_env

    def test_does_not_override_environment(self, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_KEY, "bob")
        (project / ".env").write_text(f"{ENV_KEY}=alice\n", encoding="utf-8")

        EnvFileLoader(project).load_env_file()

        assert os.environ[ENV_KEY] == "bob"

    def test_create_example_env_file(self, project: Path) -> None:
        path = EnvFileLoader(project).create_example_env_file()

        assert path == project / ".animal-spotter" / ".env"
        content = path.read_text(encoding="utf-8")
        assert "ANIMAL_SPOTTER_USERNAME" in content
        assert "ANIMAL_SPOTTER_PASSWORD" in content

    def test_create_example_env_file_user_scope(self, project: Path) -> None:
        path = EnvFileLoader(project).create_example_env_file(scope="user")

        assert path == Path.home() / ".animal-spotter" / ".env"
