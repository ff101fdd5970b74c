"""Tests for shader_swatch.core.env: .env loading, walk-up logic and settings."""

import os
from pathlib import Path

import pytest
from shader_swatch.core.env import (
    DEFAULT_SWATCH_SIZE,
    _find_dotenv,
    _parse_dotenv,
    load_env,
    load_settings,
    resolve_policy,
)


class TestParseDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('SHADER_SWATCH_POLICY=strict\n')
        assert _parse_dotenv(f) == {'SHADER_SWATCH_POLICY': 'strict'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('A="two words"\nB=\'single\'\n')
        assert _parse_dotenv(f) == {'A': 'two words', 'B': 'single'}

    def test_comments_and_blanks_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nFOO=bar\nNOEQUALS\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}


class TestFindDotenv:
    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'shaders'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(subdir) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (repo / '.git').mkdir()
        subdir = repo / 'src'
        subdir.mkdir()
        assert _find_dotenv(subdir) is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (repo / '.git').write_text('gitdir: ../somewhere\n')
        assert _find_dotenv(repo) is None


class TestLoadEnv:
    def test_sets_missing_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.env').write_text('SHADER_SWATCH_POLICY=strict\n')
        monkeypatch.chdir(tmp_path)
        assert load_env() == tmp_path / '.env'
        assert os.environ.get('SHADER_SWATCH_POLICY') == 'strict'

    def test_does_not_overwrite_existing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('SHADER_SWATCH_POLICY', 'permissive')
        (tmp_path / '.env').write_text('SHADER_SWATCH_POLICY=strict\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('SHADER_SWATCH_POLICY') == 'permissive'

    def test_explicit_env_file(self, tmp_path: Path) -> None:
        dotenv = tmp_path / 'custom.env'
        dotenv.write_text('SHADER_SWATCH_SWATCH_SIZE=16\n')
        assert load_env(env_file=str(dotenv)) == dotenv
        assert os.environ.get('SHADER_SWATCH_SWATCH_SIZE') == '16'

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'nope.env')) is None

    def test_returns_none_when_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestSettings:
    def test_defaults(self) -> None:
        settings = load_settings()
        assert settings.policy == 'permissive'
        assert settings.swatch_size == DEFAULT_SWATCH_SIZE

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('SHADER_SWATCH_POLICY', ' Strict ')
        monkeypatch.setenv('SHADER_SWATCH_SWATCH_SIZE', '20')
        settings = load_settings()
        assert settings.policy == 'strict'
        assert settings.swatch_size == 20

    def test_explicit_policy_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('SHADER_SWATCH_POLICY', 'strict')
        assert load_settings('permissive').policy == 'permissive'

    def test_bad_size_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('SHADER_SWATCH_SWATCH_SIZE', 'big')
        assert load_settings().swatch_size == DEFAULT_SWATCH_SIZE

    def test_bad_policy_raises(self) -> None:
        with pytest.raises(ValueError):
            resolve_policy('sometimes')
