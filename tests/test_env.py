"""Tests for webcolor.core.env — .env loading, walk-up logic and Settings."""

import logging
import os
from pathlib import Path

import pytest
from webcolor.core.env import Settings, find_dotenv, load_env, read_dotenv


class TestReadDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('WEBCOLOR_FORMAT=hex\n')
        assert read_dotenv(f) == {'WEBCOLOR_FORMAT': 'hex'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('A="7"\nB=\'hex\'\n')
        assert read_dotenv(f) == {'A': '7', 'B': 'hex'}

    def test_comments_blanks_and_junk_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nNOEQUALS\n=novalue\nA=1\n')
        assert read_dotenv(f) == {'A': '1'}


class TestFindDotenv:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert find_dotenv(tmp_path) == dotenv

    def test_finds_in_parent(self, tmp_path: Path) -> None:
        (tmp_path / '.git').mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        sub = tmp_path / 'a' / 'b'
        sub.mkdir(parents=True)
        assert find_dotenv(sub) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        (tmp_path / '.env').write_text('X=1\n')
        repo = tmp_path / 'repo'
        (repo / '.git').mkdir(parents=True)
        sub = repo / 'src'
        sub.mkdir()
        assert find_dotenv(sub) is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        (tmp_path / '.env').write_text('X=1\n')
        repo = tmp_path / 'repo'
        repo.mkdir()
        (repo / '.git').write_text('gitdir: ../elsewhere\n')
        assert find_dotenv(repo) is None


class TestLoadEnv:
    def test_sets_missing_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('TEST_WEBCOLOR_KEY', '')
        monkeypatch.delenv('TEST_WEBCOLOR_KEY')
        (tmp_path / '.git').mkdir()
        (tmp_path / '.env').write_text('TEST_WEBCOLOR_KEY=from-file\n')
        monkeypatch.chdir(tmp_path)
        assert load_env() == tmp_path / '.env'
        assert os.environ['TEST_WEBCOLOR_KEY'] == 'from-file'

    def test_does_not_overwrite_existing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('TEST_WEBCOLOR_KEY2', 'original')
        (tmp_path / '.git').mkdir()
        (tmp_path / '.env').write_text('TEST_WEBCOLOR_KEY2=from-file\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ['TEST_WEBCOLOR_KEY2'] == 'original'

    def test_explicit_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('TEST_WEBCOLOR_KEY3', '')
        monkeypatch.delenv('TEST_WEBCOLOR_KEY3')
        custom = tmp_path / 'custom.env'
        custom.write_text('TEST_WEBCOLOR_KEY3=custom\n')
        assert load_env(env_file=str(custom)) == custom
        assert os.environ['TEST_WEBCOLOR_KEY3'] == 'custom'

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'nope.env')) is None

    def test_none_when_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestSettings:
    def test_defaults(self) -> None:
        assert Settings.from_env({}) == Settings(min_ratio=4.5, output_format='rgb')

    def test_reads_values(self) -> None:
        s = Settings.from_env({'WEBCOLOR_MIN_RATIO': '7', 'WEBCOLOR_FORMAT': ' HEX '})
        assert s == Settings(min_ratio=7.0, output_format='hex')

    @pytest.mark.parametrize('raw', ['abc', '0.5', '22'])
    def test_bad_ratio_ignored(self, raw: str, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger='webcolor.core.env'):
            assert Settings.from_env({'WEBCOLOR_MIN_RATIO': raw}).min_ratio == 4.5
        assert 'WEBCOLOR_MIN_RATIO' in caplog.text

    def test_bad_format_ignored(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger='webcolor.core.env'):
            assert Settings.from_env({'WEBCOLOR_FORMAT': 'hsl'}).output_format == 'rgb'
        assert 'WEBCOLOR_FORMAT' in caplog.text

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('WEBCOLOR_MIN_RATIO', '3')
        monkeypatch.delenv('WEBCOLOR_FORMAT', raising=False)
        assert Settings.from_env().min_ratio == 3.0
