"""settings.yaml 読み込みのテスト。"""

from __future__ import annotations

import pytest

from html_grep.config import DEFAULT_FETCH_TIMEOUT, default_settings, load_settings
from html_grep.errors import ConfigError


@pytest.mark.light
def test_default_settings():
    settings = default_settings()
    assert settings.fetch_timeout == DEFAULT_FETCH_TIMEOUT
    assert settings.user_agent is None
    assert settings.file_encoding == "utf-8"
    assert settings.parser == "html5lib"


@pytest.mark.light
def test_load_settings_reads_values(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "fetch_timeout: 5\nuser_agent: html-grep/1.0\nfile_encoding: cp932\nparser: lxml\n",
        encoding="utf-8",
    )
    settings = load_settings(str(path))
    assert settings.fetch_timeout == 5.0
    assert settings.user_agent == "html-grep/1.0"
    assert settings.file_encoding == "cp932"
    assert settings.parser == "lxml"


@pytest.mark.light
def test_load_settings_null_timeout_disables_timeout(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("fetch_timeout: null\n", encoding="utf-8")
    assert load_settings(str(path)).fetch_timeout is None


@pytest.mark.light
def test_load_settings_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(str(path)) == default_settings()


@pytest.mark.light
@pytest.mark.parametrize(
    "content",
    [
        "parser: regex\n",
        "fetch_timeout: soon\n",
        "fetch_timeout: 0\n",
        "- a\n- b\n",
        "parser: [unclosed\n",
    ],
)
def test_load_settings_invalid_values_raise_config_error(tmp_path, content):
    path = tmp_path / "settings.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError) as excinfo:
        load_settings(str(path))
    assert excinfo.value.kind == "config"


@pytest.mark.light
def test_load_settings_missing_file_raises_config_error(tmp_path):
    with pytest.raises(ConfigError):
        load_settings(str(tmp_path / "missing.yaml"))
