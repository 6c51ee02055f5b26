from pathlib import Path

import pytest
from pydantic import ValidationError

from scale_codec.conf import ScaleSettings, get_global_settings
from scale_codec.conf.get_settings import CONFIG_YAML_ENV_VAR, DEFAULT_SOURCE, get_settings_source
from scale_codec.conf.settings import DEFAULT_MAX_DEPTH
from scale_codec.utils.dict import deep_merge
from scale_codec.utils.yaml import dict_from_extended_yaml


def _write(path: Path, contents: str) -> Path:
    path.write_text(contents)
    return path


def test_defaults() -> None:
    settings = ScaleSettings()
    assert settings.MAX_OUTPUT_BYTES is None
    assert settings.ALLOW_TRAILING_BYTES is False
    assert settings.MAX_COLLECTION_LENGTH is None
    assert settings.MAX_DEPTH == DEFAULT_MAX_DEPTH


def test_settings_are_frozen() -> None:
    settings = ScaleSettings()
    with pytest.raises(ValidationError):
        settings.ALLOW_TRAILING_BYTES = True  # type: ignore[misc]


@pytest.mark.parametrize('values', [
    {'MAX_OUTPUT_BYTES': -1},
    {'MAX_COLLECTION_LENGTH': 'a lot'},
    {'MAX_DEPTH': -1},
    {'MAX_DEPTH': None},
    {'UNKNOWN_SETTING': 1},
])
def test_invalid_settings(values: dict) -> None:
    with pytest.raises(ValidationError):
        ScaleSettings(**values)


def test_from_yaml(tmp_path: Path) -> None:
    filepath = _write(tmp_path / 'scale.yml', 'MAX_OUTPUT_BYTES: 1024\nALLOW_TRAILING_BYTES: true\n')
    assert ScaleSettings.from_yaml(filepath=filepath) == ScaleSettings(MAX_OUTPUT_BYTES=1024, ALLOW_TRAILING_BYTES=True)


def test_max_depth_from_yaml(tmp_path: Path) -> None:
    filepath = _write(tmp_path / 'scale.yml', 'MAX_DEPTH: 8\n')
    assert ScaleSettings.from_yaml(filepath=filepath).MAX_DEPTH == 8


def test_from_empty_yaml(tmp_path: Path) -> None:
    filepath = _write(tmp_path / 'empty.yml', '')
    assert ScaleSettings.from_yaml(filepath=filepath) == ScaleSettings()


def test_from_yaml_not_a_dict(tmp_path: Path) -> None:
    filepath = _write(tmp_path / 'list.yml', '- 1\n- 2\n')
    with pytest.raises(ValueError, match='cannot be parsed as a dictionary'):
        ScaleSettings.from_yaml(filepath=filepath)


def test_from_missing_yaml(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match='is not a file'):
        ScaleSettings.from_yaml(filepath=tmp_path / 'missing.yml')


def test_extended_yaml(tmp_path: Path) -> None:
    (tmp_path / 'base').mkdir()
    _write(tmp_path / 'base' / 'base.yml', 'MAX_OUTPUT_BYTES: 10\nMAX_COLLECTION_LENGTH: 5\n')
    filepath = _write(tmp_path / 'child.yml', 'extends: base/base.yml\nMAX_COLLECTION_LENGTH: 7\n')
    assert dict_from_extended_yaml(filepath=filepath) == {'MAX_OUTPUT_BYTES': 10, 'MAX_COLLECTION_LENGTH': 7}
    assert ScaleSettings.from_yaml(filepath=filepath) == ScaleSettings(MAX_OUTPUT_BYTES=10, MAX_COLLECTION_LENGTH=7)


def test_recursive_extended_yaml(tmp_path: Path) -> None:
    filepath = _write(tmp_path / 'self.yml', 'extends: self.yml\n')
    with pytest.raises(ValueError, match='recursive'):
        dict_from_extended_yaml(filepath=filepath)


def test_deep_merge() -> None:
    base = {'a': 1, 'b': {'c': 2, 'd': 3}}
    result = deep_merge(base, {'b': {'c': 4}, 'e': 5})
    assert result == {'a': 1, 'b': {'c': 4, 'd': 3}, 'e': 5}
    assert base == {'a': 1, 'b': {'c': 2, 'd': 3}}


def test_global_settings_defaults() -> None:
    settings = get_global_settings()
    assert settings == ScaleSettings()
    assert get_settings_source() == DEFAULT_SOURCE
    assert get_global_settings() is settings


def test_global_settings_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    filepath = _write(tmp_path / 'scale.yml', 'MAX_COLLECTION_LENGTH: 3\n')
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(filepath))
    assert get_global_settings().MAX_COLLECTION_LENGTH == 3
    assert get_settings_source() == str(filepath)


def test_global_settings_source_cannot_change(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    get_global_settings()
    filepath = _write(tmp_path / 'scale.yml', 'MAX_COLLECTION_LENGTH: 3\n')
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(filepath))
    with pytest.raises(Exception, match='different file'):
        get_global_settings()
