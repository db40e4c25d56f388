import pytest

from katamachine.config import Config, ConfigError, load


def test_load_reads_dsa_list(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("DSA:\n  - Queue\n  - Stack\n")
    assert load(path) == Config(dsa=["Queue", "Stack"])


def test_load_accepts_string_path(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("DSA: [Trie]\n")
    assert load(str(path)).dsa == ["Trie"]


def test_empty_file_gives_empty_list(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load(path).dsa == []


def test_missing_key_gives_empty_list(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("other: 1\n")
    assert load(path).dsa == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError, match="^read config"):
        load(tmp_path / "absent.yaml")


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("DSA: [\n")
    with pytest.raises(ConfigError, match="^parse config"):
        load(path)


def test_non_list_dsa_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("DSA:\n  key: value\n")
    with pytest.raises(ConfigError, match="^parse config"):
        load(path)