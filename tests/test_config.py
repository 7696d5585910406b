import pytest

from tp0net.config import ConfigError, load_config


def test_load_values(tmp_path):
    path = tmp_path / "cliente.config"
    path.write_text("IP=127.0.0.1\nPUERTO=4444\nCLAVE=hola\n", encoding="utf-8")
    assert load_config(path) == {"IP": "127.0.0.1", "PUERTO": "4444", "CLAVE": "hola"}


def test_comments_and_blank_lines_skipped(tmp_path):
    path = tmp_path / "c.config"
    path.write_text("# comment\n\nA=1\n   \n#B=2\n", encoding="utf-8")
    assert load_config(path) == {"A": "1"}


def test_value_may_contain_equals(tmp_path):
    path = tmp_path / "c.config"
    path.write_text("A=b=c\n", encoding="utf-8")
    assert load_config(path)["A"] == "b=c"


def test_later_key_wins(tmp_path):
    path = tmp_path / "c.config"
    path.write_text("A=first\nA=second\n", encoding="utf-8")
    assert load_config(path) == {"A": "second"}


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.config")


def test_line_without_separator(tmp_path):
    path = tmp_path / "c.config"
    path.write_text("A=1\nbroken\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)