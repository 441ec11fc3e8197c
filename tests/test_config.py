from pathlib import Path

import pytest
from ruwordle.config import load_config, resolve_database, set_database
from ruwordle.errors import ConfigurationMissing, RuWordleError


@pytest.fixture
def cfg_file(tmp_path: Path, monkeypatch):
    p = tmp_path / "conf" / "config.yaml"
    monkeypatch.setenv("RUWORDLE_CONFIG", str(p))
    return p


def test_missing_config_raises(cfg_file):
    assert load_config() == {}
    with pytest.raises(ConfigurationMissing):
        resolve_database()


def test_set_then_resolve(cfg_file, tmp_path: Path):
    db = tmp_path / "words.db"
    set_database(str(db))
    assert cfg_file.exists()
    assert resolve_database() == str(db.resolve())


def test_override_wins(cfg_file):
    set_database("/somewhere/words.db")
    assert resolve_database("other.db") == "other.db"


def test_malformed_config(cfg_file):
    cfg_file.parent.mkdir(parents=True)
    cfg_file.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(RuWordleError):
        load_config()
