import os

import pytest

from Observable.Utility.env import load_env_file


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch restores the variables after load_env_file writes them
    for key in ("OBS_A", "OBS_B"):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch


def test_load_env_file_parses_lines(tmp_path, clean_env):
    env = tmp_path / ".env"
    env.write_text("# comment\nexport OBS_A='one'\nOBS_B = \"two\"\nnot a pair\n", encoding="utf-8")
    applied = load_env_file(str(env))
    assert applied == {"OBS_A": "one", "OBS_B": "two"}
    assert os.environ["OBS_A"] == "one"


def test_load_env_file_keeps_existing(tmp_path, clean_env):
    clean_env.setenv("OBS_A", "kept")
    env = tmp_path / ".env"
    env.write_text("OBS_A=new\n", encoding="utf-8")
    assert load_env_file(str(env)) == {}
    assert os.environ["OBS_A"] == "kept"
    load_env_file(str(env), override=True)
    assert os.environ["OBS_A"] == "new"


def test_load_env_file_missing(tmp_path):
    assert load_env_file(str(tmp_path / "absent.env")) == {}
