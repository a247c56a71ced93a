"""
Tests for the run.py launcher utility commands.
"""
import pytest

import run


def test_list_envs(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env.production").write_text("ENVIRONMENT=production\n")
    (tmp_path / ".env.production.sample").write_text("")
    run.main(["--list-envs"])
    out = capsys.readouterr().out
    assert "  - production" in out
    assert "sample" not in out


def test_create_sample(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    run.main(["--create-sample", "testing"])
    assert (tmp_path / ".env.testing.sample").exists()
    assert "Sample configuration created" in capsys.readouterr().out


def test_validate_missing_env_exits(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc_info:
        run.main(["--validate-env", "staging"])
    assert exc_info.value.code == 1
