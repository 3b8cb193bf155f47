import pytest
from create_driver_hash import driver_env_line, main
from app.core.security import verify_password


def test_env_line_holds_a_verifiable_hash():
    line = driver_env_line("teranga-2025")
    assert line.startswith("DRIVER_PASSWORD_HASH='$argon2")
    hashed = line.split("=", 1)[1].strip("'")
    assert verify_password("teranga-2025", hashed)
    assert not verify_password("wrong", hashed)


def test_short_password_is_refused(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["create_driver_hash.py", "short"])
    with pytest.raises(SystemExit) as exc_info:
        main()
    assert exc_info.value.code == 1
    assert "at least 8 characters" in capsys.readouterr().out
