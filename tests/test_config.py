import pytest

from othello import config


def test_get_int_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OTHELLO_TEST_VALUE", raising=False)
    assert config.get_int("OTHELLO_TEST_VALUE", 42) == 42


def test_get_int_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OTHELLO_TEST_VALUE", "50")
    assert config.get_int("OTHELLO_TEST_VALUE", 42) == 50


def test_get_int_invalid(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OTHELLO_TEST_VALUE", "big")

    with pytest.raises(ValueError):
        config.get_int("OTHELLO_TEST_VALUE", 42)


def test_defaults() -> None:
    assert config.SQUARE_SIZE > 0
    assert config.FRAME_RATE > 0
    assert config.LOG_LEVEL == config.LOG_LEVEL.upper()
