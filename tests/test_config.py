import pytest

from outline_autolist.config import AutolistConfig, env_flag


def test_defaults() -> None:
    config = AutolistConfig()

    assert config.enable_delete is True
    assert config.links_fall_through is True


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUTLINE_AUTOLIST_ENABLE_DELETE", "off")
    monkeypatch.setenv("OUTLINE_AUTOLIST_LINKS_FALL_THROUGH", "YES")

    config = AutolistConfig.from_env()

    assert config.enable_delete is False
    assert config.links_fall_through is True


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("true", True), ("On", True), ("0", False), ("nope", False)],
)
def test_env_flag(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("OUTLINE_AUTOLIST_SAMPLE", raw)

    assert env_flag("SAMPLE", not expected) is expected


def test_blank_env_flag_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUTLINE_AUTOLIST_SAMPLE", "  ")

    assert env_flag("SAMPLE", True) is True
