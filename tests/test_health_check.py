from unittest.mock import AsyncMock

from apps.ranked_leaderboard_bot import health_check


async def test_unhealthy_without_readiness_file(tmp_path, monkeypatch):
    monkeypatch.setattr(health_check, "READINESS_FILE", str(tmp_path / "missing"))
    check = AsyncMock(return_value=True)
    monkeypatch.setattr(health_check, "check_riot_api", check)

    assert await health_check.is_healthy() is False
    check.assert_not_awaited()


async def test_healthy_when_ready_and_riot_api_answers(tmp_path, monkeypatch):
    readiness_file = tmp_path / "ready"
    readiness_file.touch()
    monkeypatch.setattr(health_check, "READINESS_FILE", str(readiness_file))
    monkeypatch.setattr(health_check, "check_riot_api", AsyncMock(return_value=True))

    assert await health_check.is_healthy() is True


async def test_riot_check_fails_without_api_key(monkeypatch):
    monkeypatch.delenv("RIOT_API_KEY", raising=False)
    monkeypatch.setattr("libs.riot_api.config._riot_api_config", None)

    assert await health_check.check_riot_api() is False
