from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from apps.ranked_leaderboard_bot.common.constants import LEADERBOARD_TITLE
from apps.ranked_leaderboard_bot.jobs.leaderboard_refresh.posting import (
    DiscordChannelSurface,
    build_leaderboard_page_embed,
    resolve_leaderboard_channel,
)
from apps.ranked_leaderboard_bot.leaderboard import LeaderboardPage, PagePublishError, StalePageError

UPDATED_AT = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def http_error(error_cls, status, reason):
    return error_cls(MagicMock(status=status, reason=reason), reason)


def make_page(number=1, total=2, lines=("1. Faker : CHALLENGER - 1500 LP",)):
    return LeaderboardPage(lines=tuple(lines), number=number, total=total)


def make_channel():
    channel = MagicMock()
    channel.fetch_message = AsyncMock()
    channel.send = AsyncMock()
    return channel


def make_message(message_id):
    message = MagicMock()
    message.id = message_id
    message.edit = AsyncMock()
    message.delete = AsyncMock()
    return message


def test_page_embed_layout():
    embed = build_leaderboard_page_embed(make_page(number=2, total=3), UPDATED_AT)

    assert embed.title == LEADERBOARD_TITLE
    assert embed.description == "1. Faker : CHALLENGER - 1500 LP"
    assert embed.footer.text.endswith("Page 2/3")
    assert embed.timestamp == UPDATED_AT


def test_page_embed_clamps_oversized_body():
    embed = build_leaderboard_page_embed(make_page(lines=["x" * 3000, "y" * 3000]), UPDATED_AT)

    assert len(embed.description) == 4096
    assert embed.description.endswith("...")


async def test_update_page_edits_existing_message():
    channel = make_channel()
    message = make_message(10)
    message.edit.return_value = make_message(10)
    channel.fetch_message.return_value = message
    surface = DiscordChannelSurface(channel, UPDATED_AT)

    assert await surface.update_page(10, make_page()) == 10

    channel.fetch_message.assert_awaited_once_with(10)
    kwargs = message.edit.await_args.kwargs
    assert kwargs["content"] is None
    assert kwargs["embed"].footer.text.endswith("Page 1/2")


async def test_update_page_of_deleted_message_is_stale():
    channel = make_channel()
    channel.fetch_message.side_effect = http_error(discord.NotFound, 404, "Unknown Message")
    surface = DiscordChannelSurface(channel, UPDATED_AT)

    with pytest.raises(StalePageError) as exc_info:
        await surface.update_page(10, make_page())

    assert exc_info.value.message_id == 10


async def test_update_page_rejected_edit_is_publish_error():
    channel = make_channel()
    message = make_message(10)
    message.edit.side_effect = http_error(discord.Forbidden, 403, "Missing Access")
    channel.fetch_message.return_value = message
    surface = DiscordChannelSurface(channel, UPDATED_AT)

    with pytest.raises(PagePublishError):
        await surface.update_page(10, make_page())


async def test_create_page_returns_new_message_id():
    channel = make_channel()
    channel.send.return_value = make_message(77)
    surface = DiscordChannelSurface(channel, UPDATED_AT)

    assert await surface.create_page(make_page()) == 77
    assert channel.send.await_args.kwargs["embed"].description == "1. Faker : CHALLENGER - 1500 LP"


async def test_create_page_failure_is_publish_error():
    channel = make_channel()
    channel.send.side_effect = http_error(discord.HTTPException, 500, "Internal Server Error")
    surface = DiscordChannelSurface(channel, UPDATED_AT)

    with pytest.raises(PagePublishError):
        await surface.create_page(make_page())


async def test_delete_page():
    channel = make_channel()
    message = make_message(10)
    channel.fetch_message.return_value = message
    surface = DiscordChannelSurface(channel, UPDATED_AT)

    await surface.delete_page(10)

    message.delete.assert_awaited_once()


async def test_delete_page_already_gone_is_stale():
    channel = make_channel()
    message = make_message(10)
    message.delete.side_effect = http_error(discord.NotFound, 404, "Unknown Message")
    channel.fetch_message.return_value = message
    surface = DiscordChannelSurface(channel, UPDATED_AT)

    with pytest.raises(StalePageError):
        await surface.delete_page(10)


async def test_resolve_channel_without_id():
    bot = MagicMock()

    assert await resolve_leaderboard_channel(bot, None) is None
    bot.get_channel.assert_not_called()


async def test_resolve_channel_from_cache():
    bot = MagicMock()
    channel = make_channel()
    bot.get_channel.return_value = channel

    assert await resolve_leaderboard_channel(bot, 42) is channel


async def test_resolve_channel_falls_back_to_fetch():
    bot = MagicMock()
    channel = make_channel()
    bot.get_channel.return_value = None
    bot.fetch_channel = AsyncMock(return_value=channel)

    assert await resolve_leaderboard_channel(bot, 42) is channel
    bot.fetch_channel.assert_awaited_once_with(42)


async def test_resolve_unreachable_channel_returns_none():
    bot = MagicMock()
    bot.get_channel.return_value = None
    bot.fetch_channel = AsyncMock(side_effect=http_error(discord.Forbidden, 403, "Missing Access"))

    assert await resolve_leaderboard_channel(bot, 42) is None
