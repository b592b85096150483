import asyncio
from types import SimpleNamespace

import discord

from cogs.Voice.MusicCog import MusicCog
from tunedeck.core.config import DisplayConfig
from tunedeck.voice.models import PlayerStatus


class FakeContext:
    def __init__(self, guild_id=1):
        self.guild = SimpleNamespace(id=guild_id)
        self.sent = []

    async def send(self, content=None, **kwargs):
        self.sent.append((content, kwargs))


def make_cog():
    return MusicCog(bot=None, config=DisplayConfig())


def fill_state(cog, make_track, queue_size):
    state = cog.get_guild_state(1)
    state.now_playing = make_track()
    state.queue.extend(make_track(title=f"Track {i + 1}") for i in range(queue_size))
    state.status = PlayerStatus.PLAYING
    return state


def test_guild_state_is_cached():
    cog = make_cog()
    assert cog.get_guild_state(1) is cog.get_guild_state(1)
    assert cog.get_guild_state(1) is not cog.get_guild_state(2)


def test_queue_embed(make_track):
    cog = make_cog()
    fill_state(cog, make_track, 12)
    embed = asyncio.run(cog.build_queue_embed(1, 2))
    assert isinstance(embed, discord.Embed)
    assert embed.fields[2].value == "2 out of 2"


def test_now_playing_command(make_track):
    cog = make_cog()
    fill_state(cog, make_track, 0)
    ctx = FakeContext()
    asyncio.run(cog.now_playing.callback(cog, ctx))
    content, kwargs = ctx.sent[0]
    assert content is None
    assert kwargs["embed"].title == "Now Playing"


def test_now_playing_command_without_track():
    cog = make_cog()
    ctx = FakeContext()
    asyncio.run(cog.now_playing.callback(cog, ctx))
    assert ctx.sent == [("Nothing is playing right now.", {})]


def test_queue_command_without_track():
    cog = make_cog()
    ctx = FakeContext()
    asyncio.run(cog.queue.callback(cog, ctx))
    assert ctx.sent == [("The queue is empty.", {})]


def test_queue_command_page_out_of_range(make_track):
    cog = make_cog()
    fill_state(cog, make_track, 3)
    ctx = FakeContext()
    asyncio.run(cog.queue.callback(cog, ctx, 5))
    assert ctx.sent == [("The queue isn't that big. Pick a page between 1 and 1.", {})]
