import math

import discord

from tunedeck.core.config import DisplayConfig
from tunedeck.core.exceptions import EmptyPlaybackError, EmptyQueueError, PageOutOfRangeError
from .formatter import DEFAULT_CONFIG, Formatter, QueueSummary
from .models import DisplayPanel, PanelColor, PanelField, PlaybackState, PlayerStatus

class MusicEmbed:
    """Builds music panels from a playback snapshot and turns them into Discord embeds."""

    # Discord's NOT_QUITE_BLACK
    NOT_QUITE_BLACK = 0x23272A

    @staticmethod
    def max_queue_page(queue_size: int, config: DisplayConfig = DEFAULT_CONFIG) -> int:
        # the current track takes the first slot of page one
        return math.ceil((queue_size + 1) / config.page_size)

    @staticmethod
    def _header(state: PlaybackState, config: DisplayConfig) -> str:
        song = state.current_track
        return (
            f"**{Formatter.format_song_title(song, config=config)}**\n"
            f"Requested by: <@{song.requested_by}>\n\n"
            f"{Formatter.format_player_ui(state, config)}"
        )

    @staticmethod
    def build_playing_panel(state: PlaybackState, config: DisplayConfig = DEFAULT_CONFIG) -> DisplayPanel:
        """Panel for the track that is currently playing or paused."""
        song = state.current_track
        if not song:
            raise EmptyPlaybackError()

        playing = state.status == PlayerStatus.PLAYING
        return DisplayPanel(
            title="Now Playing" if playing else "Paused",
            color=PanelColor.ACTIVE if playing else PanelColor.INACTIVE,
            description=MusicEmbed._header(state, config),
            footer_text=f"Source: {song.artist}",
            thumbnail_url=song.thumbnail_url or None
        )

    @staticmethod
    def build_queue_panel(state: PlaybackState, page: int = 1, config: DisplayConfig = DEFAULT_CONFIG) -> DisplayPanel:
        """
        Panel for one page of the upcoming queue, headed by the current track.
        Pages are 1-indexed and hold config.page_size upcoming entries each.
        """
        song = state.current_track
        if not song:
            raise EmptyQueueError()

        queue = state.queue
        max_page = MusicEmbed.max_queue_page(len(queue), config)
        if page < 1 or page > max_page:
            raise PageOutOfRangeError(page, max_page)

        begin = (page - 1) * config.page_size
        end = begin + config.page_size
        queued_songs = "\n".join(
            Formatter.format_queue_entry(index, track, config)
            for index, track in enumerate(queue[begin:end], start=begin)
        )

        description = MusicEmbed._header(state, config) + "\n\n"
        if queue:
            description += "**Up next:**\n"
            description += queued_songs

        summary = QueueSummary.from_queue(queue)
        footer = f"Source: {song.artist}"
        if song.playlist:
            footer += f" ({song.playlist.title})"

        playing = state.status == PlayerStatus.PLAYING
        return DisplayPanel(
            title="Now Playing" if playing else "Paused",
            color=PanelColor.ACTIVE if playing else PanelColor.NEUTRAL,
            description=description,
            fields=(
                PanelField("In queue", summary.count_text),
                PanelField("Total length", summary.total_text),
                PanelField("Page", f"{page} out of {max_page}"),
            ),
            footer_text=footer,
            thumbnail_url=song.thumbnail_url or None
        )

    @staticmethod
    def color_for(tag: PanelColor) -> discord.Color:
        if tag == PanelColor.ACTIVE:
            return discord.Color.dark_green()
        if tag == PanelColor.INACTIVE:
            return discord.Color.dark_red()
        return discord.Color(MusicEmbed.NOT_QUITE_BLACK)

    @staticmethod
    def to_embed(panel: DisplayPanel) -> discord.Embed:
        """Translate a panel into a discord.Embed."""
        embed = discord.Embed(
            title=panel.title,
            description=panel.description,
            color=MusicEmbed.color_for(panel.color)
        )
        for panel_field in panel.fields:
            embed.add_field(name=panel_field.name, value=panel_field.value, inline=panel_field.inline)
        if panel.footer_text:
            embed.set_footer(text=panel.footer_text)
        if panel.thumbnail_url:
            embed.set_thumbnail(url=panel.thumbnail_url)
        return embed
