"""
Discord Integration Adapters

Discord-flavoured identity and output destination values for the core.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

import discord
from discord.ext import commands


@dataclass(frozen=True)
class DiscordIdentity:
    """
    Participant identity backed by a Discord user.

    Equality and hashing use the user ID only, so a renamed member still maps
    to the same participant.
    """
    user_id: int
    display_name: str = field(default="", compare=False)

    @classmethod
    def from_user(cls, user: Union[discord.abc.User, discord.Member]) -> "DiscordIdentity":
        return cls(user_id=user.id, display_name=getattr(user, "display_name", None) or user.name)

    @property
    def mention(self) -> str:
        return f"<@{self.user_id}>"

    def __str__(self) -> str:
        return self.display_name or str(self.user_id)


def channel_destination(channel_id: int) -> discord.Object:
    """Output destination for a League or DraftGuild"""
    return discord.Object(id=channel_id)


def resolve_channel(
    bot: commands.Bot,
    destination: Optional[Union[discord.abc.Snowflake, int]]
) -> Optional[discord.abc.Messageable]:
    """Look up the channel an output destination points at, if the bot can see it"""
    if destination is None:
        return None
    channel_id = destination if isinstance(destination, int) else destination.id
    return bot.get_channel(channel_id)
