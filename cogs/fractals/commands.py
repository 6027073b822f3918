import discord
from discord.ext import commands
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from services.fractals import FractalIndexError, resolve_fractals
from services.gw2_api import Gw2ApiError, Gw2Client
from utils.config import HELLO_IMAGE_PATH
from utils.embeds import build_error_embed, build_fractals_embed, build_hello_embed

logger = logging.getLogger(__name__)

HELLO_COMMAND = "!hello"
FRACTALS_COMMAND = "!fractals"


@dataclass
class OutboundMessage:
    embed: discord.Embed
    content: Optional[str] = None
    attachments: List[str] = field(default_factory=list)


class FractalCommands(commands.Cog):
    """Answers !hello and !fractals in whatever channel they were sent"""

    def __init__(self, bot: commands.Bot, client: Optional[Gw2Client] = None,
                 image_path: str = HELLO_IMAGE_PATH):
        self.bot = bot
        self.client = client or Gw2Client()
        self.image_path = image_path

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message):
        if message.author == self.bot.user:
            return

        reply = await self.handle(message.content)
        if reply is None:
            return

        await self.send(message.channel, reply)

    async def handle(self, content: str) -> Optional[OutboundMessage]:
        """Build the reply for a message, or None when it isn't a command"""
        if content == HELLO_COMMAND:
            return self.hello()
        if content == FRACTALS_COMMAND:
            return await self.fractals()
        return None

    def hello(self) -> OutboundMessage:
        return OutboundMessage(
            content="Hello, World!",
            embed=build_hello_embed(Path(self.image_path).name),
            attachments=[self.image_path]
        )

    async def fractals(self) -> OutboundMessage:
        try:
            summary = await resolve_fractals(self.client)
        except (Gw2ApiError, FractalIndexError) as e:
            logger.error(f"Could not get dailies: {e}")
            return OutboundMessage(embed=build_error_embed(e))

        return OutboundMessage(embed=build_fractals_embed(summary))

    async def send(self, channel: discord.abc.Messageable, reply: OutboundMessage):
        """Send a reply; failures are logged and dropped"""
        try:
            kwargs = {"embed": reply.embed}
            if reply.content is not None:
                kwargs["content"] = reply.content
            if reply.attachments:
                # Attachments are opened here so the file is read at send time
                kwargs["files"] = [discord.File(path) for path in reply.attachments]
            await channel.send(**kwargs)
        except (discord.DiscordException, OSError) as e:
            logger.error(f"Error sending message: {e}")


async def setup(bot):
    await bot.add_cog(FractalCommands(bot))
