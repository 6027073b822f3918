import asyncio

import discord
from discord.ext import commands
import sys
import signal
import logging

from utils.config import BOT_CONFIG_PATH, LOG_LEVEL, ConfigError, load_credentials

# Set up logging
logging.basicConfig(level=LOG_LEVEL)


class FractalBot(commands.Bot):
    def __init__(self):
        intents = discord.Intents.default()
        intents.message_content = True
        intents.guilds = True
        intents.guild_messages = True

        super().__init__(
            command_prefix=commands.when_mentioned,
            intents=intents,
            help_command=None
        )

    async def setup_hook(self):
        """Called when the bot is setting up"""
        await self.load_extension("cogs.fractals.commands")
        logging.info("Fractal commands loaded!")

    async def on_message(self, message):
        """No prefix commands are registered, the fractal cog reads messages itself"""
        return

    async def on_ready(self):
        print(f'{self.user.name} is connected!')
        print('------')

    async def close(self):
        """Cleanup when bot shuts down"""
        print("Bot is shutting down...")
        await super().close()
        print("Cleanup complete")


def handle_exit(signum, frame):
    print("\nReceived exit signal. Initiating shutdown...")
    sys.exit(0)


async def main():
    try:
        credentials = load_credentials(BOT_CONFIG_PATH)
    except ConfigError as e:
        logging.error(f"Failed to load config: {e}")
        sys.exit(1)

    print(f"Client ID: {credentials.client_id}")

    # Register signal handlers
    signal.signal(signal.SIGINT, handle_exit)  # Handle Ctrl+C
    signal.signal(signal.SIGTERM, handle_exit)  # Handle termination signal

    bot = FractalBot()

    try:
        await bot.start(credentials.bot_token)
    except KeyboardInterrupt:
        print("Received keyboard interrupt, shutting down...")
    except discord.DiscordException as e:
        print(f"Client error: {e}")
    finally:
        await bot.close()


if __name__ == "__main__":
    asyncio.run(main())
