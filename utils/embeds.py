from datetime import datetime, timedelta
from typing import Optional

import discord
import pytz

from services.fractals import FractalSummary


def next_daily_reset(now: Optional[datetime] = None) -> datetime:
    """Dailies roll over at midnight UTC, this is when 'tomorrow' starts"""
    now = now or datetime.now(pytz.utc)
    tomorrow = (now.astimezone(pytz.utc) + timedelta(days=1)).date()
    return pytz.utc.localize(datetime(tomorrow.year, tomorrow.month, tomorrow.day))


def build_hello_embed(image_name: str) -> discord.Embed:
    embed = discord.Embed(
        title="This is a title",
        description="This is a description"
    )
    embed.set_image(url=f"attachment://{image_name}")
    embed.add_field(name="This is the first field", value="This is a field body", inline=True)
    embed.add_field(name="This is the second field", value="Both of these fields are inline", inline=True)
    embed.add_field(name="This is the third field", value="This is not an inline field", inline=False)
    embed.set_footer(text="This is a footer")
    return embed


def build_fractals_embed(summary: FractalSummary, now: Optional[datetime] = None) -> discord.Embed:
    embed = discord.Embed(
        title="Tomorrow's Daily Fractals:",
        color=discord.Color.purple()
    )
    for name, value in summary.fields():
        embed.add_field(name=name, value=value, inline=False)
    embed.timestamp = next_daily_reset(now)
    return embed


def build_error_embed(error: Exception) -> discord.Embed:
    return discord.Embed(
        title="Error",
        description=str(error),
        color=discord.Color.red()
    )
