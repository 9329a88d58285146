"""Pydantic schemas for Discord embed payloads."""

from typing import List

from pydantic import BaseModel, Field


class EmbedField(BaseModel):
    """One name/value cell of an embed."""

    name: str = Field(..., max_length=256)
    value: str = Field(..., max_length=1024)
    inline: bool = Field(True)


class EmbedFooter(BaseModel):
    text: str = Field(..., max_length=2048)


class DiscordEmbed(BaseModel):
    """Embed object rendered natively by Discord."""

    title: str = Field(..., max_length=256)
    description: str = Field(..., max_length=4096)
    color: int = Field(..., ge=0, le=0xFFFFFF, description="RGB colour as an integer")
    fields: List[EmbedField] = Field(default_factory=list, max_length=25)
    footer: EmbedFooter


class DiscordWebhookPayload(BaseModel):
    """Top-level message body carrying embeds."""

    embeds: List[DiscordEmbed] = Field(..., max_length=10)
