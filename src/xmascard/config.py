"""Layout constants of the card. The defaults reproduce the classic 60x18 card."""

from pydantic import BaseModel, Field


class CardConfig(BaseModel):
    width: int = Field(60, gt=0)
    """Width of the scene canvas and of the greeting box interior."""
    height: int = Field(18, gt=0)
    """Number of scene rows."""
    snow_count: int = Field(85, ge=0)
    """How many snowflakes are scattered over the scene."""
    default_year: str = "2025"
    """Year used when the user leaves the year prompt empty."""
    fallback_message: str = "Wishing you a warm, cozy Christmas."
    """Message line used when no custom message was entered."""
    title_template: str = "MERRY CHRISTMAS {{year}}"
    recipient_template: str = "To: {{recipient}}"
    sender_template: str = "From: {{sender}}"
