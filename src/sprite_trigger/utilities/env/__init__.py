"""Environment configuration helpers."""

from sprite_trigger.utilities.env.config import Configuration as Configuration
