from sprite_trigger.utilities.env.assets import AssetsConfiguration
from sprite_trigger.utilities.env.rendering import RenderingConfiguration


class Configuration(RenderingConfiguration, AssetsConfiguration):
    """Aggregate environment configuration helpers."""
