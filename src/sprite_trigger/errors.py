class SpriteTriggerError(Exception):
    """Base class for errors raised by sprite_trigger."""


class InvalidRangeError(SpriteTriggerError, ValueError):
    """An animation frame range or frame rate cannot be animated."""


class AssetMissingError(SpriteTriggerError, FileNotFoundError):
    """A sprite sheet path does not point at a file."""


class AssetLoadError(SpriteTriggerError):
    """A sprite sheet exists but cannot be decoded or does not fit its layout."""


class NotFoundError(SpriteTriggerError, LookupError):
    """No entity carries the requested tag."""


class MultipleMatchesError(SpriteTriggerError, LookupError):
    """More than one entity carries a tag that is expected to be unique."""
