from sprite_trigger.utilities.env.parsing import _env_int, _env_size

MAX_FPS_ENV_VAR = "SPRITE_TRIGGER_MAX_FPS"
WINDOW_SCALE_ENV_VAR = "SPRITE_TRIGGER_WINDOW_SCALE"
WINDOW_SIZE_ENV_VAR = "SPRITE_TRIGGER_WINDOW_SIZE"

DEFAULT_MAX_FPS = 60
DEFAULT_WINDOW_SCALE = 4
DEFAULT_WINDOW_SIZE = (320, 180)


class RenderingConfiguration:
    @classmethod
    def max_fps(cls) -> int:
        return _env_int(MAX_FPS_ENV_VAR, default=DEFAULT_MAX_FPS, minimum=1)

    @classmethod
    def window_scale(cls) -> int:
        return _env_int(WINDOW_SCALE_ENV_VAR, default=DEFAULT_WINDOW_SCALE, minimum=1)

    @classmethod
    def window_size(cls) -> tuple[int, int]:
        """Logical canvas size before the window scale is applied."""

        return _env_size(WINDOW_SIZE_ENV_VAR, default=DEFAULT_WINDOW_SIZE)
