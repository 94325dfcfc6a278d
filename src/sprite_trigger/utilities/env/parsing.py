import os
from pathlib import Path

TRUE_FLAG_VALUES = {"true", "1", "yes", "on"}


def _env_flag(env_var: str, *, default: bool = False) -> bool:
    """Return the boolean value of ``env_var`` respecting common true strings."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    return value.strip().lower() in TRUE_FLAG_VALUES


def _env_int(env_var: str, *, default: int, minimum: int | None = None) -> int:
    """Return the integer value of ``env_var`` with optional bounds checking."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise ValueError(f"{env_var} must be an integer") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    return parsed


def _env_size(env_var: str, *, default: tuple[int, int]) -> tuple[int, int]:
    """Parse a ``WIDTHxHEIGHT`` value such as ``320x180``."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    width, sep, height = value.strip().lower().partition("x")
    try:
        if not sep:
            raise ValueError(value)
        parsed = (int(width), int(height))
    except ValueError as exc:
        raise ValueError(f"{env_var} must look like WIDTHxHEIGHT") from exc
    if parsed[0] < 1 or parsed[1] < 1:
        raise ValueError(f"{env_var} dimensions must be positive")
    return parsed


def _env_path(env_var: str, *, default: Path) -> Path:
    value = os.environ.get(env_var)
    if value is None or not value.strip():
        return default
    return Path(value.strip()).expanduser()
