from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_env_file() -> Path | None:
    local_env = Path.cwd() / ".env"
    return local_env if local_env.exists() else None


class VFileSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TO_VFILE_",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    encoding: str = "utf-8"
    callback_workers: int = 4
    log_io: bool = True


def load_config() -> VFileSettings:
    # pydantic-settings parses .env itself; os.environ is left alone.
    return VFileSettings(_env_file=_find_env_file())


@lru_cache(maxsize=1)
def get_config() -> VFileSettings:
    """Process-wide settings, read once on first use."""
    return load_config()
