"""Build settings via pydantic-settings.

Values come from ``MENU_*`` environment variables or a .env file at the
project root; the CLI positionals take precedence over the two paths.
"""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def find_project_root(module_file=__file__) -> Path:
    """
    Directory the default menu and output paths hang off.

    In a checkout (or an editable install) that is the directory holding
    setup.py, two levels above this module. An installed copy lives in
    site-packages, so the current working directory is used instead.
    """
    root = Path(module_file).resolve().parents[1]
    if (root / "setup.py").exists():
        return root
    return Path.cwd()


PROJECT_ROOT = find_project_root()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MENU_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    menu_path: Path = PROJECT_ROOT / "menu" / "menu.yml"
    output_path: Path = PROJECT_ROOT / "dist" / "index.html"

    log_level: str = "WARNING"
    log_file: Optional[Path] = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
