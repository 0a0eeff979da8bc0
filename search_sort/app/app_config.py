"""App configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from ..bench import BenchConfig
from ..common.app import app_dirs
from ..common.logging import LogFormat

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
SortName = Literal["bubble", "quick", "merge"]
SearchName = Literal["linear", "binary", "binary_first", "jump"]


class AppConfig(BaseModel):
    """App configuration."""

    log_level: LogLevel = Field(default="WARNING", description="Minimum level of emitted log lines.")
    log_format: LogFormat = Field(default="console", description="Log renderer, console or json.")
    default_sort: SortName = Field(default="quick", description="Sort used when none is given.")
    default_search: SearchName = Field(default="binary_first", description="Search used when none is given.")
    bench: BenchConfig = Field(default_factory=BenchConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> "AppConfig":
        """Load the configuration from ``path``, or the user config file when it exists."""
        if path is None:
            path = app_dirs.app_config_path
            if not path.exists():
                return cls()
        return cls.model_validate_json(path.read_text())

    def save(self, path: Path | None = None) -> Path:
        """Write the configuration as JSON and return where it went."""
        path = path or app_dirs.app_config_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))
        return path
