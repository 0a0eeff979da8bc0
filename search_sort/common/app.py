"""App constants."""

from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "SearchSort"
APP_AUTHOR = "search-sort"


class AppDirs:
    """App directories."""

    def __init__(self) -> None:
        """Initialize app directories."""
        self.app_data_dir = Path(user_data_dir(appname=APP_NAME, appauthor=APP_AUTHOR))
        self.app_config_path = self.app_data_dir / "config.json"


app_dirs = AppDirs()
