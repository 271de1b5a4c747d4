"""Path utility module for the weather lookup client.

Provides centralized path resolution so the CLI, the server and the tests
agree on where configuration files, test resources and the persisted
preference file live.
"""

import os
from pathlib import Path

from weather_lookup.constants import APP_DIR_NAME, CONFIG_FILENAME, STORAGE_FILENAME
from weather_lookup.exceptions import ConfigFileNotFoundError


class PathResolver:
    """Centralized utility for path resolution and management.

    Attributes:
        project_root: The project root directory
        user_config_dir: User-specific configuration directory
        data_dir: User-specific data directory for persisted preferences
    """

    def __init__(self) -> None:
        """Initialize the path resolver.

        Directories are only resolved here; nothing is created until a file
        is actually written.
        """
        self.project_root = self._find_project_root()

        self.user_config_dir = Path.home() / ".config" / APP_DIR_NAME

        # Follow XDG_DATA_HOME when set
        data_home = os.environ.get("XDG_DATA_HOME")
        base_data_dir = Path(data_home) if data_home else Path.home() / ".local" / "share"
        self.data_dir = base_data_dir / APP_DIR_NAME

    def _find_project_root(self) -> Path:
        """Find the project root directory.

        Climbs up from this module's directory to the parent of the src
        directory.

        Returns:
            The project root directory path.
        """
        current_dir = Path(__file__).parent

        while current_dir.name != "src" and current_dir.parent != current_dir:
            current_dir = current_dir.parent

        if current_dir.name == "src":
            return current_dir.parent

        # Fallback to the directory containing this module
        return Path(__file__).parent.parent.parent.parent

    def config_search_paths(self, config_filename: str = CONFIG_FILENAME) -> list[Path]:
        """Candidate configuration file locations in priority order.

        1. Current working directory
        2. User's configuration directory
        3. Project root directory

        Args:
            config_filename: Name of the configuration file

        Returns:
            List of candidate paths.
        """
        return [
            Path.cwd() / config_filename,
            self.user_config_dir / config_filename,
            self.project_root / config_filename,
        ]

    def get_config_path(self, config_filename: str = CONFIG_FILENAME) -> Path:
        """Get the path to a configuration file.

        Args:
            config_filename: Name of the configuration file

        Returns:
            Path to the first existing candidate, or the user config path otherwise.
        """
        for path in self.config_search_paths(config_filename):
            if path.exists():
                return path

        return self.user_config_dir / config_filename

    def get_storage_file(self, configured_path: str | Path | None = None) -> Path:
        """Get the path of the persisted preference file.

        Args:
            configured_path: Path from configuration; empty means use the default.

        Returns:
            Path to the storage file.
        """
        if configured_path:
            return self.normalize_path(configured_path).expanduser()
        return self.data_dir / STORAGE_FILENAME

    def normalize_path(self, path: str | Path) -> Path:
        """Convert a string path to a Path object.

        Args:
            path: String or Path object

        Returns:
            A Path object.
        """
        return Path(path) if isinstance(path, str) else path

    def ensure_dir_exists(self, path: str | Path) -> Path:
        """Ensure a directory exists, creating it if necessary.

        Args:
            path: Directory path

        Returns:
            Path to the directory.
        """
        dir_path = self.normalize_path(path)
        dir_path.mkdir(exist_ok=True, parents=True)
        return dir_path


# Create a global instance for easy import
path_resolver = PathResolver()


def validate_config_path(config_path: str | Path | None = None) -> Path:
    """Validate and resolve the configuration file path.

    Checks if the provided config path exists, and if none was provided,
    searches the standard locations.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Resolved Path to the configuration file

    Raises:
        ConfigFileNotFoundError: If the configuration file cannot be found.
    """
    if config_path is None:
        resolved_path = path_resolver.get_config_path(CONFIG_FILENAME)
    else:
        resolved_path = path_resolver.normalize_path(config_path)

    if not resolved_path.exists():
        search_locations = []
        if config_path is None:
            search_locations = [str(p) for p in path_resolver.config_search_paths()]

        error_details = {
            "path": str(resolved_path),
            "cwd": str(Path.cwd()),
            "searched_locations": search_locations if search_locations else None
        }

        error_msg = f"Configuration file not found: {resolved_path}"
        if search_locations:
            error_msg += "\n\nSearched in the following locations:\n"
            error_msg += "\n".join(f"  - {loc}" for loc in search_locations)

        raise ConfigFileNotFoundError(error_msg, error_details)

    return resolved_path
