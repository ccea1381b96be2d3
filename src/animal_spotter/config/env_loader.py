"""
Hierarchical .env file loading for Animal Spotter.

The first .env file found on the search path is loaded into the process
environment so that ``SpotterSettings`` picks it up.
"""

from pathlib import Path
from typing import Optional, Dict, List
import logging

from dotenv import dotenv_values, load_dotenv

logger = logging.getLogger(__name__)


class EnvFileLoader:
    """
    .env file loader with hierarchical search.

    Search order (stops at first file found):
    1. Current directory: .animal-spotter/.env → .env
    2. Parent directories (up to git root or home): .animal-spotter/.env → .env
    3. Home directory: ~/.animal-spotter/.env → ~/.env
    """

    CONFIG_DIR_NAME = ".animal-spotter"
    ENV_FILE_NAME = ".env"

    def __init__(self, working_directory: Optional[Path] = None):
        """Initialize env file loader.

        Args:
            working_directory: Starting directory for search
        """
        self.working_directory = Path(working_directory or Path.cwd()).resolve()
        self._loaded_file: Optional[Path] = None
        self._loaded_vars: Dict[str, str] = {}

    def load_env_file(self) -> Optional[Path]:
        """Load environment variables from the first .env file found.

        Existing environment variables are not overridden.

        Returns:
            Path to loaded .env file or None if none found
        """
        env_file_path = self._find_env_file()

        if env_file_path is None:
            logger.debug("No .env file found in search path")
            return None

        load_dotenv(env_file_path, override=False)
        self._loaded_file = env_file_path
        self._loaded_vars = {
            key: value
            for key, value in dotenv_values(env_file_path).items()
            if value is not None
        }

        logger.info(f"Loaded environment variables from: {env_file_path}")
        return env_file_path

    def get_loaded_file(self) -> Optional[Path]:
        return self._loaded_file

    def get_loaded_vars(self) -> Dict[str, str]:
        return self._loaded_vars.copy()

    def _find_env_file(self) -> Optional[Path]:
        for candidate in self.get_search_paths():
            if candidate.is_file():
                return candidate
        return None

    def _should_stop_search(self, directory: Path) -> bool:
        """Stop at a git repository root or the home directory."""
        return (directory / ".git").exists() or directory == Path.home()

    def get_search_paths(self) -> List[Path]:
        """Get list of all paths that would be searched for .env files.

        Returns:
            List of search paths in order
        """
        search_paths = []

        current_dir = self.working_directory
        while current_dir != current_dir.parent:
            search_paths.append(current_dir / self.CONFIG_DIR_NAME / self.ENV_FILE_NAME)
            search_paths.append(current_dir / self.ENV_FILE_NAME)

            if self._should_stop_search(current_dir):
                break

            current_dir = current_dir.parent

        home_dir = Path.home()
        for path in (home_dir / self.CONFIG_DIR_NAME / self.ENV_FILE_NAME, home_dir / self.ENV_FILE_NAME):
            if path not in search_paths:
                search_paths.append(path)

        return search_paths

    def create_example_env_file(self, target_dir: Optional[Path] = None, scope: str = "project") -> Path:
        """Create an example .env file.

        Args:
            target_dir: Directory to create file in
            scope: 'project' (working directory) or 'user' (home directory)

        Returns:
            Path to created example file
        """
        if target_dir is None:
            base_dir = Path.home() if scope == "user" else self.working_directory
            target_dir = base_dir / self.CONFIG_DIR_NAME

        target_dir.mkdir(parents=True, exist_ok=True)
        env_file_path = target_dir / self.ENV_FILE_NAME

        example_content = '''# Animal Spotter Configuration
# Lines starting with # are comments and will be ignored.

# Credentials used by `animal-spotter login`, `animals` and `show`
ANIMAL_SPOTTER_USERNAME=your-username
ANIMAL_SPOTTER_PASSWORD=your-password

# Optional: API endpoint
ANIMAL_SPOTTER_BASE_URL=https://lambdaanimalspotter.vapor.cloud/api

# Optional: request timeout in seconds
# ANIMAL_SPOTTER_TIMEOUT=30

# Optional: Debug settings
ANIMAL_SPOTTER_DEBUG=false
ANIMAL_SPOTTER_LOG_LEVEL=WARNING
'''

        env_file_path.write_text(example_content, encoding="utf-8")
        logger.info(f"Created example .env file: {env_file_path}")
        return env_file_path


def load_env_with_hierarchy(working_directory: Optional[Path] = None) -> Optional[Path]:
    """Convenience function to load .env file with hierarchical search."""
    loader = EnvFileLoader(working_directory)
    return loader.load_env_file()
