"""
File paths and directory configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


@dataclass
class PathConfig:
    """
    Configuration for file paths and directories.

    Relative paths are resolved against the project root.
    """

    # Project root (auto-detected)
    _root: Optional[Path] = None

    # Bundled resources
    DATA_DIR: str = "data"
    BRICKSET_FILE: str = "brickset.json"

    @property
    def root(self) -> Path:
        """Get project root directory."""
        if self._root is None:
            # Auto-detect from this file's location
            self._root = Path(__file__).parent.parent
        return self._root

    def get_absolute_path(self, relative_path: Union[str, Path]) -> Path:
        """Get absolute path from relative path."""
        path = Path(relative_path)
        if path.is_absolute():
            return path
        return self.root / path

    @property
    def data_dir(self) -> Path:
        return self.get_absolute_path(self.DATA_DIR)

    @property
    def brickset_file(self) -> Path:
        return self.data_dir / self.BRICKSET_FILE

    def resolve_resource(
        self,
        resource_name: Union[str, Path],
        data_dir: Optional[Union[str, Path]] = None
    ) -> Path:
        """
        Resolve a resource file name to a path.

        Absolute names are used as given; bare names are looked up in
        ``data_dir`` (or the bundled data directory when omitted).
        """
        resource = Path(resource_name)
        if resource.is_absolute():
            return resource
        base = self.get_absolute_path(data_dir) if data_dir else self.data_dir
        return base / resource


# Singleton instance
_path_config: Optional[PathConfig] = None


def get_path_config() -> PathConfig:
    """Get the global path config instance."""
    global _path_config
    if _path_config is None:
        _path_config = PathConfig()
    return _path_config


BRICKSET_FILE = "brickset.json"
