"""Base service class for ChunkLink services."""

from abc import ABC
from pathlib import Path
from typing import Optional, Union


class BaseService(ABC):
    """Base service class anchoring all relative paths at the project directory."""

    def __init__(self, project_dir: Optional[Union[str, Path]] = None):
        """Initialize service.

        Args:
            project_dir: Directory that relative paths resolve against
                (defaults to the current working directory)
        """
        self._project_dir = Path(project_dir) if project_dir else Path.cwd()

    @property
    def project_dir(self) -> Path:
        return self._project_dir

    def resolve_path(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        return path if path.is_absolute() else self._project_dir / path
