"""
Base file loader interface and registry.

This module defines the abstract FileLoader base class and LoaderRegistry
for a pluggable spectral file loading system. Loaders are selected by file
extension unless the caller asks for a specific delimiter variant.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar, Optional

from sample_predictor.core.exceptions import SamplePredictorError
from sample_predictor.data.series import XYSeries


class LoaderError(SamplePredictorError):
    """Base exception for loader errors."""
    pass

class FormatNotSupportedError(LoaderError):
    """Raised when a file format is not supported."""
    pass

class FileLoadError(LoaderError):
    """Raised when a file cannot be loaded."""
    pass

class DataFormatError(FileLoadError):
    """Raised when a line of a data file cannot be parsed.

    Attributes:
        path: File being parsed.
        line: 1-based line number of the first invalid line.
    """

    def __init__(self, line: int, path: Path | None = None):
        self.line = line
        self.path = path
        super().__init__(f"Invalid data format at position '{line}'")

class FileLoader(ABC):
    """Abstract base class for file loaders.

    All file format loaders should inherit from this class and implement
    the required methods for loading and format detection.

    Class Attributes:
        supported_extensions: Tuple of file extensions this loader handles.
        name: Human-readable name for the loader.
        priority: Loading priority (lower = higher priority) when multiple
            loaders match. Default: 50.

    Example:
        >>> class SemicolonLoader(FileLoader):
        ...     supported_extensions = (".ssv",)
        ...     name = "Semicolon Loader"
        ...
        ...     @classmethod
        ...     def supports(cls, path: Path) -> bool:
        ...         return path.suffix.lower() in cls.supported_extensions
        ...
        ...     def load(self, path: Path, **params) -> XYSeries:
        ...         pass
    """

    supported_extensions: ClassVar[tuple[str, ...]] = ()
    name: ClassVar[str] = "Base Loader"
    priority: ClassVar[int] = 50

    @classmethod
    @abstractmethod
    def supports(cls, path: Path) -> bool:
        """Check if this loader can handle the given file.

        Args:
            path: Path to the file to check.

        Returns:
            True if this loader can handle the file, False otherwise.
        """
        pass

    @abstractmethod
    def load(
        self,
        path: Path,
        **params: Any,
    ) -> XYSeries:
        """Load data from a file.

        Args:
            path: Path to the file to load.
            **params: Loader-specific parameters.

        Returns:
            The loaded coordinate series.

        Raises:
            FileNotFoundError: If the file does not exist.
            FileLoadError: If the file cannot be loaded.
        """
        pass


class LoaderRegistry:
    """Process-wide list of x,y loaders, ordered by priority.

    Example:
        >>> loader = LoaderRegistry.get_instance().get_loader("Milk.txt")
        >>> series = loader.load(Path("Milk.txt"))
    """

    _instance: Optional["LoaderRegistry"] = None
    _loaders: list[type[FileLoader]]

    def __new__(cls) -> "LoaderRegistry":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._loaders = []
        return cls._instance

    @classmethod
    def get_instance(cls) -> "LoaderRegistry":
        """Return the shared registry."""
        return cls()

    def register(self, loader_class: type[FileLoader]) -> None:
        """Add a loader class; registering twice is a no-op."""
        if loader_class in self._loaders:
            return
        self._loaders.append(loader_class)
        # lower priority value wins
        self._loaders.sort(key=lambda loader: loader.priority)

    def get_loader(self, path: str | Path) -> FileLoader:
        """Instantiate the first loader whose extensions match ``path``.

        Raises:
            FormatNotSupportedError: If no registered loader handles the
                file extension.
        """
        path = Path(path)
        matches = [loader for loader in self._loaders if loader.supports(path)]
        if not matches:
            raise FormatNotSupportedError(
                f"No x,y loader for '{path.suffix}' files (known: {', '.join(self.get_supported_extensions())})"
            )
        return matches[0]()

    def get_supported_extensions(self) -> list[str]:
        """Sorted extensions handled by the registered loaders."""
        return sorted({ext for loader in self._loaders for ext in loader.supported_extensions})

    def get_registered_loaders(self) -> list[type[FileLoader]]:
        """Registered loader classes in priority order."""
        return list(self._loaders)


def register_loader(cls: type[FileLoader]) -> type[FileLoader]:
    """Class decorator adding a loader to the shared registry."""
    LoaderRegistry.get_instance().register(cls)
    return cls
