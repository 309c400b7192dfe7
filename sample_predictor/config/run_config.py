"""Run configuration for the sample predictor client.

One RunConfig is built per invocation from the parsed command line and
flows into predictor creation, data loading and logging setup.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path

from sample_predictor.predictor.factory import require_path


@dataclass
class RunConfig:
    """Settings for one client run.

    Attributes:
        factory_path: Prediction engine (file or module, optionally ``:Attribute``).
        model_path: Calibration model file. Required before predicting.
        data_files: x,y data files. Empty means preview mode.
        delimiter: ``"comma"``, ``"whitespace"`` or None (choose by extension).
        verbose: Log verbosity (-1 silent, 0 warnings, 1 info, 2 debug).
        log_file: Also write a per-run log file.
        log_dir: Directory for log files.
    """

    factory_path: str | None = None
    model_path: str | None = None
    data_files: list[str] = field(default_factory=list)
    delimiter: str | None = None
    verbose: int = 0
    log_file: bool = False
    log_dir: Path | None = None

    @property
    def preview_mode(self) -> bool:
        """True when no data files are given."""
        return not self.data_files

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> RunConfig:
        """Build a RunConfig from parsed command line arguments."""
        verbose = -1 if getattr(args, "quiet", False) else getattr(args, "verbose", 0)
        log_dir = getattr(args, "log_dir", None)
        return cls(
            factory_path=getattr(args, "factory", None),
            model_path=getattr(args, "model", None),
            data_files=list(getattr(args, "files", None) or []),
            delimiter=getattr(args, "delimiter", None),
            verbose=verbose,
            log_file=getattr(args, "log_file", False) or log_dir is not None,
            log_dir=Path(log_dir) if log_dir is not None else None,
        )

    def validate(self) -> RunConfig:
        """Check the required paths.

        Raises:
            PreconditionError: If the factory or model path is None or blank.
        """
        require_path(self.factory_path, "factory_path")
        require_path(self.model_path, "model_path")
        return self
