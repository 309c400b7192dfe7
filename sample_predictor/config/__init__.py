"""
Configuration module for sample_predictor.

Provides the RunConfig dataclass holding the settings of one client run.
"""

from sample_predictor.config.run_config import RunConfig

__all__ = [
    'RunConfig',
]
