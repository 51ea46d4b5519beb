from .loader import load_project
from .types import ConfigError, ExerciseConfig, ProjectConfig

__all__ = ["load_project", "ProjectConfig", "ExerciseConfig", "ConfigError"]
