"""YAML configuration loading utilities."""

from pathlib import Path

import yaml

from news_quiz.config.models import NewsQuizConfig


def load_config(path: Path | str) -> NewsQuizConfig:
    """Load configuration from YAML file.

    An empty file yields the default configuration.

    Args:
        path: Path to YAML config file.

    Returns:
        Validated NewsQuizConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    path = Path(path)
    with path.open() as f:
        raw = yaml.safe_load(f)

    return NewsQuizConfig.model_validate(raw or {})


def get_default_config_path() -> Path:
    """Get path to default config file."""
    return Path(__file__).parent.parent.parent.parent / "configs" / "default.yaml"
