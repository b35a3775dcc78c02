import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules

RULES_PATH_ENV = "PUBLICATIONS_RULES_PATH"
DEFAULT_RULES_FILE = "rules.yaml"


def default_rules_path() -> Path:
    """Rules file location: $PUBLICATIONS_RULES_PATH, else ./rules.yaml."""
    return Path(os.environ.get(RULES_PATH_ENV, DEFAULT_RULES_FILE))


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Rules file {path} must contain a mapping at the top level")

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise ValueError(f"Rules validation failed:\n{e}") from e
