from pathlib import Path

import yaml
from pydantic import ValidationError

from blockhtml.rules.models import Rules

DEFAULT_RULES_PATH = Path(__file__).with_name("default_rules.yaml")


def load_rules(path: Path) -> Rules:
    """
    Load and validate a rules file.
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

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def load_default_rules() -> Rules:
    """Load the rules shipped with the package."""
    return load_rules(DEFAULT_RULES_PATH)
