"""Load and parse sample repository fixtures from YAML files."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from sourcenuts.test_matrix.models.repo_config import RepoConfig, RepoFixtures

logger = logging.getLogger(__name__)

DEFAULT_FIXTURE_FILE = Path(__file__).parent / "data" / "test_repos.yaml"


def load_repo_configs(fixture_file: Path | None = None) -> list[RepoConfig]:
    """Load the sample repository configurations.

    Args:
        fixture_file: YAML file with a top-level ``repos`` list. Defaults to
            the fixtures bundled with the package.

    Returns:
        Parsed repository configurations, in file order

    Raises:
        FileNotFoundError: If the fixture file doesn't exist
        ValueError: If YAML is invalid or doesn't match schema

    """
    fixture_file = fixture_file or DEFAULT_FIXTURE_FILE

    if not fixture_file.exists():
        raise FileNotFoundError(f"Fixture file not found: {fixture_file}")

    try:
        with fixture_file.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {fixture_file}: {e}") from e

    if data is None:
        raise ValueError(f"Empty fixture file: {fixture_file}")

    try:
        fixtures = RepoFixtures.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid fixture schema in {fixture_file}: {e}") from e

    logger.debug(f"Loaded {len(fixtures.repos)} repositories from {fixture_file}")
    return list(fixtures.repos)
