"""Build the read-only catalog of sample repositories keyed by git URL."""

import logging
import os
from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType, ModuleType
from typing import Literal

from pydantic import BaseModel, ConfigDict

from sourcenuts.test_matrix.models.repo_config import RepoConfig
from sourcenuts.test_matrix.normalizer import normalize_file_paths
from sourcenuts.test_matrix.repo_loader import load_repo_configs

logger = logging.getLogger(__name__)

Operation = Literal["deploy", "retrieve", "convert"]
Mode = Literal["sourcepath", "metadata", "manifest"]

OPERATIONS: tuple[Operation, ...] = ("deploy", "retrieve", "convert")
MODES: tuple[Mode, ...] = ("sourcepath", "metadata", "manifest")

_ARGUMENT_FIELDS = {
    "deploy": "to_deploy",
    "retrieve": "to_retrieve",
    "convert": "to_convert",
}


class DuplicateGitUrlError(ValueError):
    """Two repository configurations share the same git URL."""


class MatrixCase(BaseModel):
    """A single command invocation of the test matrix."""

    model_config = ConfigDict(frozen=True)

    git_url: str
    operation: Operation
    mode: Mode
    argument: str
    to_verify: tuple[str, ...]


def build_catalog(repos: Sequence[RepoConfig]) -> Mapping[str, RepoConfig]:
    """Key repository configurations by git URL.

    Raises:
        DuplicateGitUrlError: If a git URL appears more than once

    """
    catalog: dict[str, RepoConfig] = {}
    for repo in repos:
        if repo.git_url in catalog:
            raise DuplicateGitUrlError(f"Duplicate gitUrl in fixtures: {repo.git_url}")
        catalog[repo.git_url] = repo
    return MappingProxyType(catalog)


def load_catalog(
    fixture_file: Path | None = None, flavour: ModuleType = os.path
) -> Mapping[str, RepoConfig]:
    """Load, normalize and key the sample repository fixtures.

    Args:
        fixture_file: YAML fixture file, the bundled fixtures when omitted
        flavour: Path module whose separator the arguments are rewritten to

    Returns:
        Read-only mapping of git URL to normalized repository configuration

    """
    repos = load_repo_configs(fixture_file)
    catalog = build_catalog(normalize_file_paths(repos, flavour=flavour))
    logger.info(f"Loaded test matrix with {len(catalog)} repositories")
    return catalog


def iter_test_cases(
    catalog: Mapping[str, RepoConfig], include_skipped: bool = False
) -> Iterator[MatrixCase]:
    """Flatten the catalog into individual command invocations."""
    for git_url, repo in catalog.items():
        if repo.skip and not include_skipped:
            logger.debug(f"Skipping {git_url}")
            continue
        for operation in OPERATIONS:
            group = getattr(repo, operation)
            argument_field = _ARGUMENT_FIELDS[operation]
            for mode in MODES:
                for test_case in getattr(group, mode):
                    yield MatrixCase(
                        git_url=git_url,
                        operation=operation,
                        mode=mode,
                        argument=getattr(test_case, argument_field),
                        to_verify=test_case.to_verify,
                    )
