"""Data models for sample repositories, executables and path arguments."""

from sourcenuts.test_matrix.models.executable import Executable
from sourcenuts.test_matrix.models.path_expression import PathExpression
from sourcenuts.test_matrix.models.repo_config import (
    ConvertGroup,
    ConvertTestCase,
    DeployGroup,
    DeployTestCase,
    RepoConfig,
    RepoFixtures,
    RetrieveGroup,
    RetrieveTestCase,
    TestLevel,
)

__all__ = [
    "ConvertGroup",
    "ConvertTestCase",
    "DeployGroup",
    "DeployTestCase",
    "Executable",
    "PathExpression",
    "RepoConfig",
    "RepoFixtures",
    "RetrieveGroup",
    "RetrieveTestCase",
    "TestLevel",
]
