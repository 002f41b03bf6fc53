"""Rewrite slash delimited fixture arguments into host native paths."""

import logging
import os
from collections.abc import Sequence
from types import ModuleType
from typing import TypeVar

from pydantic import BaseModel

from sourcenuts.test_matrix.models.path_expression import PathExpression
from sourcenuts.test_matrix.models.repo_config import RepoConfig

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# convert globs are relative to the output dir, so convert.* stays as written
PATHS_TO_NORMALIZE = (
    "retrieve.manifest",
    "retrieve.metadata",
    "retrieve.sourcepath",
    "deploy.manifest",
    "deploy.metadata",
    "deploy.sourcepath",
)


class FieldPathError(LookupError):
    """A dotted field path does not address a list of test cases."""


def normalize_path(file_path: str, flavour: ModuleType = os.path) -> str:
    """Join the ``/`` separated segments of a path with the flavour's separator."""
    return flavour.join(*file_path.split("/")) or flavour.curdir


def normalize_argument(value: str, flavour: ModuleType = os.path) -> str:
    """Normalize every comma separated token of a command argument."""
    return str(PathExpression.parse(value).normalized(flavour))


def normalize_file_paths(
    repos: Sequence[RepoConfig],
    paths: Sequence[str] = PATHS_TO_NORMALIZE,
    flavour: ModuleType = os.path,
) -> list[RepoConfig]:
    """Normalize the argument strings of the test cases addressed by ``paths``.

    Only string fields are rewritten; glob lists are left as written. The
    input models are not modified, new models are returned in input order.

    Args:
        repos: Repository configurations to normalize
        paths: Dotted paths from a repository to a list of test cases
        flavour: Path module providing ``join`` (``os.path`` by default)

    Returns:
        Normalized repository configurations

    Raises:
        FieldPathError: If a path does not resolve to a list of test cases

    """
    normalized: list[RepoConfig] = []
    for repo in repos:
        for path in paths:
            repo = _replace_at(repo, path.split("."), path, flavour)
        normalized.append(repo)

    logger.debug(
        f"Normalized {len(normalized)} repositories with separator {flavour.sep!r}"
    )
    return normalized


def _replace_at(
    model: ModelT, parts: list[str], path: str, flavour: ModuleType
) -> ModelT:
    """Return a copy of ``model`` with the test cases at ``parts`` normalized."""
    name, rest = parts[0], parts[1:]
    if name not in type(model).model_fields:
        raise FieldPathError(
            f"Field path '{path}' not found: {type(model).__name__} has no '{name}'"
        )
    value = getattr(model, name)

    if rest:
        if not isinstance(value, BaseModel):
            raise FieldPathError(f"Field path '{path}' does not resolve at '{name}'")
        return model.model_copy(
            update={name: _replace_at(value, rest, path, flavour)}
        )

    if not isinstance(value, (list, tuple)):
        raise FieldPathError(f"Field path '{path}' is not a list of test cases")
    return model.model_copy(
        update={
            name: tuple(_normalize_test_case(case, path, flavour) for case in value)
        }
    )


def _normalize_test_case(
    test_case: object, path: str, flavour: ModuleType
) -> BaseModel:
    if not isinstance(test_case, BaseModel):
        raise FieldPathError(f"Field path '{path}' contains a non test case entry")
    updates = {
        key: normalize_argument(value, flavour)
        for key, value in test_case
        if isinstance(value, str)
    }
    return test_case.model_copy(update=updates)
