"""Tests for fixture path normalization."""

import ntpath
import os
import posixpath

import pytest
from pydantic import BaseModel

from sourcenuts.test_matrix.models.repo_config import RepoConfig
from sourcenuts.test_matrix.normalizer import (
    PATHS_TO_NORMALIZE,
    FieldPathError,
    normalize_argument,
    normalize_file_paths,
    normalize_path,
)


@pytest.fixture
def repo() -> RepoConfig:
    """Create a repository with one test case per operation."""
    return RepoConfig.model_validate(
        {
            "gitUrl": "https://github.com/org/repo.git",
            "deploy": {
                "sourcepath": [
                    {
                        "toDeploy": "force-app/main/default/objects,my-app/objects",
                        "toVerify": ["force-app/main/default/objects/**/*"],
                    }
                ],
                "metadata": [
                    {"toDeploy": "ApexClass:BotController", "toVerify": ["a/*"]}
                ],
                "manifest": [
                    {
                        "toDeploy": '"force-app, my-app, foo-bar"',
                        "toVerify": ["force-app/**/*"],
                    }
                ],
                "testlevel": {"specifiedTests": ["Test/Class"]},
            },
            "retrieve": {
                "sourcepath": [
                    {"toRetrieve": "my-app/apex/my.cls-meta.xml", "toVerify": []}
                ],
            },
            "convert": {
                "sourcepath": [
                    {"toConvert": "my-app/objects", "toVerify": ["objects/*"]}
                ],
            },
        }
    )


@pytest.mark.parametrize(
    ("flavour", "expected"),
    [
        (posixpath, "force-app/main/default/objects"),
        (ntpath, "force-app\\main\\default\\objects"),
    ],
)
def test_normalize_path(flavour: object, expected: str) -> None:
    """normalize_path uses the separator of the path flavour."""
    assert normalize_path("force-app/main/default/objects", flavour) == expected  # type: ignore[arg-type]


def test_normalize_path_defaults_to_host() -> None:
    """normalize_path defaults to the host separator."""
    assert normalize_path("a/b/c") == os.path.join("a", "b", "c")


def test_normalize_argument_preserves_token_order() -> None:
    """normalize_argument keeps token count and order."""
    assert normalize_argument("force-app/x,my-app/y", ntpath) == (
        "force-app\\x,my-app\\y"
    )


def test_normalize_argument_keeps_quoted_commas() -> None:
    """Quoted arguments keep their embedded commas and quotes."""
    raw = '"force-app, my-app, foo-bar"'
    assert normalize_argument(raw, posixpath) == raw
    assert normalize_argument(raw, ntpath) == raw


def test_normalize_file_paths_windows(repo: RepoConfig) -> None:
    """normalize_file_paths rewrites deploy and retrieve arguments."""
    (normalized,) = normalize_file_paths([repo], flavour=ntpath)

    assert normalized.deploy.sourcepath[0].to_deploy == (
        "force-app\\main\\default\\objects,my-app\\objects"
    )
    assert normalized.deploy.metadata[0].to_deploy == "ApexClass:BotController"
    assert normalized.retrieve.sourcepath[0].to_retrieve == (
        "my-app\\apex\\my.cls-meta.xml"
    )


def test_normalize_file_paths_skips_convert(repo: RepoConfig) -> None:
    """Convert arguments are not part of the normalized paths."""
    (normalized,) = normalize_file_paths([repo], flavour=ntpath)
    assert normalized.convert == repo.convert


def test_normalize_file_paths_keeps_non_string_fields(repo: RepoConfig) -> None:
    """Glob lists and specified tests are left as written."""
    (normalized,) = normalize_file_paths([repo], flavour=ntpath)

    assert normalized.deploy.sourcepath[0].to_verify == (
        "force-app/main/default/objects/**/*",
    )
    assert normalized.deploy.manifest[0].to_verify == ("force-app/**/*",)
    assert normalized.deploy.testlevel.specified_tests == ("Test/Class",)


def test_normalize_file_paths_does_not_modify_input(repo: RepoConfig) -> None:
    """normalize_file_paths returns new models."""
    normalize_file_paths([repo], flavour=ntpath)
    assert repo.retrieve.sourcepath[0].to_retrieve == "my-app/apex/my.cls-meta.xml"


def test_normalize_file_paths_posix_is_identity(repo: RepoConfig) -> None:
    """Normalizing to posix separators leaves the fixtures equal."""
    assert normalize_file_paths([repo], flavour=posixpath) == [repo]


def test_normalize_file_paths_missing_path(repo: RepoConfig) -> None:
    """An unknown field path fails fast."""
    with pytest.raises(FieldPathError, match="deploy.unknown"):
        normalize_file_paths([repo], paths=["deploy.unknown"])


def test_normalize_file_paths_not_a_list(repo: RepoConfig) -> None:
    """A path that addresses a non-list field fails fast."""
    with pytest.raises(FieldPathError, match="not a list"):
        normalize_file_paths([repo], paths=["deploy.testlevel"])


def test_normalize_file_paths_through_scalar(repo: RepoConfig) -> None:
    """A path that continues past a scalar field fails fast."""
    with pytest.raises(FieldPathError, match="does not resolve"):
        normalize_file_paths([repo], paths=["git_url.sourcepath"])


def test_normalize_file_paths_non_model_entries() -> None:
    """A list of plain values is rejected."""

    class Holder(BaseModel):
        values: list[str]

    with pytest.raises(FieldPathError, match="non test case"):
        normalize_file_paths([Holder(values=["a/b"])], paths=["values"])  # type: ignore[list-item]


def test_paths_to_normalize() -> None:
    """Deploy and retrieve groups are normalized, convert is not."""
    assert set(PATHS_TO_NORMALIZE) == {
        "retrieve.manifest",
        "retrieve.metadata",
        "retrieve.sourcepath",
        "deploy.manifest",
        "deploy.metadata",
        "deploy.sourcepath",
    }


def test_normalize_argument_empty_token() -> None:
    """Empty tokens between commas become the current directory."""
    assert normalize_path("", ntpath) == "."
    assert normalize_argument("force-app,,my-app/objects", ntpath) == (
        "force-app,.,my-app\\objects"
    )
