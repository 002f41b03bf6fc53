"""Models for the sample repositories exercised by the source NUTs."""

from pydantic import BaseModel, ConfigDict, Field

GlobPattern = str


class _FixtureModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class DeployTestCase(_FixtureModel):
    """Arguments passed to source:deploy and the files expected to deploy."""

    to_deploy: str = Field(
        ...,
        alias="toDeploy",
        description="Value passed to the command, without the flag name",
    )
    to_verify: tuple[GlobPattern, ...] = Field(
        ...,
        alias="toVerify",
        description="Globs of source files expected to be deployed",
    )


class RetrieveTestCase(_FixtureModel):
    """Arguments passed to source:retrieve and the files expected back."""

    to_retrieve: str = Field(
        ...,
        alias="toRetrieve",
        description="Value passed to the command, without the flag name",
    )
    to_verify: tuple[GlobPattern, ...] = Field(
        ...,
        alias="toVerify",
        description="Globs of source files expected to be retrieved",
    )


class ConvertTestCase(_FixtureModel):
    """Arguments passed to source:convert and the files expected in the output."""

    to_convert: str = Field(
        ...,
        alias="toConvert",
        description="Value passed to the command, without the flag name",
    )
    to_verify: tuple[GlobPattern, ...] = Field(
        ...,
        alias="toVerify",
        description="Globs relative to the converted output directory",
    )


class TestLevel(_FixtureModel):
    """Apex tests run for the RunSpecifiedTests test level."""

    __test__ = False

    specified_tests: tuple[str, ...] = Field(
        default_factory=tuple, alias="specifiedTests"
    )


class DeployGroup(_FixtureModel):
    """Deploy test cases grouped by input mode."""

    sourcepath: tuple[DeployTestCase, ...] = Field(default_factory=tuple)
    metadata: tuple[DeployTestCase, ...] = Field(default_factory=tuple)
    manifest: tuple[DeployTestCase, ...] = Field(default_factory=tuple)
    testlevel: TestLevel = Field(default_factory=TestLevel)


class RetrieveGroup(_FixtureModel):
    """Retrieve test cases grouped by input mode."""

    sourcepath: tuple[RetrieveTestCase, ...] = Field(default_factory=tuple)
    metadata: tuple[RetrieveTestCase, ...] = Field(default_factory=tuple)
    manifest: tuple[RetrieveTestCase, ...] = Field(default_factory=tuple)


class ConvertGroup(_FixtureModel):
    """Convert test cases grouped by input mode."""

    sourcepath: tuple[ConvertTestCase, ...] = Field(default_factory=tuple)
    metadata: tuple[ConvertTestCase, ...] = Field(default_factory=tuple)
    manifest: tuple[ConvertTestCase, ...] = Field(default_factory=tuple)


class RepoConfig(_FixtureModel):
    """One external sample project and its test matrix."""

    skip: bool = Field(
        default=False, description="Exclude the repository from NUT generation"
    )
    git_url: str = Field(
        ..., alias="gitUrl", description="Git URL used for cloning the repository"
    )
    deploy: DeployGroup = Field(default_factory=DeployGroup)
    retrieve: RetrieveGroup = Field(default_factory=RetrieveGroup)
    convert: ConvertGroup = Field(default_factory=ConvertGroup)


class RepoFixtures(_FixtureModel):
    """Top-level document of a fixture file."""

    repos: tuple[RepoConfig, ...] = Field(default_factory=tuple)
