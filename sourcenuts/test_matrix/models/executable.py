"""Models for the executables the NUTs run against."""

from pydantic import BaseModel, ConfigDict, Field


class Executable(BaseModel):
    """A command line executable and whether it is excluded from the run."""

    model_config = ConfigDict(frozen=True)

    path: str | None = Field(..., description="Full path to the executable")
    skip: bool = Field(default=False, description="Skip NUTs for this executable")
