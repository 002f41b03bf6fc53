"""Value type for comma separated path arguments."""

import os
from types import ModuleType

from pydantic import BaseModel, ConfigDict


class PathExpression(BaseModel):
    """Tokens of a comma separated command argument.

    Splitting is naive: quote characters are not honoured, so an argument
    such as ``'"force-app, my-app"'`` yields two tokens that still carry the
    quotes. Joining the tokens back with ``,`` restores the original text.
    """

    model_config = ConfigDict(frozen=True)

    tokens: tuple[str, ...]

    @classmethod
    def parse(cls, raw: str) -> "PathExpression":
        """Split an argument string on every comma."""
        return cls(tokens=tuple(raw.split(",")))

    def normalized(self, flavour: ModuleType = os.path) -> "PathExpression":
        """Rewrite every token with the separator of the given path flavour.

        An empty token becomes ``flavour.curdir``. Joining follows the
        flavour's own rules, so under ``ntpath`` a drive-qualified segment
        such as ``C:b`` discards the segments before it.
        """
        return PathExpression(
            tokens=tuple(
                flavour.join(*token.split("/")) or flavour.curdir
                for token in self.tokens
            )
        )

    def __str__(self) -> str:
        return ",".join(self.tokens)
