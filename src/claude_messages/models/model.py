"""
model.py

PURPOSE: Supported model identifiers and the validated max_tokens value.
DEPENDENCIES: pydantic

ARCHITECTURE NOTES:
Each model has a fixed ceiling on generated tokens. The ceilings live in a
single lookup table so MaxTokens validation can be re-derived for every
supported model. MaxTokens is a frozen RootModel so it serializes as a bare
integer inside a request body.
"""

from enum import Enum
from typing import Annotated

from pydantic import ConfigDict, Field, RootModel

from claude_messages.errors import InvalidMaxTokens


class ClaudeModel(str, Enum):
    """Models accepted by the create-a-message endpoint."""

    CLAUDE_3_OPUS_20240229 = "claude-3-opus-20240229"
    CLAUDE_3_SONNET_20240229 = "claude-3-sonnet-20240229"
    CLAUDE_3_HAIKU_20240307 = "claude-3-haiku-20240307"
    CLAUDE_3_5_SONNET_20240620 = "claude-3-5-sonnet-20240620"
    CLAUDE_3_5_SONNET_20241022 = "claude-3-5-sonnet-20241022"
    CLAUDE_3_5_HAIKU_20241022 = "claude-3-5-haiku-20241022"
    CLAUDE_3_7_SONNET_20250219 = "claude-3-7-sonnet-20250219"
    CLAUDE_SONNET_4_20250514 = "claude-sonnet-4-20250514"
    CLAUDE_OPUS_4_20250514 = "claude-opus-4-20250514"

    @property
    def max_output_tokens(self) -> int:
        """Largest max_tokens value this model accepts."""
        return MAX_OUTPUT_TOKENS[self]


MAX_OUTPUT_TOKENS: dict[ClaudeModel, int] = {
    ClaudeModel.CLAUDE_3_OPUS_20240229: 4096,
    ClaudeModel.CLAUDE_3_SONNET_20240229: 4096,
    ClaudeModel.CLAUDE_3_HAIKU_20240307: 4096,
    ClaudeModel.CLAUDE_3_5_SONNET_20240620: 8192,
    ClaudeModel.CLAUDE_3_5_SONNET_20241022: 8192,
    ClaudeModel.CLAUDE_3_5_HAIKU_20241022: 8192,
    ClaudeModel.CLAUDE_3_7_SONNET_20250219: 64000,
    ClaudeModel.CLAUDE_SONNET_4_20250514: 64000,
    ClaudeModel.CLAUDE_OPUS_4_20250514: 32000,
}

DEFAULT_MODEL = ClaudeModel.CLAUDE_3_HAIKU_20240307


class MaxTokens(RootModel[Annotated[int, Field(strict=True, gt=0)]]):
    """
    Upper bound on the number of tokens the model may generate.

    Build it with MaxTokens.new(), which checks the value against the
    model's ceiling.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def new(cls, requested: object, model: ClaudeModel) -> "MaxTokens":
        """
        Create a MaxTokens valid for the given model.

        Args:
            requested: Number of tokens requested.
            model: Model the request will be sent to.

        Returns:
            The validated MaxTokens.

        Raises:
            InvalidMaxTokens: If requested is not an int, is <= 0, or exceeds
                the model ceiling.
        """
        ceiling = model.max_output_tokens
        if isinstance(requested, bool) or not isinstance(requested, int):
            raise InvalidMaxTokens(requested, model, ceiling)
        if requested <= 0 or requested > ceiling:
            raise InvalidMaxTokens(requested, model, ceiling)
        return cls(requested)

    @property
    def value(self) -> int:
        return self.root

    def __int__(self) -> int:
        return self.root
