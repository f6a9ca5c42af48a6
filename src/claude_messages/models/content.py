"""
content.py

PURPOSE: Content blocks and the two shapes of a response body's content.
DEPENDENCIES: pydantic

ARCHITECTURE NOTES:
A response's "content" field is either a bare string or a list of typed
blocks. Both shapes are resolved once, at validation time, into one of two
variants:
- SingleText: the bare string
- MultipleBlock: a tuple of ContentBlock

Blocks are tagged by their "type" field. "text" decodes to
TextContentBlock; any other tag decodes to UnknownContentBlock, which keeps
the tag and raw fields so new block kinds stay visible instead of vanishing.
Whether unknown blocks are acceptable is decided by the BlockPolicy passed
in the validation context.
"""

from collections.abc import Iterator
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    RootModel,
    Tag,
    ValidationInfo,
    field_validator,
)

from claude_messages.errors import UnknownBlockKind

POLICY_CONTEXT_KEY = "block_policy"


class BlockPolicy(str, Enum):
    """How unknown content block kinds are handled while parsing."""

    LENIENT = "lenient"  # keep as UnknownContentBlock, skipped by text extraction
    STRICT = "strict"  # raise UnknownBlockKind


class TextContentBlock(BaseModel):
    """A block of generated text."""

    type: Literal["text"] = "text"
    text: str

    model_config = ConfigDict(frozen=True)


class UnknownContentBlock(BaseModel):
    """A block whose kind this library does not model (tool_use, image, ...)."""

    type: str

    model_config = ConfigDict(frozen=True, extra="allow")

    @property
    def raw_fields(self) -> dict[str, Any]:
        """The block's raw fields other than its tag."""
        return dict(self.model_extra or {})


def _block_kind(value: Any) -> str | None:
    if isinstance(value, dict):
        kind = value.get("type")
    else:
        kind = getattr(value, "type", None)
    if not isinstance(kind, str):
        return None
    return "text" if kind == "text" else "unknown"


ContentBlock = Annotated[
    Union[  # noqa: UP007
        Annotated[TextContentBlock, Tag("text")],
        Annotated[UnknownContentBlock, Tag("unknown")],
    ],
    Discriminator(_block_kind),
]


def _policy(info: ValidationInfo) -> BlockPolicy:
    if info.context:
        return BlockPolicy(info.context.get(POLICY_CONTEXT_KEY, BlockPolicy.LENIENT))
    return BlockPolicy.LENIENT


class SingleText(RootModel[str]):
    """Content returned as one bare string."""

    model_config = ConfigDict(frozen=True)

    @property
    def text(self) -> str:
        return self.root


class MultipleBlock(RootModel[tuple[ContentBlock, ...]]):
    """Content returned as an ordered sequence of blocks."""

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def check_block_kinds(
        cls, blocks: tuple[TextContentBlock | UnknownContentBlock, ...], info: ValidationInfo
    ) -> tuple[TextContentBlock | UnknownContentBlock, ...]:
        """Reject unknown block kinds when the strict policy is in effect."""
        if _policy(info) is BlockPolicy.STRICT:
            for block in blocks:
                if isinstance(block, UnknownContentBlock):
                    raise UnknownBlockKind(block.type)
        return blocks

    @property
    def blocks(self) -> tuple[TextContentBlock | UnknownContentBlock, ...]:
        return self.root

    def __len__(self) -> int:
        return len(self.root)


def _content_shape(value: Any) -> str | None:
    if isinstance(value, str | SingleText):
        return "single_text"
    if isinstance(value, list | tuple | MultipleBlock):
        return "multiple_block"
    return None


Content = Annotated[
    Union[  # noqa: UP007
        Annotated[SingleText, Tag("single_text")],
        Annotated[MultipleBlock, Tag("multiple_block")],
    ],
    Discriminator(_content_shape),
]


class TextSequence:
    """
    Every text payload of a Content, in encounter order.

    Iteration is lazy and can be repeated; each pass starts over.
    """

    def __init__(self, content: SingleText | MultipleBlock):
        self._content = content

    def __iter__(self) -> Iterator[str]:
        if isinstance(self._content, SingleText):
            yield self._content.root
            return
        for block in self._content.root:
            if isinstance(block, TextContentBlock):
                yield block.text

    def __repr__(self) -> str:
        return f"TextSequence({list(self)!r})"


def extract_text(content: SingleText | MultipleBlock) -> TextSequence:
    """
    Collect the text of a response's content regardless of its shape.

    Unknown blocks are skipped. Content without text yields nothing.

    Args:
        content: A resolved Content variant.

    Returns:
        A restartable iterable of text strings.
    """
    return TextSequence(content)
