"""
TEST DOC: Response Content

WHAT: Tests for content resolution, content blocks and text extraction
WHY: Responses come in two wire shapes and may carry block kinds we do not model
HOW: Parse raw payloads with parse_response under both block policies

CASES:
- Bare string content resolves to SingleText
- Block list resolves to MultipleBlock, preserving order
- extract_text walks either variant
- Unknown blocks are kept and skipped (lenient) or rejected (strict)

EDGE CASES:
- Empty block list
- Missing or wrongly typed content
- Blocks without a type tag, text blocks without text
- Payload given as JSON text or bytes
"""

import pytest

from claude_messages.errors import MalformedResponse, UnknownBlockKind
from claude_messages.models.content import (
    BlockPolicy,
    MultipleBlock,
    SingleText,
    TextContentBlock,
    UnknownContentBlock,
    extract_text,
)
from claude_messages.models.response import parse_response


class TestContentResolution:
    """Tests for choosing the Content variant."""

    def test_bare_string_is_single_text(self, single_text_payload):
        """A string content field resolves to SingleText."""
        response = parse_response(single_text_payload)

        assert isinstance(response.content, SingleText)
        assert response.content.text == "hello"
        assert list(extract_text(response.content)) == ["hello"]

    def test_block_list_is_multiple_block(self, mixed_blocks_payload):
        """A list content field resolves to MultipleBlock with every element."""
        response = parse_response(mixed_blocks_payload)

        assert isinstance(response.content, MultipleBlock)
        assert len(response.content) == 3
        first, second, third = response.content.blocks
        assert first == TextContentBlock(text="a")
        assert isinstance(second, UnknownContentBlock)
        assert third == TextContentBlock(text="b")

    def test_empty_block_list(self, empty_blocks_payload):
        """An empty list is a valid MultipleBlock with no text."""
        response = parse_response(empty_blocks_payload)

        assert isinstance(response.content, MultipleBlock)
        assert len(response.content) == 0
        assert list(extract_text(response.content)) == []

    def test_json_text_payload(self):
        """Raw JSON text is accepted as well as a decoded dict."""
        response = parse_response('{"content": [{"type": "text", "text": "hi"}]}')
        assert list(response.texts()) == ["hi"]

    def test_json_bytes_payload(self):
        """Raw JSON bytes are accepted."""
        response = parse_response(b'{"content": "hi"}')
        assert isinstance(response.content, SingleText)


class TestUnknownBlocks:
    """Tests for block kinds that are not modelled."""

    def test_unknown_block_keeps_tag_and_fields(self, mixed_blocks_payload):
        """The raw fields of an unknown block stay visible."""
        response = parse_response(mixed_blocks_payload)
        block = response.content.blocks[1]

        assert block.type == "tool_use"
        assert block.raw_fields == {"id": "x"}

    def test_lenient_skips_unknown_in_extraction(self, mixed_blocks_payload):
        """Text extraction skips unknown blocks and keeps order."""
        response = parse_response(mixed_blocks_payload, BlockPolicy.LENIENT)
        assert list(extract_text(response.content)) == ["a", "b"]

    def test_strict_rejects_unknown(self, mixed_blocks_payload):
        """The strict policy fails on the first unknown block."""
        with pytest.raises(UnknownBlockKind) as exc_info:
            parse_response(mixed_blocks_payload, BlockPolicy.STRICT)

        assert exc_info.value.kind == "tool_use"

    def test_strict_accepts_known_blocks(self):
        """The strict policy only rejects unknown kinds."""
        payload = {"content": [{"type": "text", "text": "ok"}]}
        response = parse_response(payload, BlockPolicy.STRICT)
        assert list(response.texts()) == ["ok"]

    def test_strict_accepts_single_text(self, single_text_payload):
        """A bare string has no blocks to reject."""
        response = parse_response(single_text_payload, BlockPolicy.STRICT)
        assert response.text == "hello"


class TestMalformedContent:
    """Tests for payloads that match neither content shape."""

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"content": None},
            {"content": 42},
            {"content": {"type": "text", "text": "not in a list"}},
            {"content": [{"text": "no type tag"}]},
            {"content": [{"type": 7, "text": "numeric tag"}]},
            {"content": [{"type": "text"}]},
            {"content": [{"type": "text", "text": 3}]},
            {"content": ["bare string inside a list"]},
        ],
    )
    def test_malformed_payload(self, payload):
        """Missing or wrongly shaped content is a MalformedResponse."""
        with pytest.raises(MalformedResponse):
            parse_response(payload)

    def test_invalid_json_text(self):
        """Text that is not JSON is a MalformedResponse."""
        with pytest.raises(MalformedResponse, match="not valid JSON"):
            parse_response("<html>Bad Gateway</html>")

    def test_non_object_payload(self):
        """A top-level list is not a response body."""
        with pytest.raises(MalformedResponse):
            parse_response("[]")


class TestExtractText:
    """Tests for the text extraction helper."""

    def test_restartable(self, mixed_blocks_payload):
        """Each iteration starts from the first text."""
        texts = extract_text(parse_response(mixed_blocks_payload).content)

        assert list(texts) == ["a", "b"]
        assert list(texts) == ["a", "b"]

    def test_lazy(self):
        """Texts are produced one at a time."""
        content = MultipleBlock(
            (TextContentBlock(text="first"), TextContentBlock(text="second"))
        )
        iterator = iter(extract_text(content))

        assert next(iterator) == "first"
        assert next(iterator) == "second"
        with pytest.raises(StopIteration):
            next(iterator)

    def test_only_unknown_blocks(self):
        """Content without text blocks yields nothing, without error."""
        response = parse_response({"content": [{"type": "image", "source": {}}]})

        assert list(response.texts()) == []
        assert response.text == ""

    def test_response_text_joins(self):
        """The text property joins every text payload."""
        payload = {
            "content": [
                {"type": "text", "text": "Tokyo"},
                {"type": "text", "text": " is the capital."},
            ]
        }
        assert parse_response(payload).text == "Tokyo is the capital."
