"""
claude-messages - Typed requests and responses for Anthropic's create-a-message API.

This package provides:
- Validated request models (model ceilings for max_tokens)
- Response models resolving both content shapes (bare text or blocks)
- An async client with a typed error taxonomy
- A small CLI for sending one message
"""

__version__ = "0.1.0"
