"""
plain.py

PURPOSE: Plain text output formatting for the CLI.
DEPENDENCIES: rich

ARCHITECTURE NOTES:
This module is the presentation layer for a message call. It handles:
- The entire response body, as JSON
- The text extracted from the response content
- Errors and debug output

Model output is printed with markup disabled so brackets in generated
text are shown as-is.
"""

from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.text import Text

from claude_messages.models.content import MultipleBlock, SingleText, extract_text
from claude_messages.models.response import MessagesResponseBody

# Global console instance
console = Console()


def print_message(text: str) -> None:
    """Print a plain line."""
    console.print(text, markup=False)


def print_error(text: str) -> None:
    """Print an error message."""
    console.print(Text(text, style="red"))


def print_title(title: str) -> None:
    """Print a title in a panel."""
    panel = Panel(
        Text(title, justify="center", style="bold"),
        border_style="blue",
    )
    console.print(panel)


def print_response(response: MessagesResponseBody) -> None:
    """Print the entire response body."""
    console.print("Entire result:", style="bold")
    console.print(JSON(str(response)))


def print_response_text(content: SingleText | MultipleBlock) -> None:
    """Print every text payload of the content, labelled by content shape."""
    if isinstance(content, SingleText):
        print_message(f"Single text response: {content.text}")
        return

    for text in extract_text(content):
        print_message(f"Multi-block response text: {text}")


def print_debug(data: dict[str, object] | str) -> None:
    """Print debug information."""
    console.print("[dim]--- DEBUG ---[/dim]")
    if isinstance(data, dict):
        import json

        console.print(Text(json.dumps(data, indent=2, default=str), style="dim"))
    else:
        console.print(Text(data, style="dim"))
    console.print("[dim]-------------[/dim]")
