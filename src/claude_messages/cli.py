"""
cli.py

PURPOSE: Command-line interface for sending a single message.
DEPENDENCIES: typer, rich

ARCHITECTURE NOTES:
The CLI provides commands for:
- create-message: Send a system prompt and a user message, print the result
- models: List supported models and their max_tokens ceilings
- config: Show the current configuration

The CLI only assembles the request and presents the result; every failure
arrives as a MessagesError and is turned into a red message and exit code 1.
"""

import asyncio
import logging
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from claude_messages import __version__
from claude_messages.config import get_settings
from claude_messages.errors import MessagesError
from claude_messages.llm.anthropic import create_anthropic_client
from claude_messages.llm.client import MessagesClient
from claude_messages.llm.credentials import StaticCredentialProvider
from claude_messages.models.content import BlockPolicy
from claude_messages.models.model import MAX_OUTPUT_TOKENS, ClaudeModel, MaxTokens
from claude_messages.models.request import Message, MessagesRequestBody, SystemPrompt
from claude_messages.models.response import MessagesResponseBody
from claude_messages.observability import init_telemetry, shutdown_telemetry
from claude_messages.ui import plain

app = typer.Typer(
    name="claude-messages",
    help="Send a message to Claude and print the response.",
    add_completion=False,
)

console = Console()

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"claude-messages version {__version__}")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Route log records through rich at the given level."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


@app.callback()
def main(
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """claude-messages - Send a message to Claude and print the response."""
    configure_logging(get_settings().effective_log_level)


@app.command("create-message")
def create_message(
    prompt: Annotated[
        str,
        typer.Option(
            "--prompt",
            "-p",
            help="System prompt",
        ),
    ],
    message: Annotated[
        str,
        typer.Option(
            "--message",
            "-m",
            help="User message",
        ),
    ],
    model: Annotated[
        ClaudeModel | None,
        typer.Option(
            "--model",
            help="Model to use (default from configuration)",
        ),
    ] = None,
    max_tokens: Annotated[
        int | None,
        typer.Option(
            "--max-tokens",
            "-n",
            help="Maximum tokens in the response (default from configuration)",
        ),
    ] = None,
    temperature: Annotated[
        float | None,
        typer.Option(
            "--temperature",
            help="Sampling temperature (0.0-1.0)",
            min=0.0,
            max=1.0,
        ),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Fail on content blocks of unknown kind instead of skipping them",
        ),
    ] = False,
) -> None:
    """Send a system prompt and a user message, then print the response."""
    settings = get_settings()

    chosen_model = model or settings.llm.model
    if temperature is None:
        temperature = settings.llm.temperature
    llm_settings = settings.llm
    if strict:
        llm_settings = llm_settings.model_copy(update={"block_policy": BlockPolicy.STRICT})
    if max_tokens is None:
        max_tokens = llm_settings.max_tokens

    # Build the request body
    try:
        request = MessagesRequestBody(
            model=chosen_model,
            messages=[Message.user(message)],
            max_tokens=MaxTokens.new(max_tokens, chosen_model),
            system=SystemPrompt.new(prompt),
            temperature=temperature,
        )
    except MessagesError as e:
        plain.print_error(str(e))
        raise typer.Exit(1) from None
    except ValidationError as e:
        plain.print_error(f"Invalid request: {e}")
        raise typer.Exit(1) from None

    # Create the client (fails here if no API key is set)
    try:
        client = create_anthropic_client(
            llm_settings,
            StaticCredentialProvider(llm_settings.anthropic_api_key),
        )
    except MessagesError as e:
        plain.print_error(f"{e}. Set ANTHROPIC_API_KEY to use this command.")
        raise typer.Exit(1) from None

    async def do_send(messages_client: MessagesClient) -> MessagesResponseBody:
        async with messages_client:
            return await messages_client.create_a_message(request)

    # Initialize telemetry
    init_telemetry(settings.otel)

    try:
        response = asyncio.run(do_send(client))
    except MessagesError as e:
        logger.debug("Message call failed", exc_info=True)
        plain.print_error(f"{type(e).__name__}: {e}")
        raise typer.Exit(1) from None
    finally:
        shutdown_telemetry()

    plain.print_response(response)
    console.print()
    plain.print_response_text(response.content)

    if settings.debug:
        plain.print_debug(
            {
                "model": response.model,
                "stop_reason": response.stop_reason.value if response.stop_reason else None,
                "input_tokens": response.usage.input_tokens,
                "output_tokens": response.usage.output_tokens,
            }
        )


@app.command("models")
def list_models() -> None:
    """List supported models and their max_tokens ceilings."""
    plain.print_title("Supported models")
    for claude_model, ceiling in MAX_OUTPUT_TOKENS.items():
        console.print(f"  {claude_model.value}  (max_tokens <= {ceiling})")


@app.command("config")
def config_cmd(
    show: Annotated[
        bool,
        typer.Option(
            "--show",
            "-s",
            help="Show current configuration",
        ),
    ] = True,
) -> None:
    """Show configuration."""
    if show:
        settings = get_settings()
        console.print("[bold]Current Configuration:[/bold]")
        console.print(f"  Log level: {settings.log_level}")
        console.print(f"  Debug: {settings.debug}")
        console.print()
        console.print("[bold]Message Settings:[/bold]")
        console.print(f"  Model: {settings.llm.model.value}")
        console.print(f"  Max tokens: {settings.llm.max_tokens}")
        temperature_status = settings.llm.temperature
        if temperature_status is None:
            temperature_status = "(provider default)"
        console.print(f"  Temperature: {temperature_status}")
        console.print(f"  Block policy: {settings.llm.block_policy.value}")
        console.print(f"  Base URL: {settings.llm.base_url or '(default)'}")
        api_key_status = "set" if settings.llm.anthropic_api_key else "not set"
        console.print(f"  API Key: {api_key_status}")
        console.print()
        console.print("[bold]OpenTelemetry Settings:[/bold]")
        console.print(f"  Enabled: {settings.otel.enabled}")
        console.print(f"  Service name: {settings.otel.service_name}")
        endpoint_status = settings.otel.endpoint if settings.otel.endpoint else "(console only)"
        console.print(f"  Endpoint: {endpoint_status}")


if __name__ == "__main__":
    app()
