"""
observability/__init__.py

PURPOSE: Opt-in OpenTelemetry tracing for message calls.
DEPENDENCIES: opentelemetry-api, opentelemetry-sdk (optional)

ARCHITECTURE NOTES:
- Spans are no-ops until init_telemetry() runs with tracing enabled
- Missing otel packages degrade to no-op instead of failing
- Console export always, OTLP export when an endpoint is configured
"""

from claude_messages.observability.telemetry import (
    get_tracer,
    init_telemetry,
    is_enabled,
    shutdown_telemetry,
)

__all__ = ["get_tracer", "init_telemetry", "is_enabled", "shutdown_telemetry"]
