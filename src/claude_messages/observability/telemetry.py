"""
telemetry.py

PURPOSE: OpenTelemetry setup and tracer lookup.
DEPENDENCIES: opentelemetry-api, opentelemetry-sdk, opentelemetry-exporter-otlp (all optional)

ARCHITECTURE NOTES:
Modules grab a tracer at import time with get_tracer(__name__). The tracer
is lazy: it checks on every span whether telemetry was initialized, and
hands out NoOpSpan objects otherwise. The only global state is the
installed tracer provider.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from claude_messages.config import OpenTelemetrySettings

logger = logging.getLogger(__name__)

_provider: Any | None = None


class Span(Protocol):
    """The subset of the otel span API used by this package."""

    def __enter__(self) -> Span: ...
    def __exit__(self, *args: object) -> None: ...
    def set_attribute(self, key: str, value: object) -> None: ...
    def record_exception(self, exception: BaseException) -> None: ...
    def add_event(self, name: str, attributes: dict[str, object] | None = None) -> None: ...


class NoOpSpan:
    """Span used when tracing is off."""

    def __enter__(self) -> NoOpSpan:
        return self

    def __exit__(self, *args: object) -> None:
        pass

    def set_attribute(self, key: str, value: object) -> None:  # noqa: ARG002
        pass

    def record_exception(self, exception: BaseException) -> None:  # noqa: ARG002
        pass

    def add_event(  # noqa: ARG002
        self, name: str, attributes: dict[str, object] | None = None
    ) -> None:
        pass


class LazyTracer:
    """
    Tracer resolved at span creation rather than at import.

    Lets module-level tracers exist before init_telemetry() is called.
    """

    def __init__(self, name: str) -> None:
        self._name = name

    def start_as_current_span(self, name: str, **kwargs: object) -> Span:
        if _provider is None:
            return NoOpSpan()

        from opentelemetry import trace

        tracer = trace.get_tracer(self._name)
        return tracer.start_as_current_span(name, **kwargs)  # type: ignore[return-value]


def is_enabled() -> bool:
    """Whether a real tracer provider is installed."""
    return _provider is not None


def init_telemetry(settings: OpenTelemetrySettings) -> None:
    """
    Install a tracer provider if tracing is enabled.

    Safe to call when otel packages are missing; calling it twice is a no-op.

    Args:
        settings: OpenTelemetry configuration settings.
    """
    global _provider

    if _provider is not None:
        logger.debug("Telemetry already initialized")
        return

    if not settings.enabled:
        logger.debug("Telemetry disabled")
        return

    try:
        from opentelemetry import trace
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
    except ImportError:
        logger.warning(
            "OpenTelemetry packages not installed. "
            "Install with: pip install claude-messages[observability]"
        )
        return

    provider = TracerProvider(resource=Resource.create({"service.name": settings.service_name}))
    provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    if settings.endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
        except ImportError:
            logger.warning("OTLP exporter not available, using console only")
        else:
            provider.add_span_processor(
                BatchSpanProcessor(OTLPSpanExporter(endpoint=settings.endpoint))
            )
            logger.info(f"OTLP exporter configured: {settings.endpoint}")

    trace.set_tracer_provider(provider)
    _provider = provider
    logger.info(f"Telemetry initialized: service={settings.service_name}")


def get_tracer(name: str) -> LazyTracer:
    """
    Get a tracer for the given module name.

    Args:
        name: Module name (typically __name__).

    Returns:
        A LazyTracer that yields real spans once telemetry is initialized.
    """
    return LazyTracer(name)


def shutdown_telemetry() -> None:
    """Flush pending spans and uninstall the provider. Safe if never initialized."""
    global _provider

    if _provider is not None:
        _provider.shutdown()
        logger.debug("Telemetry shutdown complete")
    _provider = None
