"""
Valuation Services Package.

Contains the pure financial engine, the document codec, input guards and
the logger-carrying ``ValuationService``.

The ``create_services()`` factory wires the services together, returning
a typed dict the host can consume without knowing the dependency graph.
"""

from __future__ import annotations

from typing import Optional, TypedDict

from dcf_engine.config import EngineConfig, get_config
from dcf_engine.logger import StructuredLogger
from dcf_engine.services.valuation_service import ValuationService


class ServiceContainer(TypedDict):
    """Typed container for all engine services."""

    valuation_service: ValuationService


def create_services(
    config: Optional[EngineConfig] = None,
    logger: Optional[StructuredLogger] = None,
) -> ServiceContainer:
    """
    Wire all services together.

    This is the single composition root for the service layer.  A host
    calls this once and keeps the returned container.

    Args:
        config: Engine configuration; defaults to the ``get_config()``
            singleton.
        logger: Logger shared by the services; defaults to a
            ``StructuredLogger`` named ``dcf_engine``.

    Returns:
        ServiceContainer mapping service names to fully-wired instances.
    """
    resolved_config: EngineConfig = config if config is not None else get_config()
    resolved_logger: StructuredLogger = logger if logger is not None else StructuredLogger(
        name="dcf_engine",
        level=resolved_config.log_level_number,
        log_file=resolved_config.LOG_FILE,
        max_bytes=resolved_config.LOG_MAX_BYTES,
        backup_count=resolved_config.LOG_BACKUP_COUNT,
    )

    valuation_service = ValuationService(
        logger=resolved_logger,
        config=resolved_config,
    )

    return ServiceContainer(
        valuation_service=valuation_service,
    )
