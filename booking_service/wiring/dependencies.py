import logging

from booking_service.application.exceptions import ConfigurationError
from booking_service.application.ports.booking_ids import BookingIdGeneratorPort
from booking_service.application.use_cases.booking_workflow import BookingWorkflow
from booking_service.core.config import Settings, settings
from booking_service.infrastructure.ids.booking_ids import (
    SequentialBookingIdGenerator,
    UuidBookingIdGenerator,
)
from booking_service.infrastructure.scheduler.threading_scheduler import ThreadingScheduler


_workflow: BookingWorkflow | None = None


def get_id_generator(config: Settings = settings) -> BookingIdGeneratorPort:
    provider = (config.BOOKING_ID_PROVIDER or "").lower()
    if not provider:
        provider = "sequential" if config.ENV.lower() in {"dev", "local"} else "uuid"
    if provider == "uuid":
        return UuidBookingIdGenerator()
    if provider == "sequential":
        return SequentialBookingIdGenerator(prefix=config.BOOKING_ID_PREFIX)
    raise ConfigurationError(f"Unknown BOOKING_ID_PROVIDER: {config.BOOKING_ID_PROVIDER!r}")


def build_workflow(config: Settings = settings) -> BookingWorkflow:
    logger = logging.getLogger(__name__)
    logger.info(
        "Building booking workflow (id provider=%s)",
        config.BOOKING_ID_PROVIDER,
        extra={"delay_seconds": config.BOOKING_DELAY_SECONDS},
    )
    return BookingWorkflow(
        scheduler=ThreadingScheduler(),
        id_generator=get_id_generator(config),
        delay_seconds=config.BOOKING_DELAY_SECONDS,
    )


def get_booking_workflow() -> BookingWorkflow:
    global _workflow
    if _workflow is None:
        _workflow = build_workflow()
    return _workflow


def reset_booking_workflow() -> None:
    """Close and forget the process-wide workflow."""
    global _workflow
    if _workflow is not None:
        _workflow.close()
    _workflow = None
