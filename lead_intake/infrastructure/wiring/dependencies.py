"""Dependency injection factory functions."""

from lead_intake.adapters.outbound.intake_session import (
    InMemoryIntakeSessionRepository,
    RedisIntakeSessionRepository,
)
from lead_intake.adapters.outbound.notification import (
    LoggingLeadNotifier,
    SmtpConfig,
    SmtpLeadNotifier,
)
from lead_intake.adapters.outbound.sheet import InMemorySheetStore, PostgresSheetStore
from lead_intake.adapters.outbound.sheet.postgres_sheet_store import SheetLocation
from lead_intake.adapters.outbound.transport import (
    HttpxSubmissionTransport,
    InProcessSubmissionTransport,
)
from lead_intake.application.ports.intake_session_repository import IntakeSessionRepository
from lead_intake.application.ports.lead_notifier import LeadNotifier
from lead_intake.application.ports.sheet_store import SheetStore
from lead_intake.application.ports.submission_transport import SubmissionTransport
from lead_intake.application.use_cases.compose_lead_email import ComposeLeadEmail
from lead_intake.application.use_cases.lead_intake_use_case import LeadIntakeUseCase
from lead_intake.application.use_cases.process_lead_submission import ProcessLeadSubmission
from lead_intake.application.use_cases.route_lead_notification import (
    AreaRoute,
    RouteLeadNotification,
    RoutingConfig,
)
from lead_intake.application.use_cases.save_lead_to_sheet import SaveLeadToSheet
from lead_intake.infrastructure.config.settings import Settings, settings
from lead_intake.infrastructure.logging.logger import log_event


def _logger_func(session_id, request_id, component, **kwargs):
    log_event(session_id, request_id, component, **kwargs)


def create_routing_config(config: Settings = settings) -> RoutingConfig:
    """
    Build the routing table from settings.

    Returns:
        RoutingConfig instance
    """
    routing = config.routing
    return RoutingConfig(
        new_roof_recipients=list(routing.new_roof_recipients),
        renovation_cc=list(routing.renovation_cc),
        renovation_areas=[
            AreaRoute.create(area.name, area.recipient, area.districts, area.provinces)
            for area in routing.renovation_areas
        ],
        metal_roof_recipients=list(routing.metal_roof_recipients),
        metal_roof_cc=list(routing.metal_roof_cc),
    )


def create_sheet_store() -> SheetStore:
    """
    Factory function to create the lead sheet store.

    Returns:
        SheetStore instance
    """
    if settings.sheet_store == "postgres":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when SHEET_STORE=postgres")
        return PostgresSheetStore(SheetLocation(settings.spreadsheet_id, settings.sheet_name))
    else:
        return InMemorySheetStore()


def create_lead_notifier() -> LeadNotifier:
    """
    Factory function to create the lead notifier.

    Returns:
        SMTP notifier, or a log-only notifier when SMTP_HOST is empty
    """
    if not settings.smtp_host:
        return LoggingLeadNotifier()

    return SmtpLeadNotifier(
        SmtpConfig(
            host=settings.smtp_host,
            port=settings.smtp_port,
            from_email=settings.smtp_from_email,
            user=settings.smtp_user or None,
            password=settings.smtp_password or None,
            use_tls=settings.smtp_use_tls,
        )
    )


def create_process_lead_submission_use_case(sheet_store: SheetStore) -> ProcessLeadSubmission:
    """
    Factory function to create the lead router use case.

    Args:
        sheet_store: Sheet the router appends to

    Returns:
        ProcessLeadSubmission instance
    """
    return ProcessLeadSubmission(
        SaveLeadToSheet(sheet_store),
        RouteLeadNotification(create_routing_config()),
        ComposeLeadEmail(settings.email_subject_prefix, list(settings.other_option_values)),
        create_lead_notifier(),
        logger=_logger_func,
    )


def create_intake_session_repository() -> IntakeSessionRepository:
    """
    Factory function to create intake session repository.

    Returns:
        IntakeSessionRepository instance
    """
    if settings.intake_session_repository == "redis":
        if not settings.redis_url:
            raise ValueError("REDIS_URL is required when INTAKE_SESSION_REPOSITORY=redis")
        return RedisIntakeSessionRepository(
            settings.redis_url, settings.intake_session_ttl_seconds
        )
    else:
        return InMemoryIntakeSessionRepository(settings.intake_session_ttl_seconds)


def create_submission_transport(
    process_lead_submission: ProcessLeadSubmission,
) -> SubmissionTransport:
    """
    Factory function to create the submission transport.

    Args:
        process_lead_submission: Router used when no endpoint URL is configured

    Returns:
        HTTP transport, or an in-process transport when SUBMISSION_ENDPOINT_URL is empty
    """
    if settings.submission_endpoint_url:
        return HttpxSubmissionTransport(
            settings.submission_endpoint_url, settings.submission_timeout_seconds
        )
    return InProcessSubmissionTransport(process_lead_submission)


def create_lead_intake_use_case(
    process_lead_submission: ProcessLeadSubmission,
) -> LeadIntakeUseCase:
    """
    Factory function to create LeadIntakeUseCase with dependencies.

    Args:
        process_lead_submission: Router for the in-process transport

    Returns:
        LeadIntakeUseCase instance
    """
    return LeadIntakeUseCase(
        create_intake_session_repository(),
        create_submission_transport(process_lead_submission),
        other_values=list(settings.other_option_values),
        success_delay_seconds=settings.submission_success_delay_ms / 1000,
        logger=_logger_func,
    )
