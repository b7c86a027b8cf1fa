"""Structured log events for webhook intake and kudos queries.

Every event is one femtologging line of the form
``[event.type] key=value ...`` so log aggregators can filter on the
bracketed event type.

Usage
-----
>>> event_logger = ContributionEventLogger()
>>> event_logger.log_event_ignored(event_type="ping", delivery_id="abc")

"""

from __future__ import annotations

import enum
import typing as typ

from kudos.logging import get_logger, log_error, log_info, log_warning

if typ.TYPE_CHECKING:
    from kudos.store.models import ContributionRecord

logger = get_logger(__name__)


class ContributionEventType(enum.StrEnum):
    """Structured log event types for the contribution pipeline."""

    WEBHOOK_REJECTED = "webhook.rejected"
    WEBHOOK_IGNORED = "webhook.ignored"
    CONTRIBUTION_RECORDED = "contribution.recorded"
    CONTRIBUTION_SKIPPED = "contribution.skipped"
    STORE_FAILED = "store.failed"
    KUDOS_LISTED = "kudos.listed"


class ContributionEventLogger:
    """Emit structured contribution events via femtologging."""

    def log_webhook_rejected(
        self,
        *,
        delivery_id: str | None,
        status: int,
        error: BaseException,
    ) -> None:
        """Log a delivery refused for a bad signature or payload."""
        log_warning(
            logger,
            "[%s] delivery_id=%s status=%d error_type=%s error_message=%s",
            ContributionEventType.WEBHOOK_REJECTED,
            delivery_id,
            status,
            type(error).__name__,
            str(error),
        )

    def log_event_ignored(self, *, event_type: str, delivery_id: str | None) -> None:
        """Log a delivery whose event type never yields a contribution."""
        log_info(
            logger,
            "[%s] event_type=%s delivery_id=%s",
            ContributionEventType.WEBHOOK_IGNORED,
            event_type,
            delivery_id,
        )

    def log_contribution_skipped(
        self,
        *,
        event_type: str,
        action: str,
        delivery_id: str | None,
    ) -> None:
        """Log a supported delivery whose action is not ``opened``."""
        log_info(
            logger,
            "[%s] event_type=%s action=%s delivery_id=%s",
            ContributionEventType.CONTRIBUTION_SKIPPED,
            event_type,
            action,
            delivery_id,
        )

    def log_contribution_recorded(
        self,
        record: ContributionRecord,
        *,
        delivery_id: str | None,
    ) -> None:
        """Log a contribution written to the store."""
        log_info(
            logger,
            "[%s] user=%s contribution_type=%s contribution_url=%s delivery_id=%s",
            ContributionEventType.CONTRIBUTION_RECORDED,
            record.user,
            record.contribution_type,
            record.contribution_url,
            delivery_id,
        )

    def log_store_failed(self, *, operation: str, error: BaseException) -> None:
        """Log a failed store call, attaching the exception."""
        log_error(
            logger,
            "[%s] operation=%s error_type=%s error_message=%s",
            ContributionEventType.STORE_FAILED,
            operation,
            type(error).__name__,
            str(error),
            exc_info=error,
        )

    def log_kudos_listed(self, *, user: str, count: int) -> None:
        """Log a successful kudos query."""
        log_info(
            logger,
            "[%s] user=%s count=%d",
            ContributionEventType.KUDOS_LISTED,
            user,
            count,
        )
