"""Unit tests for domain probes.

Tests that domain probes correctly capture domain events
following the Domain Oriented Observability pattern.
"""

from unittest.mock import MagicMock

import structlog

from accounts.application.observability import DefaultUserServiceProbe
from accounts.infrastructure.observability import DefaultUserRepositoryProbe
from infrastructure.observability import ObservationContext
from infrastructure.observability.probes import DefaultConnectionProbe


class TestObservationContext:
    def test_as_dict_skips_unset_values(self):
        assert ObservationContext().as_dict() == {}

    def test_as_dict_includes_request_and_extra(self):
        context = ObservationContext(request_id="req-1", user_id="u-1").with_extra(
            route="/api/users"
        )

        assert context.as_dict() == {
            "request_id": "req-1",
            "context_user_id": "u-1",
            "route": "/api/users",
        }


class TestConnectionProbe:
    """Tests for ConnectionProbe protocol and implementation."""

    def test_default_probe_creates_with_default_logger(self):
        """Default probe should work without explicit logger."""
        probe = DefaultConnectionProbe()
        assert probe._logger is not None

    def test_engine_created_logs_info(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultConnectionProbe(logger=mock_logger)

        probe.engine_created(
            connection_string="postgresql://app@db:5432/accounts", pool_size=10
        )

        mock_logger.info.assert_called_once_with(
            "database_engine_created",
            connection_string="postgresql://app@db:5432/accounts",
            pool_size=10,
        )

    def test_health_check_failed_logs_error(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultConnectionProbe(logger=mock_logger)

        probe.health_check_failed(Exception("Connection refused"))

        mock_logger.error.assert_called_once_with(
            "database_health_check_failed",
            error="Connection refused",
        )

    def test_pool_closed_logs_info(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultConnectionProbe(logger=mock_logger)

        probe.pool_closed()

        mock_logger.info.assert_called_once_with("connection_pool_closed")


class TestUserServiceProbe:
    def test_user_created_includes_context(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultUserServiceProbe(logger=mock_logger).with_context(
            ObservationContext(request_id="req-1")
        )

        probe.user_created(user_id="u-1", email="ann@x.io")

        mock_logger.info.assert_called_once_with(
            "user_created",
            user_id="u-1",
            email="ann@x.io",
            request_id="req-1",
        )

    def test_rejection_logs_info(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultUserServiceProbe(logger=mock_logger)

        probe.user_operation_rejected(operation="create_user", kind="INVALID_PASSWORD")

        mock_logger.info.assert_called_once_with(
            "user_operation_rejected",
            operation="create_user",
            kind="INVALID_PASSWORD",
            user_id=None,
        )

    def test_failure_logs_error(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultUserServiceProbe(logger=mock_logger)

        probe.user_operation_failed(
            operation="delete_user", error="connection reset", user_id="u-1"
        )

        mock_logger.error.assert_called_once_with(
            "user_operation_failed",
            operation="delete_user",
            error="connection reset",
            user_id="u-1",
        )


class TestUserRepositoryProbe:
    def test_duplicate_email_logs_warning(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultUserRepositoryProbe(logger=mock_logger)

        probe.duplicate_email("ann@x.io")

        mock_logger.warning.assert_called_once_with(
            "duplicate_email", email="ann@x.io"
        )

    def test_with_context_keeps_logger(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultUserRepositoryProbe(logger=mock_logger).with_context(
            ObservationContext(request_id="req-2")
        )

        probe.user_not_found("u-1")

        mock_logger.debug.assert_called_once_with(
            "user_not_found", user_id="u-1", request_id="req-2"
        )
