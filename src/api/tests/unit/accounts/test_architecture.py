"""Architecture tests for the accounts bounded context.

These tests enforce the layering inside accounts: the domain and ports
know nothing about frameworks or persistence, the application layer
depends only on ports, and nothing below presentation reaches up into
the HTTP surface.
"""

from pytest_archon import archrule


class TestDomainIsolation:
    """The domain layer holds plain Python types only."""

    def test_domain_does_not_import_frameworks(self):
        (
            archrule("accounts_domain_no_frameworks")
            .match("accounts.domain*")
            .should_not_import("fastapi*", "sqlalchemy*", "pydantic*", "structlog*")
            .check("accounts")
        )

    def test_domain_does_not_import_outer_layers(self):
        (
            archrule("accounts_domain_no_outer_layers")
            .match("accounts.domain*")
            .should_not_import(
                "accounts.application*",
                "accounts.infrastructure*",
                "accounts.presentation*",
                "accounts.dependencies*",
                "infrastructure*",
            )
            .check("accounts")
        )


class TestPortsIsolation:
    def test_ports_do_not_import_persistence(self):
        (
            archrule("accounts_ports_no_persistence")
            .match("accounts.ports*")
            .should_not_import("sqlalchemy*", "asyncpg*", "accounts.infrastructure*")
            .check("accounts")
        )


class TestApplicationIsolation:
    """The application layer talks to the store through ports only."""

    def test_application_does_not_import_persistence(self):
        (
            archrule("accounts_application_no_persistence")
            .match("accounts.application*")
            .should_not_import(
                "sqlalchemy*",
                "asyncpg*",
                "accounts.infrastructure*",
                "infrastructure.database*",
            )
            .check("accounts")
        )

    def test_application_does_not_import_http(self):
        (
            archrule("accounts_application_no_http")
            .match("accounts.application*")
            .should_not_import("fastapi*", "accounts.presentation*")
            .check("accounts")
        )


class TestInfrastructureIsolation:
    def test_infrastructure_does_not_import_presentation(self):
        (
            archrule("accounts_infrastructure_no_presentation")
            .match("accounts.infrastructure*")
            .should_not_import("fastapi*", "accounts.presentation*")
            .check("accounts")
        )
