"""Architecture tests using pytest-archon.

These tests enforce DDD architectural boundaries between layers
within the accounts bounded context.
"""

from pytest_archon import archrule


class TestAccountsDomainLayerBoundaries:
    """Tests that the domain layer has no forbidden dependencies."""

    def test_domain_does_not_import_infrastructure(self):
        """Domain layer should not depend on infrastructure.

        The domain layer contains pure business logic and should not
        know about database sessions, SQL, or ORM models.
        """
        (
            archrule("domain_no_infrastructure")
            .match("accounts.domain*")
            .should_not_import("accounts.infrastructure*", "infrastructure*")
            .check("accounts")
        )

    def test_domain_does_not_import_application(self):
        (
            archrule("domain_no_application")
            .match("accounts.domain*")
            .should_not_import("accounts.application*")
            .check("accounts")
        )

    def test_domain_does_not_import_frameworks(self):
        """Domain objects should be framework-agnostic."""
        (
            archrule("domain_no_frameworks")
            .match("accounts.domain*")
            .should_not_import("fastapi*", "starlette*", "sqlalchemy*", "bcrypt*")
            .check("accounts")
        )


class TestAccountsPortsLayerBoundaries:
    """Tests that the ports layer has no forbidden dependencies."""

    def test_ports_do_not_import_implementations(self):
        """Ports define interfaces; they should not know about implementations."""
        (
            archrule("ports_no_implementations")
            .match("accounts.ports*")
            .should_not_import(
                "accounts.infrastructure*",
                "accounts.application*",
                "sqlalchemy*",
                "bcrypt*",
            )
            .check("accounts")
        )


class TestAccountsApplicationLayerBoundaries:
    """Tests that the application layer has no forbidden dependencies."""

    def test_application_does_not_import_infrastructure(self):
        """Services depend on repository ports, not on concrete repositories."""
        (
            archrule("application_no_infrastructure")
            .match("accounts.application*")
            .should_not_import("accounts.infrastructure*")
            .check("accounts")
        )

    def test_application_does_not_import_presentation(self):
        (
            archrule("application_no_presentation")
            .match("accounts.application*")
            .should_not_import("accounts.presentation*", "fastapi*", "starlette*")
            .check("accounts")
        )
