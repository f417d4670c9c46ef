"""Architecture tests using pytest-archon.

These tests enforce DDD architectural boundaries between layers
within the Messenger bounded context.
"""

from pytest_archon import archrule


class TestMessengerDomainLayerBoundaries:
    """Tests that the domain layer has no forbidden dependencies."""

    def test_domain_does_not_import_infrastructure(self):
        """Domain layer should not depend on infrastructure.

        The domain layer contains pure business logic and should not
        know about database sessions, SQL, or other infrastructure concerns.
        """
        (
            archrule("domain_no_infrastructure")
            .match("messenger.domain*")
            .should_not_import("messenger.infrastructure*", "infrastructure*")
            .check("messenger")
        )

    def test_domain_does_not_import_application(self):
        """Domain objects should be usable without application services."""
        (
            archrule("domain_no_application")
            .match("messenger.domain*")
            .should_not_import("messenger.application*")
            .check("messenger")
        )

    def test_domain_does_not_import_sqlalchemy(self):
        """Domain objects should be persistence-agnostic."""
        (
            archrule("domain_no_sqlalchemy")
            .match("messenger.domain*")
            .should_not_import("sqlalchemy*")
            .check("messenger")
        )


class TestMessengerPortsLayerBoundaries:
    """Tests that the ports layer has no forbidden dependencies."""

    def test_ports_does_not_import_infrastructure(self):
        """Ports define interfaces; they should not know the implementations."""
        (
            archrule("ports_no_infrastructure")
            .match("messenger.ports*")
            .should_not_import("messenger.infrastructure*")
            .check("messenger")
        )

    def test_ports_does_not_import_application(self):
        """Ports are used by the application layer, not the other way around."""
        (
            archrule("ports_no_application")
            .match("messenger.ports*")
            .should_not_import("messenger.application*")
            .check("messenger")
        )


class TestMessengerApplicationLayerBoundaries:
    """Tests that the application layer depends only on abstractions."""

    def test_application_does_not_import_infrastructure(self):
        """Application services receive repositories through their ports."""
        (
            archrule("application_no_infrastructure")
            .match("messenger.application*")
            .should_not_import("messenger.infrastructure*")
            .check("messenger")
        )


class TestMessengerInfrastructureLayerBoundaries:
    """Tests for the infrastructure layer."""

    def test_infrastructure_does_not_import_application(self):
        """Repositories should not call back into application services."""
        (
            archrule("infrastructure_no_application")
            .match("messenger.infrastructure*")
            .should_not_import("messenger.application*")
            .check("messenger")
        )


class TestSharedKernelBoundaries:
    """The shared kernel must not depend on any bounded context."""

    def test_shared_kernel_does_not_import_messenger(self):
        (
            archrule("shared_kernel_no_messenger")
            .match("shared_kernel*")
            .should_not_import("messenger*", "infrastructure*")
            .check("shared_kernel")
        )


class TestSharedInfrastructureBoundaries:
    """Shared infrastructure serves bounded contexts without knowing them."""

    def test_shared_infrastructure_does_not_import_messenger(self):
        """Contexts register their own models before schema creation."""
        (
            archrule("shared_infrastructure_no_messenger")
            .match("infrastructure*")
            .should_not_import("messenger*")
            .check("infrastructure")
        )
