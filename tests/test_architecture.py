"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application
- Application code doesn't depend on adapters
- Adapters can depend on domain
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import any other modules except standard library, pydantic and domain itself."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("section_controller.domain.models*")
        .should_not_import("section_controller.adapters*")
        .should_not_import("section_controller.application*")
        .should_not_import("section_controller.domain.contracts*")
        .should_not_import("section_controller.domain.ports*")
        .may_import("section_controller.domain.models*")
        .may_import("section_controller.domain.exceptions")
        .check("section_controller", skip_type_checking=True)
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols/interfaces) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("section_controller.domain.contracts*")
        .should_not_import("section_controller.adapters*")
        .should_not_import("section_controller.application*")
        .may_import("section_controller.domain.contracts*")
        .may_import("section_controller.domain.models*")
        .check("section_controller")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("section_controller.domain.ports*")
        .should_not_import("section_controller.adapters*")
        .should_not_import("section_controller.application*")
        .may_import("section_controller.domain.ports*")
        .may_import("section_controller.domain.models*")
        .check("section_controller")
    )


def test_application_doesnt_import_adapters() -> None:
    """Application code should not depend on adapters (infrastructure layer)."""
    (
        archrule("application", comment="Application code should not depend on adapters")
        .match("section_controller.application*")
        .should_not_import("section_controller.adapters*")
        .may_import("section_controller.domain*")
        .may_import("section_controller.application*")
        .check("section_controller")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application code (to avoid cycles)."""
    (
        archrule("adapters independence", comment="Adapters should not depend on application code")
        .match("section_controller.adapters*")
        .should_not_import("section_controller.application*")
        .may_import("section_controller.domain*")
        .may_import("section_controller.adapters*")
        .check("section_controller", only_direct_imports=True)
    )
