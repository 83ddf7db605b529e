from pytest_archon import archrule


def test_core_independence() -> None:
    """
    Core is the foundation every piece builds on.
    It must not import any other package of the toolkit.
    """
    (
        archrule("core_is_independent")
        .match("pieces_core*")
        .should_not_import("pieces_conditions*")
        .should_not_import("pieces_sqlalchemy*")
        .should_not_import("pieces_http*")
        .should_not_import("pieces_mailerlite*")
        .should_not_import("pieces_saints*")
        .check("pieces_core")
    )


def test_primitives_isolation() -> None:
    """
    Primitives layer is the lowest level.
    It must not import from the framework, adapters or ports.
    """
    (
        archrule("primitives_isolation")
        .match("pieces_core.primitives*")
        .should_not_import("pieces_core.framework*")
        .should_not_import("pieces_core.adapters*")
        .should_not_import("pieces_core.ports*")
        .check("pieces_core")
    )


def test_ports_layering() -> None:
    """
    Ports (interfaces) should not depend on Adapters (implementations).
    """
    (
        archrule("ports_layering")
        .match("pieces_core.ports*")
        .should_not_import("pieces_core.adapters*")
        .check("pieces_core")
    )


def test_conditions_are_storage_agnostic() -> None:
    """
    Condition translation is pure; the SQL compiler lives in the
    persistence package, not the other way round.
    """
    (
        archrule("conditions_storage_agnostic")
        .match("pieces_conditions*")
        .should_not_import("pieces_sqlalchemy*")
        .should_not_import("pieces_http*")
        .should_not_import("pieces_saints*")
        .should_not_import("pieces_mailerlite*")
        .check("pieces_conditions")
    )


def test_persistence_layering() -> None:
    """
    The SQLAlchemy adapter may use core and conditions but knows no piece.
    """
    (
        archrule("persistence_layering")
        .match("pieces_sqlalchemy*")
        .should_not_import("pieces_http*")
        .should_not_import("pieces_saints*")
        .should_not_import("pieces_mailerlite*")
        .check("pieces_sqlalchemy")
    )


def test_http_layering() -> None:
    """HTTP infrastructure must not import persistence or pieces."""
    (
        archrule("http_layering")
        .match("pieces_http*")
        .should_not_import("pieces_sqlalchemy*")
        .should_not_import("pieces_conditions*")
        .should_not_import("pieces_saints*")
        .should_not_import("pieces_mailerlite*")
        .check("pieces_http")
    )


def test_pieces_are_independent() -> None:
    """Pieces never import each other."""
    (
        archrule("mailerlite_independence")
        .match("pieces_mailerlite*")
        .should_not_import("pieces_saints*")
        .should_not_import("pieces_sqlalchemy*")
        .check("pieces_mailerlite")
    )
    (
        archrule("saints_independence")
        .match("pieces_saints*")
        .should_not_import("pieces_mailerlite*")
        .check("pieces_saints")
    )
