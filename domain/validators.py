"""
Field-level constraint rules for request DTOs.

Each DTO has an ordered tuple of ``Constraint`` rules. ``validate`` walks the
rules in order and returns one ``ConstraintViolation`` per failed rule, so the
reported order is the declaration order below. The same rules feed the
``constraints`` entries of the OpenAPI schema.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Sequence

from app.exceptions import ConstraintViolation, ConstraintViolationError


@dataclass(frozen=True)
class Constraint:
    """A single declarative rule on one DTO property.

    Attributes:
        path: JSON property name reported to clients (e.g. ``beerName``)
        attribute: attribute name on the DTO (e.g. ``beer_name``)
        check: predicate returning True when the value is valid
        message: violation message (e.g. ``must not be blank``)
        description: documentation text for the rule
    """

    path: str
    attribute: str
    check: Callable[[Any], bool]
    message: str
    description: str


def null(path: str, attribute: str) -> Constraint:
    return Constraint(path, attribute, lambda v: v is None, "must be null", "Must be null")


def not_null(path: str, attribute: str) -> Constraint:
    return Constraint(
        path, attribute, lambda v: v is not None, "must not be null", "Must not be null"
    )


def not_blank(path: str, attribute: str) -> Constraint:
    return Constraint(
        path,
        attribute,
        lambda v: v is not None and str(v).strip() != "",
        "must not be blank",
        "Must not be blank",
    )


def positive(path: str, attribute: str) -> Constraint:
    # null passes, pair with not_null when the value is required
    return Constraint(
        path,
        attribute,
        lambda v: v is None or v > 0,
        "must be greater than 0",
        "Must be positive",
    )


def positive_or_zero(path: str, attribute: str) -> Constraint:
    return Constraint(
        path,
        attribute,
        lambda v: v is None or v >= 0,
        "must be greater than or equal to 0",
        "Must be zero or positive",
    )


BEER_CONSTRAINTS: Sequence[Constraint] = (
    null("uuid", "uuid"),
    not_blank("beerName", "beer_name"),
    not_blank("beerStyle", "beer_style"),
    not_null("upc", "upc"),
    positive("upc", "upc"),
    positive_or_zero("quantityOnHand", "quantity_on_hand"),
    null("createdDate", "created_date"),
    null("lastUpdatedDate", "last_updated_date"),
)

CUSTOMER_CONSTRAINTS: Sequence[Constraint] = (
    null("uuid", "uuid"),
    not_blank("name", "name"),
)


def validate(obj: Any, constraints: Iterable[Constraint]) -> List[ConstraintViolation]:
    """
    Check ``obj`` against every constraint, in order.

    Args:
        obj: DTO instance (any object exposing the constrained attributes)
        constraints: rules to apply

    Returns:
        List of violations; empty when the object is valid
    """
    violations: List[ConstraintViolation] = []
    for constraint in constraints:
        value = getattr(obj, constraint.attribute, None)
        if not constraint.check(value):
            violations.append(
                ConstraintViolation(
                    property_path=constraint.path,
                    message=constraint.message,
                    invalid_value=value,
                )
            )
    return violations


def validate_beer(beer_dto: Any) -> List[ConstraintViolation]:
    return validate(beer_dto, BEER_CONSTRAINTS)


def validate_customer(customer_dto: Any) -> List[ConstraintViolation]:
    return validate(customer_dto, CUSTOMER_CONSTRAINTS)


def raise_for_violations(violations: Sequence[ConstraintViolation]) -> None:
    """Raise ConstraintViolationError if any violations were found."""
    if violations:
        raise ConstraintViolationError(violations)


def describe_constraints(constraints: Iterable[Constraint]) -> Dict[str, str]:
    """Map each constrained property to its rule descriptions joined by '. '."""
    described: Dict[str, List[str]] = {}
    for constraint in constraints:
        described.setdefault(constraint.path, []).append(constraint.description)
    return {path: ". ".join(texts) for path, texts in described.items()}


def constraint_schema_extra(constraints: Iterable[Constraint]) -> Callable[[Dict[str, Any]], None]:
    """
    Build a pydantic ``json_schema_extra`` hook that annotates each constrained
    property with a ``constraints`` description.
    """
    descriptions = describe_constraints(constraints)

    def _extra(schema: Dict[str, Any]) -> None:
        for name, prop in schema.get("properties", {}).items():
            if name in descriptions:
                prop["constraints"] = descriptions[name]

    return _extra
