"""Base service class for domain services."""

from typing import TypeVar

from pydantic import ValidationError as PydanticValidationError

from discuss.domain.error import ValidationError
from discuss.domain.value.common import RootValueObject

V = TypeVar("V", bound=RootValueObject)


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


def parse_value(value_type: type[V], raw: object, field: str) -> V:
    """Build a value object, reporting failures as a field-level ValidationError.

    Args:
        value_type: Value object class to construct
        raw: Untrusted input
        field: Request field name reported on failure

    Returns:
        The validated value object

    Raises:
        ValidationError: If the input is rejected by the value object
    """
    try:
        return value_type(raw)
    except PydanticValidationError as e:
        error = e.errors()[0]
        cause = error.get("ctx", {}).get("error")
        raise ValidationError(field, str(cause) if cause else error["msg"]) from e
