"""
Shared response envelopes and validation helpers.

WHY: Every endpoint answers with the same envelope
({success, data|error|message}) so the UI handles all responses the
same way.
"""

from typing import Any, Dict, Generic, Iterable, Mapping, Type, TypeVar

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from inventory.core.exceptions import ValidationError

DataT = TypeVar("DataT")
SchemaT = TypeVar("SchemaT", bound=BaseModel)


class ApiResponse(BaseModel, Generic[DataT]):
    """Successful response carrying a payload."""

    success: bool = Field(default=True, description="Whether the request succeeded")
    data: DataT


class MessageResponse(BaseModel):
    """Successful response carrying only a confirmation message."""

    success: bool = Field(default=True, description="Whether the request succeeded")
    message: str = Field(..., description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """Failure envelope (documentation only; built by the exception handlers)."""

    success: bool = Field(default=False)
    error: str = Field(..., description="Human-readable error message")


def describe_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """
    Flatten pydantic error dicts into one readable message.

    The leading ``body`` location FastAPI adds to request errors is dropped,
    so the same field reads the same whether validation happened in the
    route or in a service.

    Args:
        errors: Items from ``ValidationError.errors()``

    Returns:
        Messages such as ``"price: Input should be greater than or equal to 0"``
        joined with ``", "``
    """
    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        if loc:
            messages.append(f"{'.'.join(loc)}: {error['msg']}")
        else:
            messages.append(error["msg"])
    return ", ".join(messages)


def validate_payload(schema: Type[SchemaT], attrs: Mapping[str, Any]) -> SchemaT:
    """
    Validate raw attributes against an input schema.

    Args:
        schema: Pydantic model class describing the allowed fields
        attrs: Raw attributes from the caller

    Returns:
        The validated schema instance

    Raises:
        ValidationError: If any field violates its constraints
    """
    try:
        return schema.model_validate(dict(attrs))
    except PydanticValidationError as exc:
        raise ValidationError(message=describe_errors(exc.errors()), schema=schema.__name__)


def json_body(schema: Type[BaseModel]) -> Dict[str, Any]:
    """
    OpenAPI ``requestBody`` for routes that take the body as a raw mapping.

    WHY: Write routes hand the raw body to the service, which checks that
    the addressed rows exist before validating fields. The schema is still
    published in the API docs.

    Usage:
        @router.post("", openapi_extra=json_body(CategoryCreate))
    """
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        }
    }
