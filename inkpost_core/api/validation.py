"""Request body validation decorator.

@validate_request parses the JSON body (or form data) into the pydantic model
named by the view's type-annotated parameter and passes it in as a keyword
argument. Path parameters pass through untouched.

    @blogs_bp.post("")
    @validate_request
    def create_blog(data: BlogCreate):
        ...

A body that does not fit the model raises ValidationError with details:
- model: schema class name
- received: the body as sent, password fields redacted
- errors: [{field, message, expected_type}, ...]
"""

from functools import wraps
from typing import Any, get_type_hints

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

REDACTED = "***"


def _model_params(f) -> dict[str, type[BaseModel]]:
    """Map parameter name to pydantic model for each model-annotated param."""
    hints = get_type_hints(f)
    hints.pop("return", None)
    return {
        name: hint
        for name, hint in hints.items()
        if isinstance(hint, type) and issubclass(hint, BaseModel)
    }


def _request_body() -> Any:
    body = request.get_json(silent=True)
    if body is None:
        body = request.form.to_dict()
    return body


def _redact(body: Any) -> Any:
    if not isinstance(body, dict):
        return body
    return {
        key: REDACTED if "password" in str(key).lower() else value
        for key, value in body.items()
    }


def _type_name(annotation: Any) -> str:
    return getattr(annotation, "__name__", None) or str(annotation)


def _format_errors(model: type[BaseModel], error: PydanticValidationError) -> list[dict]:
    errors = []
    for err in error.errors():
        field = ".".join(str(part) for part in err["loc"])
        field_info = model.model_fields.get(str(err["loc"][0])) if err["loc"] else None
        errors.append({
            "field": field,
            "message": err["msg"],
            "expected_type": _type_name(field_info.annotation) if field_info else model.__name__,
        })
    return errors


def validate_request(f):
    """Validate the request body against the view's pydantic-annotated parameter."""
    model_params = _model_params(f)

    @wraps(f)
    def wrapper(*args, **kwargs):
        for name, model in model_params.items():
            body = _request_body()
            try:
                kwargs[name] = model.model_validate(body)
            except PydanticValidationError as e:
                raise ValidationError(
                    "Invalid request data",
                    {
                        "model": model.__name__,
                        "received": _redact(body),
                        "errors": _format_errors(model, e),
                    }
                ) from e
        return f(*args, **kwargs)

    return wrapper
