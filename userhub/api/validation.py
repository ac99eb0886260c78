"""Request body validation decorator.

@validate_request parses the JSON body into the Pydantic model named in the
view's signature. Path parameters and keyword arguments injected by other
decorators (such as ``caller``) pass through untouched.

Example:
```python
@users_bp.put("/<int:user_id>")
@auth_required
@validate_request
def update_user(user_id: int, caller: str, data: UserUpdate):
    ...
```
"""

import inspect
from functools import wraps
from typing import get_type_hints

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

# Never echoed back in validation error details
REDACTED_FIELDS = {"password"}


def _format_errors(exc: PydanticValidationError) -> list[dict]:
    """Flatten Pydantic errors into field/message/expected_type dicts."""
    errors = []
    for err in exc.errors():
        errors.append({
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "expected_type": err["type"],
        })
    return errors


def validate_request(f):
    """
    Validate the request body against the view's Pydantic parameter.

    Raises:
        TypeError: At decoration time if the view has no parameters or an
            unannotated parameter; at request time if the parameter to be
            filled from the body is not a BaseModel subclass
        ValidationError: If the body fails validation (400)
    """
    params = list(inspect.signature(f).parameters.values())
    if not params:
        raise TypeError(f"{f.__name__} has no parameters to validate")

    hints = get_type_hints(f)
    for param in params:
        if param.name not in hints:
            raise TypeError(
                f"Parameter '{param.name}' of {f.__name__} lacks a type annotation"
            )

    @wraps(f)
    def wrapper(*args, **kwargs):
        provided = set(kwargs) | set(request.view_args or {})

        for param in params[len(args):]:
            if param.name in provided:
                continue

            model = hints[param.name]
            if not (inspect.isclass(model) and issubclass(model, BaseModel)):
                raise TypeError(
                    f"Parameter '{param.name}' of {f.__name__} must be a "
                    f"Pydantic BaseModel subclass to be read from the request body"
                )

            body = request.get_json(silent=True)
            if body is None:
                body = {}
            if not isinstance(body, dict):
                raise ValidationError(
                    "Request body must be a JSON object",
                    {"model": model.__name__}
                )

            try:
                kwargs[param.name] = model.model_validate(body)
            except PydanticValidationError as e:
                raise ValidationError(
                    "Invalid request data",
                    {
                        "model": model.__name__,
                        "received": {
                            k: v for k, v in body.items()
                            if k not in REDACTED_FIELDS
                        },
                        "errors": _format_errors(e),
                    }
                )

        return f(*args, **kwargs)

    return wrapper
