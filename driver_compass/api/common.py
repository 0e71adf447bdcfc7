"""
Shared helpers for the Driver Compass routers.
"""

from typing import Optional, Type, TypeVar

from pydantic import BaseModel


ModelT = TypeVar("ModelT", bound=BaseModel)


def merge_with_defaults(
    model_cls: Type[ModelT],
    body: Optional[BaseModel],
    defaults: ModelT,
) -> ModelT:
    """
    Fill the fields a request body left out with configured defaults.

    Only fields explicitly present in the body override the defaults; a body
    of ``{}`` (or no body at all) yields ``defaults`` unchanged.

    Args:
        model_cls: Input model class to build.
        body: Parsed request body, or None.
        defaults: Input record built from settings.

    Returns:
        A new input record of type ``model_cls``.
    """
    values = defaults.model_dump()
    if body is not None:
        values.update(body.model_dump(include=body.model_fields_set))
    return model_cls(**values)
