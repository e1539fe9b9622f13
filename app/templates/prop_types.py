import logging
from typing import Any, List, Type

from pydantic import BaseModel, ValidationError

from app.settings import settings

logger = logging.getLogger(__name__)


def check_prop_types(
    props: Any, model: Type[BaseModel], component: str
) -> List[str]:
    """
    Check raw props against a model and warn about mismatches.

    Only active in development. Never raises: a bad shape is reported,
    not rejected.
    """
    if not settings.is_development:
        return []

    try:
        model.model_validate(props)
    except ValidationError as e:
        messages = [_format_error(err, component) for err in e.errors()]
        for message in messages:
            logger.warning(message)
        return messages
    return []


def _format_error(err: dict, component: str) -> str:
    location = ".".join(str(part) for part in err.get("loc", ()))
    return f"Failed prop type: `{location}` in `{component}`: {err.get('msg')}"
