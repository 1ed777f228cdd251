import logging
from collections.abc import Callable

from ..exceptions import UnknownTransformationError
from .base import Transformation
from .html import HtmlTransformation
from .segments import SegmentsTransformation
from .tokens import TokenCountTransformation

logger = logging.getLogger(__name__)

TransformationFactory = Callable[..., Transformation]

# Registry of built-in transformations, keyed by Transformation.name
TRANSFORMATIONS: dict[str, TransformationFactory] = {
    HtmlTransformation.name: HtmlTransformation,
    SegmentsTransformation.name: SegmentsTransformation,
    TokenCountTransformation.name: TokenCountTransformation,
}


def available_transformations() -> list[str]:
    return sorted(TRANSFORMATIONS)


def get_transformation(name: str, *, linkify: bool = True) -> Transformation:
    """Instantiate a registered transformation by name.

    Raises:
        UnknownTransformationError: ``name`` is not registered.
    """
    key = name.strip().lower()
    factory = TRANSFORMATIONS.get(key)
    if factory is None:
        raise UnknownTransformationError(name, available_transformations())
    transformation = factory(linkify=linkify)
    logger.debug("Using transformation %r (linkify=%s)", transformation, linkify)
    return transformation
