"""Host surfaces: the primitive contract and a reference buffer host."""

from .buffer import BUTTON_TAG, INFO_REF_TAG, WIDGET_TAG, Buffer, BufferSurface
from .markup import (
    ADDRESS_TAG,
    ANNOTATION_TAG,
    LOCATION_TAG,
    SourceLocation,
    address_at,
    goto_address,
    mark_compilation_errors,
)
from .primitives import ORG_LINK_RE, Decoration, SurfacePrimitives

__all__ = [
    "ADDRESS_TAG",
    "ANNOTATION_TAG",
    "BUTTON_TAG",
    "INFO_REF_TAG",
    "LOCATION_TAG",
    "ORG_LINK_RE",
    "WIDGET_TAG",
    "Buffer",
    "BufferSurface",
    "Decoration",
    "SourceLocation",
    "SurfacePrimitives",
    "address_at",
    "goto_address",
    "mark_compilation_errors",
]
