"""tildepad - a small terminal text editor."""

import logging

from .annotated_text import AnnotatedText, Annotation, AnnotationType
from .document import Document, Location
from .line import Line

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'AnnotatedText',
    'Annotation',
    'AnnotationType',
    'Document',
    'Line',
    'Location',
]
