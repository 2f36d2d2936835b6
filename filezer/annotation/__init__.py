from filezer.annotation.annotator import Annotator
from filezer.annotation.base import BaseAnnotator
from filezer.annotation.factory import AnnotatorFactory

__all__ = ["Annotator", "AnnotatorFactory", "BaseAnnotator"]
