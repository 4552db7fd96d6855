"""Models module - declarative record models compiled into generators."""

from valuegen.models.base import RecordModel, FieldCompiler
from valuegen.models.loader import ModelLoader, load_model, MODEL_SCHEMA

__all__ = [
    "RecordModel",
    "FieldCompiler",
    "ModelLoader",
    "load_model",
    "MODEL_SCHEMA",
]
