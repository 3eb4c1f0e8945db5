"""
Analyzer - field selection and annotation mapping.

Phase 2 of the pipeline: select the serialized fields of the target type
and plan the editor code generated for each of them.
"""

from __future__ import annotations

from .annotation_mapper import AnnotationMapper, FieldGenerationPlan, NoticeSink, log_notice
from .introspector import is_serialized, select_serialized_fields

__all__ = [
    "AnnotationMapper",
    "FieldGenerationPlan",
    "NoticeSink",
    "is_serialized",
    "log_notice",
    "select_serialized_fields",
]
