"""Turn loosely-shaped patient records into trusted vitals."""

from .fields import FIELD_PATHS, lookup
from .units import parse_bp_string, to_number
from .vitals import normalize_patient

__all__ = ["FIELD_PATHS", "lookup", "normalize_patient", "parse_bp_string", "to_number"]
