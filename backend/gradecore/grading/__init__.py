"""Grade computation engine: term weighting, scale conversion and summaries."""

from .calculator import component_percentage, compute_term
from .models import OfferingSummary, OverallResult, ScoreRecord, SummaryResult, TermResult
from .normalizer import normalize_component
from .scale import round_to_valid_grade, scale_lookup
from .standing import AcademicStanding, academic_standing, is_nstp_subject
from .summary import summarize, summarize_records, summarize_student
from .weights import resolve_class_type

__all__ = [
    "AcademicStanding",
    "OfferingSummary",
    "OverallResult",
    "ScoreRecord",
    "SummaryResult",
    "TermResult",
    "academic_standing",
    "component_percentage",
    "compute_term",
    "is_nstp_subject",
    "normalize_component",
    "resolve_class_type",
    "round_to_valid_grade",
    "scale_lookup",
    "summarize",
    "summarize_records",
    "summarize_student",
]
