"""Document comparison exports."""

from .comparison_contracts import ComparisonOutcome, ComparisonRequest
from .document_comparison_use_case import DocumentComparisonError, execute_document_comparison

__all__ = [
    "ComparisonRequest",
    "ComparisonOutcome",
    "DocumentComparisonError",
    "execute_document_comparison",
]
