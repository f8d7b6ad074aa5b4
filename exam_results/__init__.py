"""
Exam Results Extractor

Extracts laboratory exam results from free-form text and returns them as
abbreviated "name: value" pairs joined by " | ".
"""

from exam_results.api.models.schema_models import ExtractExamResultsInput, ExtractExamResultsOutput
from exam_results.extraction.flow import extract_exam_results, normalize_results_string
