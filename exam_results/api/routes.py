import httpx
from fastapi import APIRouter, HTTPException

from exam_results.utils.logger import logger
from exam_results.api.models.schema_models import ExtractExamResultsInput, ExtractExamResultsOutput
from exam_results.extraction.flow import extract_exam_results
from exam_results.extraction.openrouter_client import OpenRouterAPIError, OpenRouterConfigError

router = APIRouter()


@router.post(
    "/exam-results/extract",
    response_model=ExtractExamResultsOutput,
    tags=["exam-results"]
)
async def extract_exam_results_endpoint(request: ExtractExamResultsInput) -> ExtractExamResultsOutput:
    """
    Extract abbreviated laboratory exam results from free-form text.

    Args:
        request: The request containing the raw text

    Returns:
        The pipe-delimited results string, empty when no result is identified
    """
    try:
        return await extract_exam_results(request)
    except OpenRouterConfigError as e:
        logger.error(f"Extraction service misconfigured: {str(e)}")
        raise HTTPException(status_code=500, detail="Extraction service is not configured")
    except (OpenRouterAPIError, httpx.HTTPError) as e:
        logger.error(f"Error calling OpenRouter API: {str(e)}")
        raise HTTPException(status_code=502, detail="Error extracting exam results")
