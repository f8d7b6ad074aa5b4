"""
Exam Results Extraction Flow

Formats the extraction prompt with the caller's text, asks the model for a
pipe-delimited summary of laboratory results and normalizes whatever comes
back into a plain string. A reply without a usable value becomes "".
"""
import json
import re
from typing import Any, Dict, Optional, Union

import httpx
from pydantic import ValidationError

from exam_results.api.models.schema_models import ExtractExamResultsInput, ExtractExamResultsOutput
from exam_results.api.prompts.exam_results_extractor_prompt import (
    EXAM_RESULTS_SYSTEM_PROMPT,
    build_exam_results_prompt,
)
from exam_results.config.constants import RESULTS_SEPARATOR
from exam_results.extraction.openrouter_client import request_completion
from exam_results.utils.logger import logger
from exam_results.utils.timing import async_timing_decorator

THINK_PATTERN = re.compile(r"<think>.*?</think>", re.DOTALL)
JSON_BLOCK_PATTERN = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")


def normalize_results_string(value: Optional[str]) -> str:
    """
    Collapse a missing or blank value to "" and tidy the separators.

    Each pair is trimmed, segments without a "name: value" shape are dropped
    and the pairs are rejoined with " | ", so the result never starts or ends
    with a separator.
    """
    if value is None or not value.strip():
        return ""

    pairs = [pair.strip() for pair in value.split("|")]
    return RESULTS_SEPARATOR.join(pair for pair in pairs if is_result_pair(pair))


def is_result_pair(segment: str) -> bool:
    name, separator, result = segment.partition(":")
    return bool(separator and name.strip() and result.strip())


def parse_model_reply(content: Optional[str]) -> Optional[str]:
    """
    Read the results string out of the model's reply.

    The reply is expected to be {"resultsString": "..."}, possibly wrapped in a
    ```json block and preceded by a <think> block.

    Returns:
        The raw results string, or None if the reply holds no usable value
    """
    if content is None:
        return None

    cleaned = THINK_PATTERN.sub("", content).strip()
    if not cleaned:
        return None

    json_match = JSON_BLOCK_PATTERN.search(cleaned)
    if json_match:
        cleaned = json_match.group(1)

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.warning(f"Model reply is not valid JSON: {str(e)}")
        return None

    try:
        output = ExtractExamResultsOutput.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Model reply does not match the output schema: {e.error_count()} error(s)")
        return None

    return output.results_string


@async_timing_decorator
async def extract_exam_results(
    payload: Union[ExtractExamResultsInput, Dict[str, Any]],
    client: Optional[httpx.AsyncClient] = None
) -> ExtractExamResultsOutput:
    """
    Extract abbreviated laboratory exam results from free-form text.

    Args:
        payload: The input model, or a dict validated into one
        client: Optional httpx client forwarded to the OpenRouter call

    Returns:
        Output whose results_string is "abbreviation: value" pairs joined
        by " | ", or "" when no valid result is identified

    Raises:
        pydantic.ValidationError: If a dict payload is invalid
        OpenRouterError: On configuration or provider errors
        httpx.HTTPError: On transport errors
    """
    if not isinstance(payload, ExtractExamResultsInput):
        payload = ExtractExamResultsInput.model_validate(payload)

    if not payload.text.strip():
        logger.info("Empty input text, skipping model call")
        return ExtractExamResultsOutput(results_string="")

    prompt = build_exam_results_prompt(payload.text)
    content = await request_completion(prompt, EXAM_RESULTS_SYSTEM_PROMPT, client=client)

    results_string = normalize_results_string(parse_model_reply(content))
    if not results_string:
        logger.info("No exam results identified in input text")

    return ExtractExamResultsOutput(results_string=results_string)
