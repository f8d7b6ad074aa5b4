"""
OpenRouter chat-completions client used by the exam results flow.

One request per call, no retries. Transport errors raised by httpx are left
to the caller.
"""
from typing import Any, Dict, Optional

import httpx

from exam_results.config.constants import (
    get_openrouter_api_key,
    get_openrouter_model_name,
    get_openrouter_temperature,
    get_openrouter_timeout,
    get_openrouter_url,
)
from exam_results.utils.logger import logger


class OpenRouterError(Exception):
    """Base exception for OpenRouter failures."""
    pass


class OpenRouterConfigError(OpenRouterError):
    """Raised when the client cannot be configured (e.g. missing API key)."""
    pass


class OpenRouterAPIError(OpenRouterError):
    """Raised when the API answers with a non-200 status."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"OpenRouter API error {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


def build_payload(prompt: str, system_prompt: str, model: str, temperature: float) -> Dict[str, Any]:
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": prompt}
        ],
        "temperature": temperature,
        "response_format": {"type": "json_object"},
    }


def extract_message_content(result: Any) -> Optional[str]:
    """
    Pull the assistant message out of a chat-completions response.

    Returns None when the response has no choices or the message has no text content.
    """
    if not isinstance(result, dict):
        return None

    choices = result.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None

    message = choices[0].get("message")
    if not isinstance(message, dict):
        return None

    content = message.get("content")
    if not isinstance(content, str):
        return None
    return content


async def request_completion(
    prompt: str,
    system_prompt: str,
    client: Optional[httpx.AsyncClient] = None
) -> Optional[str]:
    """
    Send a single chat-completions request to OpenRouter.

    Args:
        prompt: User message content
        system_prompt: System message content
        client: Optional shared client. A short-lived one is opened when omitted.

    Returns:
        The assistant message content, or None if the response carried none

    Raises:
        OpenRouterConfigError: If OPENROUTER_API_KEY is not set or a numeric setting is invalid
        OpenRouterAPIError: If the API answers with a non-200 status
    """
    api_key = get_openrouter_api_key()
    if not api_key:
        raise OpenRouterConfigError("OPENROUTER_API_KEY not set in environment")

    model = get_openrouter_model_name()
    try:
        temperature = get_openrouter_temperature()
        timeout = get_openrouter_timeout()
    except ValueError as e:
        raise OpenRouterConfigError(f"Invalid numeric OpenRouter setting: {str(e)}") from e

    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json"
    }
    payload = build_payload(prompt, system_prompt, model, temperature)

    logger.info(f"Requesting exam results extraction from model {model}")
    if client is None:
        async with httpx.AsyncClient(timeout=timeout) as own_client:
            response = await own_client.post(get_openrouter_url(), headers=headers, json=payload)
    else:
        response = await client.post(get_openrouter_url(), headers=headers, json=payload)

    if response.status_code != 200:
        logger.error(f"OpenRouter API error: {response.status_code} - {response.text}")
        raise OpenRouterAPIError(response.status_code, response.text)

    try:
        result = response.json()
    except ValueError:
        logger.warning("OpenRouter answered with a non-JSON body")
        return None

    return extract_message_content(result)
