"""
Prompt construction for the review model.
"""

from typing import Any, Dict, List

from codereview.config import Settings
from codereview.constants import (
    STOP_SEQUENCES,
    SYSTEM_PROMPT,
    TEMPERATURE,
    TOP_P,
    TRUNCATION_MARKER,
    UNKNOWN_LANGUAGE,
    USER_PROMPT_TEMPLATE,
)
from codereview.models import ReviewRequest


def truncate_code(code: str, max_length: int = 2000) -> str:
    """Cut the code down to the first ``max_length`` characters, marking the cut."""
    if len(code) <= max_length:
        return code
    return code[:max_length] + TRUNCATION_MARKER


def build_user_prompt(request: ReviewRequest, max_code_length: int = 2000) -> str:
    """
    Build the per-request user prompt.

    Args:
        request: The incoming review request.
        max_code_length: Number of code characters forwarded to the model.

    Returns:
        The prompt text ending in ``Review:``.
    """
    language = request.language
    if not language or not language.strip():
        language = UNKNOWN_LANGUAGE

    return USER_PROMPT_TEMPLATE.format(
        language=language,
        code=truncate_code(request.code, max_code_length),
    )


def build_messages(request: ReviewRequest, max_code_length: int = 2000) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_user_prompt(request, max_code_length)},
    ]


def build_payload(request: ReviewRequest, settings: Settings) -> Dict[str, Any]:
    """Assemble the non-streaming chat payload sent to the inference endpoint."""
    return {
        "model": settings.MODEL_NAME,
        "messages": build_messages(request, settings.MAX_CODE_LENGTH),
        "stream": False,
        "options": {
            "temperature": TEMPERATURE,
            "top_p": TOP_P,
            "num_predict": settings.NUM_PREDICT,
            "stop": list(STOP_SEQUENCES),
        },
    }
