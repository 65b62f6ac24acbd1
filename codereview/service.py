import json
import logging

from codereview.cleaner import clean_response
from codereview.client import OllamaChatClient
from codereview.config import Settings
from codereview.constants import (
    BACKEND_ERROR_PREFIX,
    NO_REVIEW_MESSAGE,
    PLAINTEXT_LANGUAGE,
    PLAINTEXT_MESSAGE,
)
from codereview.models import ReviewRequest, ReviewResponse
from codereview.prompts import build_payload


class ReviewService:
    """Runs one review: validate, build the prompt, call the model, clean the text."""

    def __init__(self, client: OllamaChatClient, settings: Settings):
        self._client = client
        self._settings = settings

    async def review_code(self, request: ReviewRequest) -> ReviewResponse:
        """
        Review the submitted code.

        Never raises; every failure comes back as a ``ReviewResponse`` whose
        text starts with ``Backend Error:``.
        """
        if request.language == PLAINTEXT_LANGUAGE:
            return ReviewResponse(review=PLAINTEXT_MESSAGE)

        try:
            payload = build_payload(request, self._settings)
            logging.info(
                f"Sending review request (lang: {request.language}, code_length: {len(request.code)})"
            )
            logging.debug(f"Ollama payload: {json.dumps(payload)}")

            content = await self._client.chat(payload)

            review = clean_response(content) if content is not None else ""
            if not review:
                review = NO_REVIEW_MESSAGE

            logging.info("Review completed successfully")
            return ReviewResponse(review=review)

        except Exception as e:
            message = str(e) or type(e).__name__
            logging.error(f"Review failed: {message}", exc_info=True)
            return ReviewResponse(review=f"{BACKEND_ERROR_PREFIX}{message}")
