import asyncio
from unittest import mock

from codereview.client import InferenceError, InferenceTimeoutError
from codereview.config import Settings
from codereview.models import ReviewRequest
from codereview.service import ReviewService


def make_service(**chat_kwargs):
    client = mock.Mock()
    client.chat = mock.AsyncMock(**chat_kwargs)
    return ReviewService(client, Settings()), client


def review(service, code="x = 1", language="python"):
    return asyncio.run(service.review_code(ReviewRequest(code=code, language=language)))


def test_plaintext_makes_no_call():
    service, client = make_service(return_value="ignored")

    response = review(service, code="hello", language="plaintext")

    assert response.review == "Please write code into a Programming Language"
    client.chat.assert_not_called()


def test_review_is_cleaned():
    service, client = make_service(return_value="Here's ```\nBUGS:\n- None```")

    response = review(service)

    assert response.review == "BUGS:\n- None"
    client.chat.assert_awaited_once()


def test_empty_content_means_no_review():
    for content in [None, "", "  ```  ", "---\nonly notes"]:
        service, _ = make_service(return_value=content)
        assert review(service).review == "No review generated."


def test_invalid_shape_is_backend_error():
    service, _ = make_service(side_effect=InferenceError("Invalid response from Ollama"))
    assert review(service).review == "Backend Error: Invalid response from Ollama"


def test_timeout_is_backend_error():
    service, _ = make_service(side_effect=InferenceTimeoutError("Ollama request timed out after 60 seconds"))
    assert review(service).review == "Backend Error: Ollama request timed out after 60 seconds"


def test_unexpected_error_never_raises():
    service, _ = make_service(side_effect=RuntimeError())
    assert review(service).review == "Backend Error: RuntimeError"


def test_logs_request_and_success():
    service, _ = make_service(return_value="BUGS:\n- None")

    with mock.patch("codereview.service.logging") as mock_logging:
        review(service, code="abc", language="go")

    messages = [c.args[0] for c in mock_logging.info.call_args_list]
    assert "Sending review request (lang: go, code_length: 3)" in messages
    assert "Review completed successfully" in messages


def test_logs_failure_at_error_level():
    service, _ = make_service(side_effect=InferenceError("boom"))

    with mock.patch("codereview.service.logging") as mock_logging:
        review(service)

    mock_logging.error.assert_called_once()
    assert "boom" in mock_logging.error.call_args.args[0]
