CHAT_PATH = "/api/chat"

TEMPERATURE = 0.3
TOP_P = 0.8
STOP_SEQUENCES = ["```", "END", "---"]

TRUNCATION_MARKER = "\n... (truncated)"
UNKNOWN_LANGUAGE = "unknown"

PLAINTEXT_LANGUAGE = "plaintext"
PLAINTEXT_MESSAGE = "Please write code into a Programming Language"
NO_REVIEW_MESSAGE = "No review generated."
INVALID_RESPONSE_MESSAGE = "Invalid response from Ollama"

BACKEND_ERROR_PREFIX = "Backend Error: "
HANDLER_ERROR_PREFIX = "Error: "

HEALTH_MESSAGE = "Code Review API is running"

# Wording steers the model; keep it verbatim, typo included.
SYSTEM_PROMPT = """You are a code reviewer. Analize only bugs and security based on good practices:

BUGS:
- [Line X] description

SECURITY:
- [Line X] description

If a section has no issues, write "None".
DO NOT include explanations, code snippets, or extra text.
BE CONCISE. Maximum 3 items per section.
"""

USER_PROMPT_TEMPLATE = "Language: {language}\n\nCode:\n{code}\n\nReview:"
