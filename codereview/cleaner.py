import re

FENCE_WITH_TAG = re.compile(r"```\w*\n", re.ASCII)
FENCE = "```"
PREAMBLE = re.compile(
    r"^(?:(?:here is|here's|the review is)"
    r"(?:[ \t]+(?:the|my)[ \t]+(?:code[ \t]+)?review)?[ \t]*:?"
    r"|review:)\s*",
    re.IGNORECASE,
)
SEPARATOR = "---"


def strip_preamble(text: str) -> str:
    while True:
        stripped = PREAMBLE.sub("", text, count=1)
        if stripped == text:
            return text
        text = stripped


def clean_response(raw: str) -> str:
    """
    Strip model artifacts from a generated review.

    Fences (with or without a language tag) are dropped, a leading
    "Here is the review:"-style preamble is removed and anything after the
    first ``---`` separator is cut off.
    """
    text = raw.strip()

    text = FENCE_WITH_TAG.sub("", text)
    while FENCE in text:
        text = text.replace(FENCE, "")

    text = strip_preamble(text.strip())

    index = text.find(SEPARATOR)
    if index != -1:
        text = text[:index]

    return text.strip()
