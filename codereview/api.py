import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from codereview.client import OllamaChatClient
from codereview.config import get_settings
from codereview.constants import HANDLER_ERROR_PREFIX, HEALTH_MESSAGE
from codereview.models import ReviewRequest, ReviewResponse
from codereview.service import ReviewService

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    client = OllamaChatClient(
        base_url=settings.OLLAMA_BASE_URL,
        timeout=settings.TIMEOUT_SECONDS,
    )
    app.state.review_service = ReviewService(client, settings)
    logging.info(f"Using Ollama at {client.url} with model {settings.MODEL_NAME}")
    try:
        yield
    finally:
        await client.aclose()


app = FastAPI(
    title="Code Review API",
    description="Forwards code to a local Ollama model and returns its bug and security review.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_review_service(request: Request) -> ReviewService:
    return request.app.state.review_service


@app.post("/api/review", response_model=ReviewResponse, tags=["Review"])
async def review_code(
    request_data: ReviewRequest,
    service: ReviewService = Depends(get_review_service),
):
    try:
        return await service.review_code(request_data)
    except Exception as e:
        logging.error(f"Unhandled error while reviewing code: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"review": f"{HANDLER_ERROR_PREFIX}{e}"},
        )


@app.get("/api/review/health", response_class=PlainTextResponse, tags=["Health"])
async def health():
    return HEALTH_MESSAGE
