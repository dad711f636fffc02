# page_assistant/main.py
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from page_assistant.core.config import settings
from page_assistant.core.errors import AssistantError, QuestionValidationError
from page_assistant.core.logging_config import setup_logging
from page_assistant.models import AskRequest, AskResponse, ErrorResponse, ServiceStatus
from page_assistant.services import ask_service, llm_service

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("=" * 50)
    logger.info("Page Assistant API starting")
    logger.info(f"LLM: {settings.llm_name}")
    logger.info(f"API key: {'configured' if settings.api_key else 'NOT configured'}")
    logger.info("=" * 50)
    yield

# --- FastAPI App Initialization ---
app = FastAPI(
    title="Page Assistant",
    description="An API that answers front-end questions about a web page with an LLM and suggests follow-up actions.",
    version="1.0.0",
    lifespan=lifespan,
)

# --- CORS Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"{request.method} {request.url.path}")
    return await call_next(request)

# --- Error Handlers ---
@app.exception_handler(RequestValidationError)
async def invalid_request_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Request validation failed: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=QuestionValidationError.message).model_dump(exclude_none=True),
    )

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error: {exc}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="Internal server error", details=str(exc)).model_dump(),
    )

# --- Dependencies ---
def get_llm_gateway() -> llm_service.LLMGateway:
    return llm_service.create_gateway(settings)

# --- API Endpoints ---
@app.get("/api/test", response_model=ServiceStatus)
async def service_status():
    """
    Liveness and capability probe for the browser extension.
    """
    return ServiceStatus(
        message="Backend service is working!",
        llm=settings.llm_name,
        timestamp=datetime.now(timezone.utc).isoformat(),
        features=["DOM analysis", "CSS inspection", "Network analysis", "Multi-step reasoning", "Interactive suggestions"],
    )

@app.post("/api/ask", response_model=AskResponse, responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def ask(request: AskRequest, gateway: llm_service.LLMGateway = Depends(get_llm_gateway)):
    """
    Answers a question about the current page, using the page context collected by the extension.
    """
    try:
        return await ask_service.answer_question(request, gateway)
    except AssistantError as e:
        logger.error(f"{e.message}: {e.details}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=e.message, details=e.details).model_dump(),
        )
    except Exception as e:
        # Transport failures and timeouts from the upstream call land here
        logger.exception("Error while answering question")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Server error", details=str(e) or type(e).__name__).model_dump(),
        )

def run():
    logger.info(f"Listening on port {settings.PORT}, test with http://localhost:{settings.PORT}/api/test")
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)

if __name__ == "__main__":
    run()
