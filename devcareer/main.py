"""
FastAPI application for the DevCareer AI tools.
"""
from __future__ import annotations

import datetime
from contextlib import asynccontextmanager
from typing import NoReturn

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from devcareer import __version__
from devcareer.catalog import AVAILABLE_TOOLS, random_highlight
from devcareer.config import logger, settings
from devcareer.gemini_provider import AIServiceError, GeminiProvider
from devcareer.models import (
    AlgorithmExplanationRequest,
    ATSResumeRequest,
    CodeGenerationData,
    CodeGenerationRequest,
    CodeRequest,
    ComplexityResponse,
    ErrorResponse,
    InterviewQuestionsRequest,
    ResumeAnalysisRequest,
    RoadmapRequest,
    ToolResponse,
)
from devcareer.rate_limit import create_redis_client, rate_limit_middleware
from devcareer.tools import AIToolService


# ---------------------------------------------------------------------------
# Dependencies and error mapping
# ---------------------------------------------------------------------------


def get_tool_service(request: Request) -> AIToolService:
    return request.app.state.tools


def require_ai_service(service: AIToolService = Depends(get_tool_service)) -> AIToolService:
    if not service.available:
        raise HTTPException(status_code=503, detail="AI service is not configured. Please try again later.")
    return service


def raise_ai_error(exc: AIServiceError, failure_message: str) -> NoReturn:
    """Translate an AIServiceError into the HTTP error the client sees."""
    if exc.transient:
        if exc.status_code == 429:
            detail = "Too many requests. Please wait a moment before trying again."
        else:
            detail = "AI service is temporarily unavailable. Please try again in a few minutes."
        raise HTTPException(status_code=503, detail=detail)
    raise HTTPException(status_code=500, detail=failure_message)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------


tools_router = APIRouter()
_error_responses = {500: {"model": ErrorResponse}, 503: {"model": ErrorResponse}}


@tools_router.get("", response_model=ToolResponse)
async def get_available_tools():
    return ToolResponse(message="Available AI tools", data=AVAILABLE_TOOLS)


@tools_router.get("/highlight", response_model=ToolResponse)
async def get_highlight():
    return ToolResponse(message="Tool highlight", data=random_highlight())


@tools_router.post("/generate-code", response_model=ToolResponse, responses=_error_responses)
async def generate_code(
    request: CodeGenerationRequest,
    service: AIToolService = Depends(require_ai_service),
):
    try:
        code = await service.generate_code(request.problemStatement, request.language)
    except AIServiceError as exc:
        raise_ai_error(exc, "Failed to generate code. Please try again.")
    data = CodeGenerationData(code=code, language=request.language, problemStatement=request.problemStatement)
    return ToolResponse(message="Code generated successfully", data=data)


@tools_router.post("/analyze-resume", response_model=ToolResponse, responses=_error_responses)
async def analyze_resume(
    request: ResumeAnalysisRequest,
    service: AIToolService = Depends(require_ai_service),
):
    try:
        analysis = await service.analyze_resume(request.resumeText)
    except AIServiceError as exc:
        raise_ai_error(exc, "Failed to analyze resume. Please try again.")
    return ToolResponse(message="Resume analyzed successfully", data=analysis)


@tools_router.post("/generate-questions", response_model=ToolResponse, responses=_error_responses)
async def generate_questions(
    request: InterviewQuestionsRequest,
    service: AIToolService = Depends(require_ai_service),
):
    try:
        questions = await service.generate_interview_questions(request.resumeText, request.jobTitle)
    except AIServiceError as exc:
        raise_ai_error(exc, "Failed to generate interview questions. Please try again.")
    return ToolResponse(message="Interview questions generated successfully", data=questions)


@tools_router.post("/review-code", response_model=ToolResponse, responses=_error_responses)
async def review_code(
    request: CodeRequest,
    service: AIToolService = Depends(require_ai_service),
):
    try:
        review = await service.review_code(request.code, request.language)
    except AIServiceError as exc:
        raise_ai_error(exc, "Failed to review code. Please try again.")
    return ToolResponse(message="Code reviewed successfully", data=review)


@tools_router.post("/explain-algorithm", response_model=ToolResponse, responses=_error_responses)
async def explain_algorithm(
    request: AlgorithmExplanationRequest,
    service: AIToolService = Depends(require_ai_service),
):
    try:
        explanation = await service.explain_algorithm(request.algorithmName, request.complexity)
    except AIServiceError as exc:
        raise_ai_error(exc, "Failed to explain algorithm. Please try again.")
    return ToolResponse(message="Algorithm explained successfully", data=explanation)


@tools_router.post("/generate-roadmap", response_model=ToolResponse, responses=_error_responses)
async def generate_roadmap(
    request: RoadmapRequest,
    service: AIToolService = Depends(require_ai_service),
):
    try:
        roadmap = await service.generate_roadmap(
            request.domain, request.experienceLevel, request.focusAreas
        )
    except AIServiceError as exc:
        raise_ai_error(exc, "Failed to generate roadmap. Please try again.")
    return ToolResponse(message="Learning roadmap generated successfully", data=roadmap)


@tools_router.post("/generate-ats-resume", response_model=ToolResponse, responses=_error_responses)
async def generate_ats_resume(
    request: ATSResumeRequest,
    service: AIToolService = Depends(require_ai_service),
):
    try:
        resume = await service.generate_ats_resume(
            request.originalResume, request.analysis, request.targetJobTitle
        )
    except AIServiceError as exc:
        raise_ai_error(exc, "Failed to generate ATS-optimized resume. Please try again.")
    return ToolResponse(message="ATS-optimized resume generated successfully", data=resume)


@tools_router.post("/analyze-complexity", response_model=ComplexityResponse, responses=_error_responses)
async def analyze_complexity(
    request: CodeRequest,
    service: AIToolService = Depends(get_tool_service),
):
    """
    Analyze time and space complexity.

    Works without Gemini: transient upstream failures and an unconfigured
    provider fall back to the heuristic analyzer, flagged via isFallback.
    """
    try:
        outcome = await service.analyze_complexity(request.code, request.language)
    except AIServiceError as exc:
        raise_ai_error(exc, "Failed to analyze time complexity. Please try again.")

    if outcome.is_fallback:
        message = (
            "Time complexity analysis completed using fallback analysis "
            "(AI service temporarily unavailable)"
        )
    else:
        message = "Time complexity analysis completed successfully"
    return ComplexityResponse(message=message, data=outcome.report, isFallback=outcome.is_fallback)


health_router = APIRouter()


@health_router.get("/health")
async def health(request: Request):
    service: AIToolService = request.app.state.tools
    status = "ok" if service.available else "degraded"
    response = {
        "status": status,
        "version": __version__,
        "model": service.model_name,
        "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
    }
    if not service.available:
        response["issues"] = ["gemini_unavailable"]
    return response


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------


async def security_headers_middleware(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response


async def request_size_middleware(request: Request, call_next):
    if request.method in ("POST", "PUT", "PATCH"):
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > settings.MAX_REQUEST_SIZE:
            return JSONResponse(
                status_code=413,
                content={
                    "success": False,
                    "message": f"Request body exceeds {settings.MAX_REQUEST_SIZE} bytes",
                },
            )
    return await call_next(request)


# ---------------------------------------------------------------------------
# FastAPI app assembly
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    logger.info("DevCareer AI tools v%s starting", __version__)
    logger.info("Model: %s", settings.GEMINI_MODEL)
    logger.info("Rate limiting: %s", "enabled" if settings.rate_limiting_enabled else "disabled")

    provider = GeminiProvider(settings.gemini_config())
    app.state.tools = AIToolService(provider)
    if provider.available:
        logger.info("Gemini provider ready")
    else:
        logger.warning("Gemini provider unavailable - complexity analysis will use the fallback analyzer")

    redis_client = None
    try:
        redis_client = await create_redis_client()
    except RuntimeError:
        if not settings.DEBUG:
            raise
        logger.warning("Continuing without Redis (DEBUG mode)")
    app.state.redis = redis_client

    yield

    logger.info("Shutting down")
    if redis_client:
        try:
            await redis_client.aclose()
            logger.info("Redis connection closed")
        except Exception as exc:
            logger.error("Error closing Redis: %s", exc)


app = FastAPI(
    title="DevCareer AI Tools API",
    description="AI-assisted developer and career tools powered by Gemini",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log validation errors without exposing request values."""
    errors = exc.errors()
    error_details = [
        {"field": err.get("loc", [])[-1] if err.get("loc") else "unknown", "type": err.get("type")}
        for err in errors[:5]
    ]
    logger.warning("Validation error on %s %s: %s", request.method, request.url.path, error_details)
    message = errors[0].get("msg", "Invalid request format") if errors else "Invalid request format"
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "message": message.removeprefix("Value error, "),
            "errors": [
                {"field": detail["field"], "message": err.get("msg")}
                for detail, err in zip(error_details, errors)
            ],
        },
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled exception on %s %s: %s: %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        str(exc)[:200],
    )
    return JSONResponse(status_code=500, content={"success": False, "message": "Internal server error"})


app.middleware("http")(security_headers_middleware)
app.middleware("http")(request_size_middleware)
app.middleware("http")(rate_limit_middleware)

cors_origins = settings.cors_origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials="*" not in cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-RateLimit-Limit", "X-RateLimit-Remaining", "X-RateLimit-Reset", "Retry-After"],
)


@app.get("/")
async def root(request: Request):
    service: AIToolService = request.app.state.tools
    return {
        "name": "DevCareer AI Tools API",
        "version": __version__,
        "status": "ok" if service.available else "degraded",
    }


app.include_router(health_router, tags=["health"])
app.include_router(tools_router, prefix="/api/ai-tools", tags=["ai-tools"])
