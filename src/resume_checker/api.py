"""HTTP interface using FastAPI.

Serve with ``resume-checker serve`` or
``uvicorn resume_checker.api:create_app --factory``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI, File, Form, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from resume_checker.config import AppConfig, get_api_key, load_config
from resume_checker.errors import InputError, ResumeCheckError
from resume_checker.pipeline.orchestrator import (
    ResumeAnalysisPipeline,
    create_pipeline,
    error_response,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", summary="Health Check")
async def health_check():
    return {"status": "healthy"}


@router.post("/resume/upload")
async def upload_resume(
    request: Request,
    resume: UploadFile | None = File(None),
    target_role: str | None = Form(None, alias="targetRole"),
):
    file_bytes = await resume.read() if resume is not None else None
    file_name = resume.filename if resume is not None else None

    pipeline: ResumeAnalysisPipeline = request.app.state.pipeline
    try:
        payload = await pipeline.handle_upload(file_bytes, file_name, target_role)
    except ResumeCheckError as e:
        status_code, body = error_response(e)
        return JSONResponse(status_code=status_code, content=body)
    return payload.to_json_dict()


async def invalid_upload_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed upload forms (e.g. ``resume`` sent as text) like a missing file."""
    logger.warning("Invalid upload form: %s", exc.errors())
    status_code, body = error_response(InputError("invalid upload form"))
    return JSONResponse(status_code=status_code, content=body)


def create_app(
    pipeline: ResumeAnalysisPipeline | None = None,
    config: AppConfig | None = None,
) -> FastAPI:
    """Build the FastAPI app.

    When no pipeline is given, one is created at startup from config and the
    ANTHROPIC_API_KEY environment variable.
    """
    config = config or load_config()
    logging.basicConfig(
        level=config.server.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.pipeline is None:
            load_dotenv()
            api_key = get_api_key()
            if not api_key:
                logger.error("ANTHROPIC_API_KEY missing in environment variables")
            app.state.pipeline = create_pipeline(config, api_key)
        yield

    app = FastAPI(title="Resume Checker API", version="0.1.0", lifespan=lifespan)
    app.state.pipeline = pipeline

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, invalid_upload_handler)
    app.include_router(router)
    return app
