from __future__ import annotations

import logging
from pathlib import Path

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException

import config
from api.receiver import receive_upload
from api.schemas import ErrorResponse, UploadResponse
from pipeline.formatting import format_score
from pipeline.graph import pipeline
from pipeline.state import NO_FILE, initial_state
from vision.detector import LabelDetector
from vision.errors import ExternalServiceError

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
PUBLIC_DIR = BASE_DIR.parent / "public"

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
templates.env.filters["percent"] = format_score

app = FastAPI(
    title="Image Label Detection",
    version="1.0.0",
    description="Upload an image and list the labels Google Cloud Vision detects in it.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=str(PUBLIC_DIR)), name="static")


def get_detector() -> LabelDetector:
    """Detector bound to the process-wide vision client."""
    return LabelDetector()


def wants_json(request: Request) -> bool:
    """JSON only when the client asks for it and does not accept HTML."""
    accept = request.headers.get("accept", "")
    return "application/json" in accept and "text/html" not in accept


def error_response(request: Request, status_code: int, message: str):
    if wants_json(request):
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(message=message).model_dump(),
        )
    return templates.TemplateResponse(
        request,
        "error.html",
        {"message": message},
        status_code=status_code,
    )


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return error_response(request, exc.status_code, str(exc.detail))


@app.exception_handler(ExternalServiceError)
async def external_service_error(request: Request, exc: ExternalServiceError):
    log.error("Vision service call failed for %s: %s", request.url.path, exc)
    return error_response(request, 500, str(exc))


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    log.exception("Unhandled error while processing %s", request.url.path)
    return error_response(request, 500, str(exc))


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    """
    Upload form posting to `/uploadImage`.
    """
    return templates.TemplateResponse(request, "index.html", {})


@app.post("/uploadImage")
async def upload_image(
    request: Request,
    detector: LabelDetector = Depends(get_detector),
):
    """
    Run label detection on the uploaded `file` and render the result.

    A text value under `file` counts as a missing upload.

    Responds with HTML unless the client asks for JSON.
    """
    form = await request.form()
    image = await receive_upload(form.get("file"))

    result = await pipeline.ainvoke(
        initial_state(image),
        config={"configurable": {"detector": detector}},
    )

    if result["stage"] == NO_FILE:
        return error_response(request, 400, result["error"])

    labels = result.get("labels") or []
    lines = result.get("lines") or []

    if wants_json(request):
        body = UploadResponse(
            image_src=result["image_src"],
            labels=labels,
            lines=lines,
            total=len(lines),
        )
        return JSONResponse(content=body.model_dump())

    return templates.TemplateResponse(
        request,
        "result.html",
        {"image_src": result["image_src"], "labels": labels},
    )


@app.get("/graph/ascii")
def graph_ascii():
    """
    Return an ASCII representation of the request graph.
    """
    return {"graph": pipeline.get_graph().draw_ascii()}


@app.get("/graph/mermaid")
def graph_mermaid():
    """
    Return Mermaid source for visualizing the request graph.
    """
    return {"mermaid": pipeline.get_graph().draw_mermaid()}


@app.get("/health")
def health():
    """
    Basic health check.
    """
    return {"status": "ok"}


def main() -> None:
    log.info("Server is running on http://localhost:%d", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
