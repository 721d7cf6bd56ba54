"""FastAPI application: chat gateway, plan generation, health check and SPA shell."""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from weekwise.config import Settings, settings
from weekwise.graph.builder import build_graph
from weekwise.prompts.training_plan import default_plan_request
from weekwise.schemas.chat import (
    AzureConfig,
    ChatRequest,
    GeneratePlanRequest,
    HealthResponse,
)
from weekwise.schemas.plan import ChatMessage
from weekwise.utils.constants import DEFAULT_LANGUAGE
from weekwise.utils.errors import classify_provider_error, validation_error

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    base = f"http://localhost:{settings.port}"
    logger.info("Server running at %s", base)
    logger.info("Frontend: %s", base)
    logger.info("Health check: %s/api/health", base)
    if not settings.has_token:
        logger.warning("GITHUB_TOKEN is not set; model calls will fail until it is configured")
    yield
    logger.info("Shutting down server")


app = FastAPI(title="weekwise", version="0.1.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

graph = build_graph(settings)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    error = validation_error(DEFAULT_LANGUAGE, details=str(exc.errors()))
    return JSONResponse(status_code=error.status_code, content=error.to_body())


def _run_gateway(language: str, history: list[ChatMessage], user_message: str, route: str):
    state_input = {
        "language": language,
        "history": history,
        "user_message": user_message,
    }
    try:
        result = graph.invoke(state_input)
    except Exception as exc:
        error = classify_provider_error(exc, language)
        logger.error("%s failed (%s -> %d): %s", route, error.error_type, error.status_code, exc)
        return JSONResponse(status_code=error.status_code, content=error.to_body())
    body = result["body"]
    logger.info("%s replied (structured=%s)", route, body.get("trainingPlan") is not None)
    return JSONResponse(status_code=200, content=body)


@app.post("/api/chat")
def chat(request: ChatRequest):
    """Forward a chat message plus history to the model.

    Returns the model's reply object, or a plain reply when the model ignored
    the JSON contract.
    """
    if not request.message:
        error = validation_error(request.language)
        return JSONResponse(status_code=error.status_code, content=error.to_body())
    return _run_gateway(request.language, request.history, request.message, "chat")


@app.post("/api/generate-plan")
def generate_plan(request: GeneratePlanRequest):
    """Generate a plan in one shot; a language default stands in for a missing prompt."""
    prompt = request.prompt or default_plan_request(request.language)
    return _run_gateway(request.language, [], prompt, "generate-plan")


def health_payload(config: Settings) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        azure_config=AzureConfig(
            endpoint=config.models_endpoint,
            model=config.model_name,
            has_token=config.has_token,
        ),
    )


@app.get("/api/health", response_model=HealthResponse)
def health():
    return health_payload(settings)


@app.get("/{full_path:path}", include_in_schema=False)
def spa_shell(full_path: str):
    """Serve the built single-page app; client-side routing handles the rest."""
    if full_path == "api" or full_path.startswith("api/"):
        raise HTTPException(status_code=404, detail="Not Found")
    dist = Path(settings.static_dir).resolve()
    if full_path:
        candidate = (dist / full_path).resolve()
        if candidate.is_file() and dist in candidate.parents:
            return FileResponse(candidate)
    index = dist / "index.html"
    if not index.is_file():
        raise HTTPException(status_code=404, detail="Frontend build not found")
    return FileResponse(index)


def run() -> None:
    import uvicorn

    uvicorn.run("weekwise.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
