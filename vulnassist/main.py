from dotenv import load_dotenv


from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from vulnassist.api.api_v1 import router as api_v1
from vulnassist.core.config import settings
from vulnassist.core.logging import setup_logging
from vulnassist.services.suggestions import (
    ModelInvocationError,
    SchemaViolationError,
    ValidationError,
)

load_dotenv()  # Load .env variables into os.environ for libraries (LangSmith, etc.)
setup_logging(settings.LOG_LEVEL)


app = FastAPI(title=settings.PROJECT_NAME)


@app.get("/")
def root():
    return {"message": f"Hello from {settings.PROJECT_NAME}!"}


def _validation_response(detail: str, errors: list) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": detail, "errors": errors, "error": "validation"},
    )


@app.exception_handler(ValidationError)
async def handle_validation_error(_request: Request, exc: ValidationError):
    return _validation_response(str(exc), exc.errors)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(
    _request: Request, exc: RequestValidationError
):
    # Same body as flow-level rejections; context and input are not echoed back
    errors = [
        {"type": err.get("type"), "loc": list(err.get("loc", ())), "msg": err.get("msg")}
        for err in exc.errors()
    ]
    return _validation_response("Invalid request body.", errors)


@app.exception_handler(ModelInvocationError)
async def handle_model_invocation_error(_request: Request, exc: ModelInvocationError):
    # SchemaViolationError subclasses ModelInvocationError; report it distinctly
    error = (
        "schema_violation"
        if isinstance(exc, SchemaViolationError)
        else "model_invocation"
    )
    return JSONResponse(status_code=502, content={"detail": str(exc), "error": error})


app.include_router(api_v1)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
