# app.py
import logging
import json
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from asyncio import Lock

from config import DAYS_TIMEZONE, DEBUG, PORT
from core.command import Command
from core.errors import DaysError
from models.days import DaysRequest, DaysResponse
from services.days_orchestrator import handle_days


# -----------------------------
# Structured Logging Setup
# -----------------------------
class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(
            {
                "time": self.formatTime(record, self.datefmt),
                "level": record.levelname,
                "name": record.name,
                "message": record.getMessage(),
                "exception": record.exc_text,
            }
        )


logger = logging.getLogger("days_api")
logger.setLevel(logging.INFO)
handler = logging.StreamHandler()
handler.setFormatter(JSONFormatter())
if not logger.handlers:
    logger.addHandler(handler)

# -----------------------------
# FastAPI App
# -----------------------------
app = FastAPI(title="Days API", version="1.0")

# -----------------------------
# Metrics
# -----------------------------
metrics_lock = Lock()
request_counters = {
    Command.UNTIL.value: 0,
    Command.SINCE.value: 0,
    Command.FROM.value: 0,
    "total": 0,
    "rejected": 0,
    "errors": 0,
}


def failure_envelope(error_type: str, code: str, message: str) -> Dict[str, Any]:
    return {"error": {"type": error_type, "code": code, "message": message, "details": {}}}


# -----------------------------
# Error Handlers
# -----------------------------
@app.exception_handler(DaysError)
async def days_error_handler(request: Request, exc: DaysError):
    async with metrics_lock:
        request_counters["rejected"] += 1
    return JSONResponse(status_code=400, content=exc.to_envelope())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    async with metrics_lock:
        request_counters["errors"] += 1
    logger.error(f"[ERROR] path={request.url.path}, exception={exc!r}")
    return JSONResponse(
        status_code=500,
        content=failure_envelope(
            "InternalError",
            "INTERNAL_ERROR",
            str(exc) if DEBUG else "An unexpected error occurred",
        ),
    )


# -----------------------------
# API Endpoints
# -----------------------------
@app.get("/")
async def root():
    return {"message": "Days API is running."}


@app.get("/health")
async def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "timezone": str(DAYS_TIMEZONE) if DAYS_TIMEZONE else "local",
    }


@app.get("/metrics")
async def metrics() -> Dict[str, Any]:
    async with metrics_lock:
        return request_counters.copy()


@app.post("/days", response_model=DaysResponse)
async def days_request(request: DaysRequest) -> DaysResponse:
    async with metrics_lock:
        request_counters["total"] += 1

    logger.info(
        f"[REQUEST_START] command={request.command}, args={request.args}"
    )

    # A fresh "today" is captured inside handle_days for every request
    response = handle_days(request.command, request.args, tz=DAYS_TIMEZONE)

    async with metrics_lock:
        request_counters[response.command.value] += 1

    logger.info(
        f"[REQUEST_DONE] command={response.command.value}, days={response.days}"
    )
    return response


# -----------------------------
# Entrypoint
# -----------------------------
import uvicorn

if __name__ == "__main__":
    uvicorn.run("API_LAYER.app:app", host="0.0.0.0", port=PORT, workers=1)
