from fastapi import FastAPI, Request, Depends
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.utils.response import error_response
from app.routers import stations
from app.core.errors import MRTError
from app.core.security import api_key_required
from app.core.logging_config import setup_logging
import logging
import time


# set up logging before anything else logs
setup_logging()
logger = logging.getLogger("mrt")


app = FastAPI(
    title="MRT Schedules API",
    description="API for Jakarta MRT stations and upcoming departures, proxied from the MRT website",
    version="1.0.0",
)

app.include_router(stations.router, dependencies=[Depends(api_key_required)])


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request as: method, path, status_code, elapsed_ms."""
    start = time.time()
    response = await call_next(request)
    elapsed = (time.time() - start) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed:.1f}ms)")
    return response


@app.exception_handler(MRTError)
async def mrt_error_handler(request: Request, exc: MRTError):
    # every domain error is reported the same way, whatever its cause
    logger.info(f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc.message}")
    return JSONResponse(status_code=400, content=error_response(exc.message))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content=error_response(str(exc.detail)))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content=error_response("Internal Server Error"))
