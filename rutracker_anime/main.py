import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from rutracker_anime.api.routes import router
from rutracker_anime.utils.http_client import http_client
from rutracker_anime.config.settings import settings
from rutracker_anime.utils.logger import setup_logger, provider_logger, api_logger


# ===========================
# Logger Setup
# ===========================
setup_logger(settings.LOG_LEVEL)


# ===========================
# Custom Middleware
# ===========================
class LoguruMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        except Exception as e:
            api_logger.error(f"Exception: {type(e).__name__}")
            raise
        finally:
            process_time = time.time() - start_time
            if request.url.path != "/health":
                api_logger.debug(f"{request.method} {request.url.path} - {status_code} - {process_time:.2f}s")
        return response


# ===========================
# Application Lifecycle
# ===========================
@asynccontextmanager
async def lifespan(app: FastAPI):
    yield

    await http_client.close()


# ===========================
# FastAPI Application Setup
# ===========================
app = FastAPI(
    title=settings.PROVIDER_NAME,
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(LoguruMiddleware)
app.include_router(router)


# ===========================
# Application Entry Point
# ===========================
if __name__ == "__main__":
    provider_logger.info(f"Starting {settings.PROVIDER_NAME} provider")
    provider_logger.info(f"Server: http://localhost:{settings.PORT}/")
    provider_logger.info(f"TorAPI: {settings.TORAPI_URL} (source: {settings.TORAPI_SOURCE})")
    provider_logger.info(f"Proxy: {'enabled' if settings.PROXY_URL else 'disabled'}")
    provider_logger.info(f"Log level: {settings.LOG_LEVEL}")

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.PORT,
        log_config=None
    )
