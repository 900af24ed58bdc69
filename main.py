import uvicorn
import time
import logging
from fastapi import FastAPI, Request
from starlette.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from cliagent_mention.api.mention import router as mention_router
from cliagent_mention.api.quick_fix import router as quick_fix_router
from cliagent_mention.api.settings import router as settings_router
from cliagent_mention.core.config import HOST, LOG_DIR, LOG_LEVEL, LOG_TO_FILE, PORT
from cliagent_mention.utils.logging_config import setup_logging

# Initialize enhanced logging
setup_logging(level=LOG_LEVEL, log_dir=LOG_DIR, log_to_file=LOG_TO_FILE)
logger = logging.getLogger("main")

app = FastAPI(title="CLI Agent Mention Service")

# ---------------------------------------------------------------------------
# Logging Middleware
# ---------------------------------------------------------------------------
class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        client_host = request.client.host if request.client else "unknown"
        logger.info(f"Incoming: {request.method} {request.url.path} from {client_host}")

        try:
            response = await call_next(request)
            process_time = (time.time() - start_time) * 1000
            logger.info(
                f"Outgoing: {request.method} {request.url.path} - "
                f"Status: {response.status_code} - "
                f"Time: {process_time:.2f}ms"
            )
            return response
        except Exception as e:
            logger.error(f"Request failed: {request.method} {request.url.path} - Error: {str(e)}")
            raise e

app.add_middleware(LoggingMiddleware)

# ---------------------------------------------------------------------------
# CORS — editor webviews call the service from a local origin
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost",
        "http://127.0.0.1",
        f"http://{HOST}:{PORT}",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Health endpoint
@app.get("/health")
async def health_check():
    return {"status": "ok"}

# Register routers
app.include_router(mention_router)
app.include_router(quick_fix_router)
app.include_router(settings_router)

logger.info("Mention service ready")

if __name__ == "__main__":
    uvicorn.run("main:app", host=HOST, port=PORT, reload=False)
