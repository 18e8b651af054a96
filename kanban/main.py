import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import CORS_ORIGINS, LOG_LEVEL
from .database import create_tables
from .errors import KanbanError
from .routers import tasks

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Kanban Board API",
    description="Single-board Kanban task tracker",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(tasks.router, prefix="/api", tags=["tasks"])


@app.exception_handler(KanbanError)
async def kanban_error_handler(request: Request, exc: KanbanError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Create tables on startup
@app.on_event("startup")
def on_startup():
    create_tables()


@app.get("/")
def read_root():
    return {"message": "Kanban Board API"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}
