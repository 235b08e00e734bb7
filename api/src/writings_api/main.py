"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from writings_api.config import settings
from writings_api.routes import hidden_words, numbered, prayers, search, writings
from writings_core import __version__
from writings_core.errors import NotFoundError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    yield


app = FastAPI(
    title="Writings API",
    description="REST API over the Bahá’í Writings corpus",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


# Include routers
app.include_router(writings.router, prefix="/api/writings", tags=["writings"])
app.include_router(prayers.router, prefix="/api/prayers", tags=["prayers"])
app.include_router(hidden_words.router, prefix="/api/hidden-words", tags=["hidden-words"])
app.include_router(numbered.gleanings_router, prefix="/api/gleanings", tags=["gleanings"])
app.include_router(numbered.meditations_router, prefix="/api/meditations", tags=["meditations"])
app.include_router(search.router, prefix="/api/search", tags=["search"])


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
