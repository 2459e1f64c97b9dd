"""FinSavvy Advisor - FastAPI Application Entry Point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.finsavvy.api import router
from src.finsavvy.api.database import get_postgres_store_context, set_global_store
from src.finsavvy.api.routes import reset_engine
from src.finsavvy.config import settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Setup the record store for profiles and streaks.
    Opens the Postgres store on app startup and closes it on app shutdown.
    Without a DATABASE_URL records are kept in memory.
    """
    if settings.database_url:
        with get_postgres_store_context(settings.database_url) as store:
            store.setup()
            set_global_store(store)
            reset_engine()

            yield
            # Connection closes automatically when app stops
        set_global_store(None)
        reset_engine()
    else:
        # Development/Memory mode
        from langgraph.store.memory import InMemoryStore

        set_global_store(InMemoryStore())
        reset_engine()
        yield


app = FastAPI(
    title="FinSavvy Advisor",
    description="Conversational financial advisor with an OpenAI-compatible interface",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "service": "finsavvy-advisor"}


@app.get("/")
async def root():
    """Root endpoint with service information."""
    return {
        "service": "FinSavvy Advisor",
        "version": "0.1.0",
        "description": "Conversational financial advisor",
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
