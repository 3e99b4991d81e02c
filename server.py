"""
Surah Quiz Server

FastAPI server exposing the quiz engine:
- Chapter list and verses via the remote text source
- Fill-in-the-blank question generation per chapter
- Question-by-question session (answer, advance, restart)
- Final score
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import app_state
from surah_quiz.config import QuizConfig
from surah_quiz.exceptions import DataSourceError
from surah_quiz.router import router as quiz_router

logger = logging.getLogger("surah_quiz.server")


def setup_logging(level: str = "INFO") -> None:
    """Configura o logger raiz."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


# =============================================================================
# FASTAPI APP
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage app lifecycle."""
    config = QuizConfig.from_env()
    setup_logging(config.log_level)
    if app_state.source is None:
        app_state.configure(config)

    logger.info("Starting Surah Quiz...")
    try:
        await app_state.load_chapters()
    except DataSourceError as e:
        # Sem lista: o cliente tenta de novo via GET /quiz/chapters
        logger.error(f"Lista de surahs indisponivel no startup: {e.message}")

    yield

    await app_state.cleanup()
    logger.info("Surah Quiz stopped")


app = FastAPI(
    title="Surah Quiz",
    description="Fill-in-the-blank quiz over the verses of a surah",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:8081",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:8081",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(quiz_router)


# =============================================================================
# HEALTH ENDPOINTS
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    session = app_state.session
    return {
        "status": "ok",
        "chapters_loaded": len(app_state.chapters),
        "session_active": session is not None,
        "loading": app_state.loading,
        "message": "Surah Quiz v1",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8001)
