import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from agri_edu.config import Settings, settings as default_settings
from agri_edu.db.session import Database
from agri_edu.errors import AppError
from agri_edu.middleware import LoggingMiddleware
from agri_edu.routers import (
    additional_videos,
    catalogue,
    chat,
    likes,
    progress,
    qna,
    questions,
    quizzes,
    replies,
    videos,
)

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
    if settings.log_sql:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
    else:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request", "error": _validation_message(exc)},
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(
            f"Store error: {exc.__class__.__name__}: {exc}",
            exc_info=True,
            extra={"path": str(request.url), "method": request.method},
        )
        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error", "error": str(exc)},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception: {exc.__class__.__name__}: {exc}",
            exc_info=True,
            extra={"path": str(request.url), "method": request.method},
        )
        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error", "error": str(exc)},
        )


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings)

    app = FastAPI(title="Agri-Edu API", version="0.1.0", root_path=settings.root_path)
    app.state.settings = settings
    app.state.db = database or Database(settings.database_url)

    # first, so that every request is logged
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(videos.router, prefix="/videos", tags=["videos"])
    app.include_router(additional_videos.router, prefix="/additional-videos", tags=["videos"])
    app.include_router(quizzes.router, prefix="/quizzes", tags=["quizzes"])
    app.include_router(questions.router, prefix="/questions", tags=["quizzes"])
    app.include_router(catalogue.animals_router, prefix="/animals", tags=["catalogue"])
    app.include_router(catalogue.crops_router, prefix="/crops", tags=["catalogue"])
    app.include_router(qna.router, prefix="/qna", tags=["qna"])
    app.include_router(replies.router, prefix="/replies", tags=["qna"])
    app.include_router(likes.router, prefix="/likes", tags=["likes"])
    app.include_router(progress.router, prefix="/progress", tags=["progress"])
    app.include_router(chat.router, prefix="/chat", tags=["chat"])

    @app.on_event("startup")
    async def startup_event():
        logger.info("Starting Agri-Edu API server...")
        db: Database = app.state.db
        await db.connect()
        if settings.create_tables:
            await db.create_all()
        target = db.url.split("@")[1] if "@" in db.url else "configured"
        logger.info(f"Database: {target}")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Shutting down server...")
        await app.state.db.disconnect()

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
