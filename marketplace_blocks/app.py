"""
marketplace_blocks : FastAPI app
Démarrer : uvicorn marketplace_blocks.app:app --reload --port 8002
"""
import logging
from typing import Optional

from fastapi import FastAPI

from .blocks import default_registry
from .config import Settings
from .editor import Editor, MemoryRegistrar, Registrar
from .router import router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, registrar: Optional[Registrar] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(title=f"{settings.name} Blocks", version=settings.version, docs_url="/docs")
    app.state.editor = Editor(default_registry(), registrar or MemoryRegistrar(), settings)
    app.include_router(router)

    @app.on_event("startup")
    def startup():
        editor = app.state.editor
        descriptors = editor.register_blocks()
        editor.register_editor_styles()
        log.info("Editor prêt : %d blocs (%s)", len(descriptors), ", ".join(descriptors))

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
