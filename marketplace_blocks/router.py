"""
Router FastAPI : endpoints éditeur + templates.

GET  /editor/blocks            → descripteurs des blocs enregistrés
GET  /editor/categories        → catégories de blocs de l'éditeur
POST /editor/render/{type_id}  → attributs JSON → HTML du bloc
GET  /templates/{name}         → arbre de blocs du template
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse

from .editor import Editor
from .templates import get_template

router = APIRouter(tags=["marketplace_blocks"])


def _editor(request: Request) -> Editor:
    return request.app.state.editor


@router.get("/editor/blocks", summary="Liste les blocs exposés dans l'éditeur")
def blocks(request: Request) -> JSONResponse:
    descriptors = _editor(request).discover_blocks()
    return JSONResponse({type_id: d.model_dump() for type_id, d in descriptors.items()})


@router.get("/editor/categories", summary="Catégories de blocs")
def categories(request: Request) -> list:
    return _editor(request).register_categories([])


@router.post("/editor/render/{type_id}", response_class=HTMLResponse, summary="Rend un bloc")
def render(type_id: str, request: Request,
           attributes: Optional[Dict[str, Any]] = Body(default=None)) -> HTMLResponse:
    """Bloc inconnu ou attributs invalides → contenu vide (un espace), jamais d'erreur."""
    return HTMLResponse(content=_editor(request).render(type_id, attributes or {}))


@router.get("/templates/{name}", summary="Retourne l'arbre de blocs d'un template")
def template(name: str, request: Request) -> dict:
    try:
        tpl = get_template(name, lang=_editor(request).settings.lang)
    except ValueError as e:
        raise HTTPException(404, str(e))
    return tpl.tree
