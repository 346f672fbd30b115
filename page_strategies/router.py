"""
Router FastAPI — endpoints d'administration page_strategies.

GET  /page-strategies/catalog  → templates enregistrés + stratégies actives
POST /page-strategies/build    → relance le build complet → BuildReport
"""
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

router = APIRouter(prefix="/page-strategies", tags=["page_strategies"])


def get_page_router(request: Request):
    page_router = getattr(request.app.state, "page_router", None)
    if page_router is None:
        raise HTTPException(status_code=503, detail="Aucun PageRouter enregistré sur l'app")
    return page_router


@router.get("/catalog", summary="Liste les templates et leurs stratégies")
def catalog(page_router=Depends(get_page_router)) -> JSONResponse:
    """Retourne chaque template avec ses stratégies et ses chemins pré-rendus."""
    resolver = page_router.pipeline.resolver
    store = page_router.pipeline.store

    templates = []
    for page in page_router.registry:
        strategies = resolver.classify(page)
        templates.append({
            "path":             page.path,
            "strategies":       [s.value for s in strategies.tags],
            "revalidate_after": page.revalidate_after.total_seconds() if page.revalidate_after else None,
            "built_paths":      store.paths(page.path),
        })

    return JSONResponse({"templates": templates})


@router.post("/build", summary="Relance le build de tous les templates")
def build(page_router=Depends(get_page_router)) -> dict:
    report = page_router.build()
    return report.model_dump()
