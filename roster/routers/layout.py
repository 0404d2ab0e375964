from fastapi import APIRouter, Query

from roster.services.layout import table_max_height

router = APIRouter(prefix="/layout", tags=["layout"])


@router.get("")
def layout(
    viewport: float = Query(..., ge=0),
    header: float | None = Query(None, ge=0),
    form: float | None = Query(None, ge=0),
):
    return {"max_height": table_max_height(viewport, header, form)}
