from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from calabriando.api.v1.schemas import BookableItemSchema, SiteContentSchema
from calabriando.application.exceptions import BackendError, ContentLoadError, ItemNotFoundError
from calabriando.application.use_cases.catalog import CatalogUseCase
from calabriando.application.use_cases.load_site_content import LoadSiteContentUseCase
from calabriando.application.utils.messages import normalize_language, t
from calabriando.core.config import settings
from calabriando.domain.entities.item_kind import ItemKind
from calabriando.wiring.dependencies import get_catalog_use_case, get_site_content_use_case

router = APIRouter()


@router.get("/site-content", response_model=SiteContentSchema)
async def site_content(
    lang: str | None = Query(None),
    uc: LoadSiteContentUseCase = Depends(get_site_content_use_case),
):
    language = normalize_language(lang, settings.DEFAULT_LANGUAGE)
    try:
        content = await uc.execute()
    except ContentLoadError as e:
        raise HTTPException(status_code=503, detail=t("load_error", language, reason=str(e)))
    return SiteContentSchema(contents=content.contents, adventures=content.adventures)


@router.get("/items/{kind}", response_model=list[BookableItemSchema])
async def list_items(
    kind: ItemKind,
    lang: str | None = Query(None),
    uc: CatalogUseCase = Depends(get_catalog_use_case),
):
    language = normalize_language(lang, settings.DEFAULT_LANGUAGE)
    try:
        items = await uc.list_items(kind)
    except BackendError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return [BookableItemSchema.from_entity(item, language) for item in items]


@router.get("/items/{kind}/{item_id}", response_model=BookableItemSchema)
async def get_item(
    kind: ItemKind,
    item_id: str,
    lang: str | None = Query(None),
    uc: CatalogUseCase = Depends(get_catalog_use_case),
):
    language = normalize_language(lang, settings.DEFAULT_LANGUAGE)
    try:
        item = await uc.get_item(kind, item_id)
    except ItemNotFoundError:
        raise HTTPException(status_code=404, detail=t("item_not_found", language))
    except BackendError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return BookableItemSchema.from_entity(item, language)
