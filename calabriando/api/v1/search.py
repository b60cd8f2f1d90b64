from fastapi import APIRouter, Depends, Query

from calabriando.api.v1.schemas import SearchResponseSchema, SearchResultSchema
from calabriando.application.use_cases.federated_search import FederatedSearchUseCase
from calabriando.application.utils.messages import normalize_language
from calabriando.core.config import settings
from calabriando.wiring.dependencies import get_search_use_case

router = APIRouter()


@router.get("/search", response_model=SearchResponseSchema)
async def search(
    q: str = Query(""),
    lang: str | None = Query(None),
    uc: FederatedSearchUseCase = Depends(get_search_use_case),
):
    language = normalize_language(lang, settings.DEFAULT_LANGUAGE)
    results = await uc.execute(q, language)
    return SearchResponseSchema(
        query=q,
        results=[
            SearchResultSchema(
                id=r.id,
                table_name=r.table_name,
                label=r.label,
                title=r.title,
                description=r.description,
                link=r.link,
            )
            for r in results
        ],
    )
