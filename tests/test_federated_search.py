from __future__ import annotations

import asyncio

from calabriando.application.exceptions import BackendError
from calabriando.application.use_cases.federated_search import FederatedSearchUseCase, build_link
from calabriando.infrastructure.store.memory_backend import MemoryBackend


TABLES = {
    "content": [{"id": "c1", "section": "experience-food", "title": "Gastronomia", "description": "Nduja e peperoncino"}],
    "adventures": [{"id": "a1", "title": "Rafting", "description": "Fiume Lao", "adventure_type": "rafting"}],
    "tours": [
        {
            "id": "t1",
            "title": "Tropea",
            "description": "Costa degli Dei",
            "translations": {"en": {"title": "Tropea day trip", "description": "Coast of the Gods"}},
        }
    ],
    "cultural_sites": [{"id": "s1", "name": "Bronzi di Riace", "description": "Museo"}],
    "restaurants": [{"id": "r1", "name": "Trattoria del Porto", "description": "Pesce fresco"}],
    "bb": [{"id": "b1", "name": "B&B Il Borgo", "description": "Centro storico"}],
}


class _BrokenTableBackend(MemoryBackend):
    async def search(self, table, columns, search_columns, query, limit=5):
        if table == "restaurants":
            raise BackendError("restaurants offline")
        return await super().search(table, columns, search_columns, query, limit)


def test_query_in_one_table_is_tagged_with_that_table_only():
    uc = FederatedSearchUseCase(MemoryBackend(TABLES))

    results = asyncio.run(uc.execute("riace", "it"))

    assert {r.table_name for r in results} == {"cultural_sites"}
    assert results[0].title == "Bronzi di Riace"
    assert results[0].link == "/culture#site-s1"
    assert results[0].label == "Siti Culturali"


def test_results_are_localised():
    uc = FederatedSearchUseCase(MemoryBackend(TABLES))

    results = asyncio.run(uc.execute("tropea", "en"))

    assert len(results) == 1
    assert results[0].title == "Tropea day trip"
    assert results[0].description == "Coast of the Gods"
    assert results[0].link == "/tour/t1"
    assert results[0].label == "Tours"


def test_blank_query_returns_nothing():
    assert asyncio.run(FederatedSearchUseCase(MemoryBackend(TABLES)).execute("   ", "it")) == []


def test_results_merge_across_tables_in_table_order():
    uc = FederatedSearchUseCase(MemoryBackend(TABLES))

    results = asyncio.run(uc.execute("o", "it"))

    order = ["content", "adventures", "tours", "cultural_sites", "restaurants", "bb"]
    positions = [order.index(r.table_name) for r in results]
    assert positions == sorted(positions)
    assert len({r.table_name for r in results}) == 6


def test_failing_table_is_skipped():
    uc = FederatedSearchUseCase(_BrokenTableBackend(TABLES))

    results = asyncio.run(uc.execute("pesce", "it"))

    assert results == []


def test_limit_per_table():
    tables = {"bb": [{"id": f"b{i}", "name": f"Casa {i}", "description": ""} for i in range(10)]}
    uc = FederatedSearchUseCase(MemoryBackend(tables), limit_per_table=5)

    assert len(asyncio.run(uc.execute("casa", "it"))) == 5


def test_links_per_table():
    assert build_link("content", {"section": "experience-culture"}) == "/culture"
    assert build_link("content", {"section": "tour-city"}) == "/tours/city"
    assert build_link("content", {"section": "hero-1"}) == "/"
    assert build_link("adventures", {"adventure_type": "diving"}) == "/adventures/diving"
    assert build_link("adventures", {}) == "/adventures"
    assert build_link("tours", {}) == "/tours"
    assert build_link("restaurants", {"id": "r9"}) == "/restaurants#restaurant-r9"
    assert build_link("bb", {"id": "b9"}) == "/bb#bb-b9"
    assert build_link("unknown", {"id": "x"}) == "#"
