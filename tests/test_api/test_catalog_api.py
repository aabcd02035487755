"""
Tests for catalog endpoints.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_tag_groups(client: AsyncClient):
    """Test listing the taxonomy in curated order."""
    response = await client.get("/api/v1/tags")

    assert response.status_code == 200
    groups = response.json()["tag_groups"]
    assert [g["id"] for g in groups] == ["tipo", "encabado", "acero", "extras"]
    assert groups[0]["tags"][0] == {"id": "cuchillo", "name": "Cuchillo"}


@pytest.mark.asyncio
async def test_list_tag_groups_by_language(client: AsyncClient):
    """Test per-language taxonomy with fallback for unsupported languages."""
    english = (await client.get("/api/v1/tags", params={"lang": "en"})).json()
    unsupported = (await client.get("/api/v1/tags", params={"lang": "xx"})).json()

    assert english["tag_groups"][0]["name"] == "Type"
    assert unsupported["tag_groups"][0]["name"] == "Tipo"


@pytest.mark.asyncio
async def test_list_photos(client: AsyncClient):
    """Test listing all catalog photos."""
    response = await client.get("/api/v1/photos")

    assert response.status_code == 200
    assert [p["id"] for p in response.json()["photos"]] == ["p1", "p2", "p3", "p4"]


@pytest.mark.asyncio
async def test_get_photo(client: AsyncClient):
    """Test getting a photo by ID."""
    response = await client.get("/api/v1/photos/p2")

    assert response.status_code == 200
    assert response.json()["text"] == "Vaina de cuero"


@pytest.mark.asyncio
async def test_get_photo_not_found(client: AsyncClient):
    """Test 404 for a nonexistent photo."""
    response = await client.get("/api/v1/photos/missing")

    assert response.status_code == 404
    assert response.json()["error"] == "not_found"


@pytest.mark.asyncio
async def test_search_facets(client: AsyncClient):
    """Test facet filters over HTTP."""
    response = await client.get(
        "/api/v1/photos/search",
        params={"acero": "carbono,inox", "encabado": "madera"},
    )

    assert response.status_code == 200
    data = response.json()
    assert [p["id"] for p in data["photos"]] == ["p1"]
    assert data["total"] == 1


@pytest.mark.asyncio
async def test_search_other_tab(client: AsyncClient):
    """Test the synthetic other tab over HTTP."""
    response = await client.get("/api/v1/photos/search", params={"tab": "other"})

    assert [p["id"] for p in response.json()["photos"]] == ["p3"]


@pytest.mark.asyncio
async def test_search_text_uses_language(client: AsyncClient):
    """Test text search matches tag names in the requested language."""
    spanish = await client.get("/api/v1/photos/search", params={"q": "knife"})
    english = await client.get("/api/v1/photos/search", params={"q": "knife", "lang": "en"})

    assert spanish.json()["total"] == 0
    assert [p["id"] for p in english.json()["photos"]] == ["p1"]


@pytest.mark.asyncio
async def test_search_without_filters_returns_all(client: AsyncClient):
    """Test search with no filters returns the whole catalog."""
    response = await client.get("/api/v1/photos/search")

    assert response.json()["total"] == 4
