"""
Tests for configuration save/load endpoints.
"""

from typing import Any

import pytest
from httpx import AsyncClient


def _buckets(*photo_ids: str) -> list[dict[str, Any]]:
    first = {
        "selectedPhotos": list(photo_ids),
        "photoConfigs": {photo_id: {"forma": True} for photo_id in photo_ids},
    }
    return [first] + [{"selectedPhotos": [], "photoConfigs": {}} for _ in range(4)]


@pytest.mark.asyncio
async def test_save_mints_code(client: AsyncClient):
    """Test saving without a code mints a new one."""
    response = await client.post("/api/v1/configurations/save", json={"buckets": _buckets("p1")})

    assert response.status_code == 200
    code = response.json()["code"]
    assert len(code) == 8


@pytest.mark.asyncio
async def test_save_then_load(client: AsyncClient):
    """Test loading returns the saved buckets with full configs."""
    code = (await client.post("/api/v1/configurations/save", json={"buckets": _buckets("p1", "p2")})).json()["code"]

    response = await client.get(f"/api/v1/configurations/load/{code}")

    assert response.status_code == 200
    data = response.json()
    assert data["code"] == code
    assert data["buckets"][0]["selectedPhotos"] == ["p1", "p2"]
    assert data["buckets"][0]["photoConfigs"]["p2"] == {
        "forma": True,
        "acero": False,
        "encabado": False,
        "detalle1": False,
        "detalle2": False,
        "detalle3": False,
        "comentarios": "",
    }


@pytest.mark.asyncio
async def test_save_with_code_overwrites(client: AsyncClient):
    """Test saving with an existing code overwrites it."""
    code = (await client.post("/api/v1/configurations/save", json={"buckets": _buckets("p1")})).json()["code"]

    response = await client.post(
        "/api/v1/configurations/save",
        json={"buckets": _buckets("p3"), "code": code},
    )

    assert response.json()["code"] == code
    loaded = (await client.get(f"/api/v1/configurations/load/{code}")).json()
    assert loaded["buckets"][0]["selectedPhotos"] == ["p3"]


@pytest.mark.asyncio
async def test_save_with_unknown_code_creates_it(client: AsyncClient):
    """Test saving with an unknown code stores it under that code."""
    response = await client.post(
        "/api/v1/configurations/save",
        json={"buckets": _buckets("p1"), "code": "KEEPME23"},
    )

    assert response.json()["code"] == "KEEPME23"
    assert (await client.get("/api/v1/configurations/load/KEEPME23")).status_code == 200


@pytest.mark.asyncio
async def test_load_unknown_code(client: AsyncClient):
    """Test 404 for a nonexistent share code."""
    response = await client.get("/api/v1/configurations/load/ZZZZ9999")

    assert response.status_code == 404
    assert response.json()["error"] == "not_found"


@pytest.mark.asyncio
async def test_save_rejects_wrong_bucket_count(client: AsyncClient):
    """Test saving fewer than five buckets fails."""
    response = await client.post(
        "/api/v1/configurations/save",
        json={"buckets": _buckets("p1")[:3]},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "validation_failed"


@pytest.mark.asyncio
async def test_save_rejects_invalid_code(client: AsyncClient):
    """Test saving with a malformed code fails."""
    response = await client.post(
        "/api/v1/configurations/save",
        json={"buckets": _buckets("p1"), "code": "bad code!"},
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_save_rejects_overfull_bucket(client: AsyncClient):
    """Test a bucket with more than six photos fails validation."""
    buckets = _buckets(*[f"p{i}" for i in range(7)])

    response = await client.post("/api/v1/configurations/save", json={"buckets": buckets})

    assert response.status_code == 422
