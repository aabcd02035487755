"""
Pytest configuration and fixtures for FotoCRM tests.
"""

import json
from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from fotocrm.catalog.tag_index import TagIndex
from fotocrm.clients.http import CatalogClient, RemoteConfigurationClient
from fotocrm.db.base import Base
from fotocrm.db.session import get_db
from fotocrm.dependencies import get_catalog_repository
from fotocrm.main import app
from fotocrm.schemas.catalog import Photo, TagGroup
from fotocrm.services.catalog_service import CatalogRepository
from fotocrm.storage.local import FileSlotStore

TEST_API_BASE_URL = "http://test/api/v1"


@pytest.fixture
def tag_groups_data() -> list[dict[str, Any]]:
    """Taxonomy with four "tipo" tags so the synthetic tab exists."""
    return [
        {
            "id": "tipo",
            "name": "Tipo",
            "tags": [
                {"id": "cuchillo", "name": "Cuchillo"},
                {"id": "vaina", "name": "Vaina"},
                {"id": "navaja", "name": "Navaja"},
                {"id": "hacha", "name": "Hacha"},
            ],
        },
        {
            "id": "encabado",
            "name": "Encabado",
            "tags": [
                {"id": "madera", "name": "Madera"},
                {"id": "asta", "name": "Asta de ciervo"},
            ],
        },
        {
            "id": "acero",
            "name": "Acero",
            "tags": [
                {"id": "carbono", "name": "Carbono"},
                {"id": "inox", "name": "Inoxidable"},
            ],
        },
        {
            "id": "extras",
            "name": "Extras",
            "tags": [
                {"id": "grabado", "name": "Grabado láser"},
            ],
        },
    ]


@pytest.fixture
def photos_data() -> list[dict[str, Any]]:
    return [
        {"id": "p1", "url": "uploads/p1.jpg", "text": "Cuchillo de caza", "tags": ["cuchillo", "madera", "carbono"]},
        {"id": "p2", "url": "uploads/p2.jpg", "text": "Vaina de cuero", "tags": ["vaina", "inox"]},
        {"id": "p3", "url": "uploads/p3.jpg", "text": "Hacha forjada", "tags": ["hacha", "carbono", "grabado"]},
        {"id": "p4", "url": "uploads/p4.jpg", "text": "Acéro pulido", "tags": ["navaja", "asta", "ghost"]},
    ]


@pytest.fixture
def tag_groups(tag_groups_data) -> list[TagGroup]:
    return [TagGroup.model_validate(group) for group in tag_groups_data]


@pytest.fixture
def photos(photos_data) -> list[Photo]:
    return [Photo.model_validate(photo) for photo in photos_data]


@pytest.fixture
def tag_index(tag_groups) -> TagIndex:
    return TagIndex(tag_groups, other_tab_label="Otros")


@pytest.fixture
def catalog_dir(tmp_path, tag_groups_data, photos_data):
    """Catalog files on disk, with an English taxonomy override."""
    path = tmp_path / "catalog"
    path.mkdir()
    (path / "tags.json").write_text(
        json.dumps({"tag_groups": tag_groups_data}, ensure_ascii=False), encoding="utf-8"
    )
    english = json.loads(json.dumps(tag_groups_data))
    english[0]["name"] = "Type"
    english[0]["tags"][0]["name"] = "Knife"
    (path / "tags.en.json").write_text(json.dumps({"tag_groups": english}), encoding="utf-8")
    (path / "photos.json").write_text(
        json.dumps({"photos": photos_data}, ensure_ascii=False), encoding="utf-8"
    )
    return path


@pytest_asyncio.fixture(scope="function")
async def db_engine(tmp_path):
    """Create a test database engine."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture(scope="function")
async def client(db_session, catalog_dir) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""

    async def override_get_db():
        yield db_session

    def override_get_catalog_repository():
        return CatalogRepository(base_path=str(catalog_dir))

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_catalog_repository] = override_get_catalog_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def remote_client(client) -> RemoteConfigurationClient:
    """Configuration store client talking to the in-process app."""
    return RemoteConfigurationClient(base_url=TEST_API_BASE_URL, client=client)


@pytest.fixture
def catalog_client(client) -> CatalogClient:
    return CatalogClient(base_url=TEST_API_BASE_URL, client=client)


@pytest.fixture
def slot_store(tmp_path) -> FileSlotStore:
    return FileSlotStore(base_path=str(tmp_path / "state"))
