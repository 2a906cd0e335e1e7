"""/environment, /coerce API 통합 테스트

TestClient + in-memory SQLite.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from worldargs.api.coerce import router as coerce_router
from worldargs.api.environment import router as environment_router
from worldargs.config import Settings
from worldargs.db.models import Base
from worldargs.services.coercion_service import CoercionService
from worldargs.services.environment_service import EnvironmentService


@pytest.fixture()
def client():
    """TestClient + 인메모리 환경 세팅"""
    db_engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(db_engine)
    session_factory = sessionmaker(bind=db_engine)
    db = session_factory()

    app = FastAPI()
    app.include_router(environment_router)
    app.include_router(coerce_router)
    app.state.environment_service = EnvironmentService(db)
    app.state.coercion_service = CoercionService(Settings())

    tc = TestClient(app)
    assert tc.post("/environment/worlds", json={"name": "world"}).status_code == 200

    yield tc

    db.close()


def _spawn(tc: TestClient, **body) -> dict:
    body.setdefault("world", "world")
    resp = tc.post("/environment/entities", json=body)
    assert resp.status_code == 200, resp.text
    return resp.json()


# ── environment ─────────────────────────────────────────────


class TestEnvironmentAPI:
    def test_create_world_duplicate(self, client) -> None:
        resp = client.post("/environment/worlds", json={"name": "world"})
        assert resp.status_code == 400

    def test_place_block(self, client) -> None:
        resp = client.post(
            "/environment/blocks",
            json={"world": "world", "x": 0, "y": 65, "z": 12, "material": "stone"},
        )
        assert resp.status_code == 200
        assert resp.json()["material"] == "STONE"

    def test_place_block_unknown_world(self, client) -> None:
        resp = client.post(
            "/environment/blocks",
            json={"world": "nether", "x": 0, "y": 0, "z": 0, "material": "stone"},
        )
        assert resp.status_code == 400

    def test_spawn_entity(self, client) -> None:
        data = _spawn(client, entity_type="zombie", x=0.5, y=64, z=10.5)
        assert data["entity_type"] == "Zombie"
        assert data["world"] == "world"

    def test_spawn_invalid(self, client) -> None:
        resp = client.post(
            "/environment/entities",
            json={"world": "world", "entity_type": "pig", "x": 0, "y": 0, "z": 0, "held_item": "apple"},
        )
        assert resp.status_code == 400


# ── coerce ──────────────────────────────────────────────────


class TestCoerceAPI:
    def test_literals(self, client) -> None:
        resp = client.post(
            "/coerce",
            json={
                "types": ["byte", "float", "material", "material_data", "location"],
                "tokens": ["12", "0.5", "unobtainium", "wool:14", "world,1,2,3"],
            },
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["success"] is True
        assert data["values"] == [
            12,
            0.5,
            None,
            {"material": "WOOL", "data": 14},
            {"world": "world", "x": 1.0, "y": 2.0, "z": 3.0, "yaw": 0.0, "pitch": 0.0},
        ]

    def test_empty(self, client) -> None:
        resp = client.post("/coerce", json={"types": [], "tokens": []})
        assert resp.status_code == 200
        assert resp.json()["values"] == []

    def test_shortcuts_with_subject(self, client) -> None:
        player = _spawn(
            client, entity_type="player", x=0.5, y=64, z=0.5, held_item="bread", held_amount=4
        )
        zombie = _spawn(client, entity_type="zombie", x=0.5, y=64, z=10.5)
        client.post(
            "/environment/blocks",
            json={"world": "world", "x": 0, "y": 65, "z": 12, "material": "stone"},
        )

        resp = client.post(
            "/coerce",
            json={
                "types": ["entity", "uuid", "item_stack", "location", "entity"],
                "tokens": ["that", "me", "this", "there", "me"],
                "subject_id": player["unique_id"],
            },
        )
        assert resp.status_code == 200, resp.text
        values = resp.json()["values"]
        assert values[0]["unique_id"] == zombie["unique_id"]
        assert values[1] == player["unique_id"]
        assert values[2] == {"material": "BREAD", "amount": 4}
        assert (values[3]["x"], values[3]["y"], values[3]["z"]) == (0.0, 65.0, 12.0)
        assert values[4]["unique_id"] == player["unique_id"]

    def test_shortcut_without_subject_fails(self, client) -> None:
        resp = client.post("/coerce", json={"types": ["location"], "tokens": ["here"]})
        assert resp.status_code == 422
        data = resp.json()
        assert data["success"] is False
        assert data["error"] == "ParseError"
        assert data["index"] == 0
        assert data["token"] == "here"
        assert data["type"] == "location"

    def test_reference_not_found(self, client) -> None:
        resp = client.post(
            "/coerce",
            json={"types": ["int", "entity_types"], "tokens": ["1", "zombie,dragonn"]},
        )
        assert resp.status_code == 422
        data = resp.json()
        assert data["error"] == "ReferenceNotFound"
        assert data["index"] == 1
        assert data["token"] == "zombie,dragonn"
        assert "Dragonn" in data["message"]

    def test_unsupported_type(self, client) -> None:
        resp = client.post("/coerce", json={"types": ["widget"], "tokens": ["x"]})
        assert resp.status_code == 422
        assert resp.json()["error"] == "UnsupportedType"

    def test_misaligned(self, client) -> None:
        resp = client.post("/coerce", json={"types": ["int"], "tokens": ["1", "2"]})
        assert resp.status_code == 400

    def test_unknown_subject(self, client) -> None:
        resp = client.post(
            "/coerce",
            json={"types": ["text"], "tokens": ["x"], "subject_id": "nobody"},
        )
        assert resp.status_code == 404
