"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from worldargs.core.coercion import ArgumentCoercer, InvocationContext
from worldargs.core.sandbox import SandboxEnvironment
from worldargs.core.world.entity import Cow, Pig, Player, Zombie
from worldargs.core.world.location import Location, World
from worldargs.core.world.material import ItemStack, Material
from worldargs.db.database import get_db
from worldargs.main import app

TEST_ENGINE = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
)
TestSession = sessionmaker(bind=TEST_ENGINE, autocommit=False, autoflush=False)


def _override_get_db():
    db = TestSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = _override_get_db


@pytest.fixture()
def client() -> TestClient:
    """FastAPI TestClient wired to an in-memory SQLite database."""
    return TestClient(app)


@pytest.fixture()
def db_session() -> Session:
    """Raw database session for direct DB assertions."""
    session = TestSession()
    try:
        yield session
    finally:
        session.close()


# ── 샌드박스 ─────────────────────────────────────────────────


@pytest.fixture()
def sandbox() -> SandboxEnvironment:
    """빈 월드 "world" 하나가 있는 샌드박스"""
    env = SandboxEnvironment()
    env.create_world("world")
    return env


@pytest.fixture()
def world(sandbox: SandboxEnvironment) -> World:
    return sandbox.get_world("world")


@pytest.fixture()
def player(sandbox: SandboxEnvironment, world: World) -> Player:
    """(0.5, 64, 0.5) 에서 +z 방향을 보는 플레이어. 다이아몬드 검을 들고 있다."""
    return sandbox.spawn(
        Player(
            location=Location(world, 0.5, 64.0, 0.5, yaw=0.0, pitch=0.0),
            held_item=ItemStack(Material.DIAMOND_SWORD),
            name="tester",
        )
    )


@pytest.fixture()
def zombie(sandbox: SandboxEnvironment, world: World) -> Zombie:
    """플레이어 정면 10 블록"""
    return sandbox.spawn(Zombie(location=Location(world, 0.5, 64.0, 10.5)))


@pytest.fixture()
def cow(sandbox: SandboxEnvironment, world: World) -> Cow:
    """좀비 뒤쪽, 같은 시선 위"""
    return sandbox.spawn(Cow(location=Location(world, 0.5, 64.5, 15.5)))


@pytest.fixture()
def pig(sandbox: SandboxEnvironment, world: World) -> Pig:
    """시선 밖 (+x 20)"""
    return sandbox.spawn(Pig(location=Location(world, 20.5, 64.0, 0.5)))


@pytest.fixture()
def coercer(sandbox: SandboxEnvironment) -> ArgumentCoercer:
    return ArgumentCoercer(sandbox)


@pytest.fixture()
def ctx(player: Player) -> InvocationContext:
    return InvocationContext(player)
