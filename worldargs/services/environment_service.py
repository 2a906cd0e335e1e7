"""샌드박스 환경 Service — Core(SandboxEnvironment) ↔ DB 연결

DB 가 원본이고, 메모리 샌드박스는 기동 시 load() 로 재구성한 뒤
쓰기 요청마다 DB 와 함께 갱신한다.
"""

import uuid

from sqlalchemy.orm import Session

from worldargs.core.coercion.errors import CoercionError
from worldargs.core.coercion.namespaces import NamespaceRegistry
from worldargs.core.logging import get_logger
from worldargs.core.sandbox import SandboxEnvironment
from worldargs.core.world.entity import Entity, HumanEntity
from worldargs.core.world.location import Location, World
from worldargs.core.world.material import ItemStack, Material
from worldargs.db.models import BlockModel, EntityModel, WorldModel

logger = get_logger(__name__)


class EnvironmentService:
    """월드/블록/엔티티 CRUD + 샌드박스 동기화"""

    def __init__(
        self,
        db: Session,
        sandbox: SandboxEnvironment | None = None,
        namespaces: NamespaceRegistry | None = None,
    ):
        self._db = db
        self._sandbox = sandbox or SandboxEnvironment()
        self._namespaces = namespaces or NamespaceRegistry()

    @property
    def sandbox(self) -> SandboxEnvironment:
        return self._sandbox

    # === 로드 ===

    def load(self) -> SandboxEnvironment:
        """DB → 새 샌드박스 재구성. 반환: 재구성된 샌드박스."""
        sandbox = SandboxEnvironment()
        worlds: dict[str, World] = {}

        for row in self._db.query(WorldModel).all():
            worlds[row.name] = sandbox.create_world(row.name, uuid.UUID(row.uid))

        for block in self._db.query(BlockModel).all():
            sandbox.set_block(
                worlds[block.world_name],
                block.x,
                block.y,
                block.z,
                Material[block.material],
            )

        loaded = 0
        for row in self._db.query(EntityModel).filter(EntityModel.alive.is_(True)):
            try:
                sandbox.spawn(self._entity_from_orm(row, worlds[row.world_name]))
                loaded += 1
            except (CoercionError, KeyError) as e:
                logger.warning("Failed to load entity %s: %s", row.unique_id, e)

        self._sandbox = sandbox
        logger.info("Loaded %d world(s), %d entities from DB", len(worlds), loaded)
        return sandbox

    # === 쓰기 ===

    def create_world(self, name: str) -> World:
        if not name:
            raise ValueError("World name must not be empty")
        if self._db.get(WorldModel, name) is not None:
            raise ValueError(f"World already exists: {name}")

        world = World(name)
        self._db.add(WorldModel(name=name, uid=str(world.uid)))
        self._db.commit()

        self._sandbox.create_world(name, world.uid)
        return world

    def place_block(
        self, world_name: str, x: int, y: int, z: int, material: str
    ) -> Material:
        world = self._require_world(world_name)
        resolved = Material.match(material)
        if resolved is None:
            raise ValueError(f"Unknown material: {material}")

        existing = (
            self._db.query(BlockModel)
            .filter(
                BlockModel.world_name == world_name,
                BlockModel.x == x,
                BlockModel.y == y,
                BlockModel.z == z,
            )
            .first()
        )
        if resolved is Material.AIR:
            if existing is not None:
                self._db.delete(existing)
        elif existing is not None:
            existing.material = resolved.name
        else:
            self._db.add(
                BlockModel(world_name=world_name, x=x, y=y, z=z, material=resolved.name)
            )
        self._db.commit()

        self._sandbox.set_block(world, x, y, z, resolved)
        return resolved

    def spawn_entity(
        self,
        world_name: str,
        entity_type: str,
        x: float,
        y: float,
        z: float,
        yaw: float = 0.0,
        pitch: float = 0.0,
        held_item: str | None = None,
        held_amount: int = 1,
    ) -> Entity:
        """엔티티 생성 + DB 저장. held_item 은 HumanEntity 계열만 허용."""
        world = self._require_world(world_name)
        try:
            cls = self._namespaces.resolve(entity_type)
        except CoercionError as e:
            raise ValueError(e.message) from e

        kwargs = {}
        if held_item is not None:
            if not issubclass(cls, HumanEntity):
                raise ValueError(f"{cls.__name__} cannot hold items")
            material = Material.match(held_item)
            if material is None:
                raise ValueError(f"Unknown material: {held_item}")
            kwargs["held_item"] = ItemStack(material, held_amount)

        entity = cls(location=Location(world, x, y, z, yaw, pitch), **kwargs)

        self._db.add(self._entity_to_orm(entity))
        self._db.commit()

        self._sandbox.spawn(entity)
        logger.info(
            "Entity spawned: %s %s in %s", cls.__name__, entity.unique_id, world_name
        )
        return entity

    def get_entity(self, unique_id: str) -> Entity | None:
        try:
            key = uuid.UUID(unique_id)
        except ValueError:
            return None
        return self._sandbox.get_entity(key)

    # === 내부 ===

    def _require_world(self, name: str) -> World:
        world = self._sandbox.get_world(name)
        if world is None:
            raise ValueError(f"Unknown world: {name}")
        return world

    def _entity_from_orm(self, row: EntityModel, world: World) -> Entity:
        cls = self._namespaces.resolve(row.entity_type)
        kwargs = {}
        if row.held_material is not None and issubclass(cls, HumanEntity):
            kwargs["held_item"] = ItemStack(
                Material[row.held_material], row.held_amount
            )
        return cls(
            location=Location(world, row.x, row.y, row.z, row.yaw, row.pitch),
            unique_id=uuid.UUID(row.unique_id),
            alive=row.alive,
            **kwargs,
        )

    def _entity_to_orm(self, entity: Entity) -> EntityModel:
        held = entity.held_item if isinstance(entity, HumanEntity) else None
        loc = entity.location
        return EntityModel(
            unique_id=str(entity.unique_id),
            world_name=loc.world.name,
            entity_type=entity.type_name,
            x=loc.x,
            y=loc.y,
            z=loc.z,
            yaw=loc.yaw,
            pitch=loc.pitch,
            alive=entity.alive,
            held_material=held.material.name if held is not None else None,
            held_amount=held.amount if held is not None else 1,
        )
