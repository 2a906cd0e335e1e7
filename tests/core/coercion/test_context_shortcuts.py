"""컨텍스트 단축어 (here/there/me/that) 및 UUID 변환 테스트"""

import uuid

import pytest

from worldargs.core.coercion import InvocationContext, ParseError, ReferenceNotFound
from worldargs.core.world.entity import Entity, Zombie
from worldargs.core.world.location import Location
from worldargs.core.world.material import Material


class TestLocationLiteral:
    def test_four_fields(self, coercer, world) -> None:
        loc = coercer.coerce_one(Location, "world,1.5,64,-3")
        assert loc == Location(world, 1.5, 64.0, -3.0)

    def test_unknown_world(self, coercer) -> None:
        with pytest.raises(ReferenceNotFound):
            coercer.coerce_one(Location, "nether,0,0,0")

    def test_world_name_is_case_sensitive(self, coercer) -> None:
        with pytest.raises(ReferenceNotFound):
            coercer.coerce_one(Location, "World,0,0,0")

    @pytest.mark.parametrize("token", ["world,1,2", "world,1,2,3,4", "", "world"])
    def test_wrong_field_count(self, coercer, token) -> None:
        with pytest.raises(ParseError):
            coercer.coerce_one(Location, token)

    def test_non_numeric_coordinate(self, coercer) -> None:
        with pytest.raises(ParseError):
            coercer.coerce_one(Location, "world,1,up,3")

    def test_batch_error_keeps_whole_token(self, coercer) -> None:
        with pytest.raises(ParseError) as exc_info:
            coercer.coerce_all([int, Location], ["1", "world,1,up,3"])
        error = exc_info.value
        assert error.index == 1
        assert error.token == "world,1,up,3"
        assert '"up"' in error.message


class TestHereThere:
    def test_here(self, coercer, ctx, player) -> None:
        assert coercer.coerce_one(Location, "here", ctx) is player.location

    def test_there_hits_first_obstruction(self, coercer, ctx, sandbox, world) -> None:
        sandbox.set_block(world, 0, 65, 12, Material.STONE)
        sandbox.set_block(world, 0, 65, 20, Material.STONE)
        assert coercer.coerce_one(Location, "There", ctx) == Location(world, 0.0, 65.0, 12.0)

    def test_there_stops_at_any_non_air_block(self, coercer, ctx, sandbox, world) -> None:
        sandbox.set_block(world, 0, 65, 5, Material.TORCH)
        sandbox.set_block(world, 0, 65, 8, Material.GLASS)
        assert coercer.coerce_one(Location, "there", ctx) == Location(world, 0.0, 65.0, 5.0)

    def test_there_without_obstruction_uses_max_distance(self, coercer, ctx, world) -> None:
        assert coercer.coerce_one(Location, "there", ctx) == Location(world, 0.0, 65.0, 50.0)

    @pytest.mark.parametrize("token", ["here", "there"])
    def test_without_context_falls_through(self, coercer, token) -> None:
        """컨텍스트 없으면 리터럴로 파싱 → ParseError (크래시 아님)"""
        with pytest.raises(ParseError):
            coercer.coerce_all([Location], [token])

    def test_dead_subject_falls_through(self, coercer, ctx, player) -> None:
        player.alive = False
        with pytest.raises(ParseError):
            coercer.coerce_one(Location, "here", ctx)


class TestEntity:
    def test_me(self, coercer, ctx, player) -> None:
        assert coercer.coerce_one(Entity, "me", ctx) is player

    def test_me_for_non_actor_falls_through(self, coercer, zombie) -> None:
        with pytest.raises(ParseError):
            coercer.coerce_one(Entity, "ME", InvocationContext(zombie))

    def test_that_picks_closest_on_sight_line(self, coercer, ctx, zombie, cow, pig) -> None:
        assert coercer.coerce_one(Entity, "that", ctx) is zombie

    def test_that_out_of_range(self, coercer, ctx, sandbox, world) -> None:
        sandbox.spawn(Zombie(location=Location(world, 0.5, 64.0, 30.5)))
        # 시선 위에 아무것도 없으면 리터럴 파싱으로 넘어간다
        with pytest.raises(ParseError):
            coercer.coerce_one(Entity, "that", ctx)

    def test_that_without_context(self, coercer, zombie) -> None:
        with pytest.raises(ParseError):
            coercer.coerce_one(Entity, "that")

    def test_nearest_to_literal_point(self, coercer, zombie, pig) -> None:
        assert coercer.coerce_one(Entity, "world,1,64,11") is zombie
        assert coercer.coerce_one(Entity, "world,19,64.5,0") is pig

    def test_nearest_outside_vertical_tolerance(self, coercer, zombie) -> None:
        assert coercer.coerce_one(Entity, "world,0.5,70,10.5") is None

    def test_no_entity_is_none(self, coercer, zombie) -> None:
        """탐색 실패는 에러가 아니라 None"""
        assert coercer.coerce_all([Entity], ["world,500,64,500"]) == [None]

    def test_here_finds_entity_near_subject(self, coercer, ctx, player, pig) -> None:
        assert coercer.coerce_one(Entity, "here", ctx) is player


class TestUUID:
    def test_canonical_text(self, coercer) -> None:
        value = uuid.uuid4()
        assert coercer.coerce_one(uuid.UUID, str(value)) == value
        assert coercer.coerce_one(uuid.UUID, str(value).upper()) == value

    def test_non_canonical_forms_rejected(self, coercer) -> None:
        with pytest.raises(ParseError):
            coercer.coerce_one(uuid.UUID, uuid.uuid4().hex)

    def test_resolves_through_entity(self, coercer, ctx, zombie) -> None:
        assert coercer.coerce_one(uuid.UUID, "that", ctx) == zombie.unique_id

    def test_literal_point_with_context(self, coercer, ctx, zombie) -> None:
        assert coercer.coerce_one(uuid.UUID, "world,0.5,64,10", ctx) == zombie.unique_id

    def test_without_context_keeps_parse_error(self, coercer, zombie) -> None:
        with pytest.raises(ParseError) as exc_info:
            coercer.coerce_one(uuid.UUID, "world,0.5,64,10")
        assert "Invalid UUID" in exc_info.value.message

    def test_entity_not_found_keeps_parse_error(self, coercer, ctx) -> None:
        with pytest.raises(ParseError) as exc_info:
            coercer.coerce_one(uuid.UUID, "nether,0,0,0", ctx)
        assert "Invalid UUID" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, ReferenceNotFound)
        assert exc_info.value.cause is exc_info.value.__cause__
