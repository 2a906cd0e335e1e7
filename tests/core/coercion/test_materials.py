"""Material / MaterialData / ItemStack 변환 테스트"""

import pytest

from worldargs.core.coercion import (
    InvocationContext,
    ParseError,
    ReferenceNotFound,
    TypeDescriptor,
    TypeKind,
)
from worldargs.core.world.entity import Player
from worldargs.core.world.location import Location
from worldargs.core.world.material import ItemStack, Material, MaterialData


class TestMaterial:
    def test_fuzzy_names(self, coercer) -> None:
        output = coercer.coerce_all(
            [Material, Material, Material], ["gold_block", "DIAMOND_SWORD", "blaze_ROD"]
        )
        assert output == [Material.GOLD_BLOCK, Material.DIAMOND_SWORD, Material.BLAZE_ROD]

    def test_no_match_is_none(self, coercer) -> None:
        """이름 불일치는 에러가 아니라 None"""
        assert coercer.coerce_all([Material], ["unobtainium"]) == [None]


class TestMaterialData:
    def test_kind_and_sub_variant(self, coercer) -> None:
        output = coercer.coerce_all([MaterialData], ["diamond_spade:24"])
        assert len(output) == 1
        data = output[0]
        assert isinstance(data, MaterialData)
        assert data.item_type is Material.DIAMOND_SPADE
        assert data.data == 24

    def test_missing_separator(self, coercer) -> None:
        with pytest.raises(ParseError):
            coercer.coerce_one(MaterialData, "diamond_spade")

    def test_data_out_of_byte_range(self, coercer) -> None:
        with pytest.raises(ParseError):
            coercer.coerce_one(MaterialData, "wool:300")

    def test_unknown_material(self, coercer) -> None:
        with pytest.raises(ReferenceNotFound):
            coercer.coerce_one(MaterialData, "unobtainium:1")


class TestItemStack:
    def test_bare_kind_without_context(self, coercer) -> None:
        output = coercer.coerce_all([ItemStack], ["diamond"])
        stack = output[0]
        assert isinstance(stack, ItemStack)
        assert stack.type is Material.DIAMOND
        assert stack.amount == 1

    def test_this_returns_held_item(self, coercer, ctx, player) -> None:
        stack = coercer.coerce_one(ItemStack, "THIS", ctx)
        assert stack is player.held_item

    def test_this_without_context_is_parsed_as_name(self, coercer) -> None:
        with pytest.raises(ReferenceNotFound):
            coercer.coerce_one(ItemStack, "this")

    def test_this_for_subject_without_hands(self, coercer, zombie) -> None:
        with pytest.raises(ReferenceNotFound):
            coercer.coerce_one(
                TypeDescriptor.of(TypeKind.ITEM_STACK), "this", InvocationContext(zombie)
            )

    def test_this_with_empty_hand(self, coercer, sandbox, world) -> None:
        """빈 손이면 "this" 는 이름으로 파싱된다"""
        idle = sandbox.spawn(Player(location=Location(world, 3.5, 64.0, 3.5), name="idle"))
        assert idle.held_item is None
        with pytest.raises(ReferenceNotFound):
            coercer.coerce_one(ItemStack, "this", InvocationContext(idle))

    def test_name_with_context(self, coercer, ctx) -> None:
        stack = coercer.coerce_one(ItemStack, "minecraft:gold ingot", ctx)
        assert stack == ItemStack(Material.GOLD_INGOT)
