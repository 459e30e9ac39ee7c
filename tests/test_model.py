"""Unit tests for the live model: stack memory and call tree."""

from __future__ import annotations

import pytest

from recurviz.core.contracts.frame import FrameStatus
from recurviz.core.contracts.memory import slot_address
from recurviz.core.model.call_tree import CallTree
from recurviz.core.model.stack_memory import StackMemory


def test_memory_initial_slots_are_free_with_fixed_addresses() -> None:
    mem = StackMemory(64)
    assert mem.capacity == 64
    assert mem.occupied_indices() == set()
    assert mem.slots()[0].address == "0x3E8"
    assert mem.slots()[1].address == "0x3EC"
    assert all(s.depth == -1 and s.value == "" for s in mem.slots())


def test_allocate_and_free_by_depth() -> None:
    mem = StackMemory(4)
    mem.allocate(1, "f1", "fact(n=3)")
    mem.allocate(2, "f2", "fact(n=2)")
    assert mem.occupied_indices() == {0, 1}
    assert mem.slots()[1].frame_id == "f2" and mem.slots()[1].depth == 2

    mem.free(2)
    slot = mem.slots()[1]
    assert not slot.is_occupied
    assert slot.frame_id is None and slot.value == "" and slot.depth == -1
    assert slot.address == slot_address(1)


def test_slot_reuse_leaves_no_stale_owner() -> None:
    """A sibling re-allocating the same depth fully replaces the previous owner."""
    mem = StackMemory(4)
    mem.allocate(2, "left", "fib(n=1)")
    mem.free(2)
    mem.allocate(2, "right", "fib(n=0)")
    slot = mem.slots()[1]
    assert slot.frame_id == "right" and slot.value == "fib(n=0)"


@pytest.mark.parametrize("depth", [0, -3, 5, 100])  # type: ignore[misc]
def test_out_of_range_depth_is_ignored(depth: int) -> None:
    """Overflow policy: allocation and free outside capacity are silent no-ops."""
    mem = StackMemory(4)
    mem.allocate(depth, "x", "x")
    mem.free(depth)
    assert mem.occupied_indices() == set()


def test_create_frame_links_parent_and_allocates_memory() -> None:
    mem = StackMemory(8)
    tree = CallTree(mem)
    root = tree.create_frame("fib", "n=2", None, 1)
    left = tree.create_frame("fib", "n=1", root, 2)
    assert tree.root_id == root
    assert tree.get(root).children == [left]
    assert tree.get(left).status is FrameStatus.ACTIVE
    assert mem.slots()[1].frame_id == left
    assert mem.slots()[1].value == "fib(n=1)"

    right = tree.create_frame("fib", "n=0", root, 2)
    assert tree.get(root).children == [left, right], "children keep call order"
    assert [f.id for f in tree.frames()] == [root, left, right]


def test_update_frame_merges_and_clears_note() -> None:
    tree = CallTree(StackMemory(4))
    fid = tree.create_frame("fact", "n=1", None, 1)
    tree.update_frame(fid, status=FrameStatus.RETURNING, return_value="1", note="Base Case")
    tree.update_frame(fid, status=FrameStatus.COMPLETED, note=None)

    frame = tree.get(fid)
    assert frame.status is FrameStatus.COMPLETED
    assert frame.return_value == "1", "unspecified fields are left untouched"
    assert frame.note is None
    assert frame.args == "n=1"


def test_update_unknown_frame_raises() -> None:
    tree = CallTree(StackMemory(4))
    with pytest.raises(KeyError):
        tree.update_frame("missing", note="x")


def test_clear_discards_tree() -> None:
    tree = CallTree(StackMemory(4))
    tree.create_frame("fact", "n=1", None, 1)
    tree.clear()
    assert len(tree) == 0 and tree.root_id is None
