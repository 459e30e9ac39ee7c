"""MemorySlot contract: one activation-record slot of the simulated stack."""

from __future__ import annotations

from pydantic import BaseModel, Field

# First synthetic address and the stride between slots.
BASE_ADDRESS = 1000
SLOT_STRIDE = 4


def slot_address(index: int) -> str:
    """Return the fixed display address of slot ``index`` (e.g. ``0x3E8``)."""
    return f"0x{index * SLOT_STRIDE + BASE_ADDRESS:X}"


class MemorySlot(BaseModel):
    """A simulated stack slot, indexed by ``depth - 1``."""

    address: str = Field(..., description="Synthetic display label; fixed per index.")
    is_occupied: bool = Field(default=False)
    frame_id: str | None = Field(default=None, description="Owning frame, when occupied.")
    value: str = Field(default="", description="Display string describing the occupant.")
    depth: int = Field(default=-1, description="Owning depth, -1 when free.")

    @classmethod
    def free_slot(cls, index: int) -> MemorySlot:
        """Build the unoccupied default for slot ``index``."""
        return cls(address=slot_address(index))


__all__ = ["MemorySlot", "slot_address", "BASE_ADDRESS", "SLOT_STRIDE"]
