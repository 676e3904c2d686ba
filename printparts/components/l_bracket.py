"""L-bracket component.

Base leg and upright leg of equal width, with slotted holes in each leg so
the bracket can be adjusted after the screws are in.
"""

import anchorscad as ad

from ..config import BRACKET, BracketDimensions


@ad.shape
@ad.datatree
class LBracket(ad.CompositeShape):
    """Right-angle bracket; the upright rises from the back edge of the base."""
    width: float = BRACKET.width
    thickness: float = BRACKET.thickness
    base_length: float = BRACKET.base_length
    upright_height: float = BRACKET.upright_height
    slot_width: float = BRACKET.slot_width
    slot_length: float = BRACKET.slot_length
    slot_inset: float = BRACKET.slot_inset
    slots_per_leg: int = BRACKET.slots_per_leg

    EXAMPLE_SHAPE_ARGS = ad.args()

    def dims(self) -> BracketDimensions:
        return BracketDimensions(
            width=self.width,
            thickness=self.thickness,
            base_length=self.base_length,
            upright_height=self.upright_height,
            slot_width=self.slot_width,
            slot_length=self.slot_length,
            slot_inset=self.slot_inset,
            slots_per_leg=self.slots_per_leg,
        )

    def build(self) -> ad.Maker:
        # Base leg, lying flat
        base = ad.Box(size=[self.width, self.base_length, self.thickness])
        maker = base.solid("base").at("centre")

        # Upright leg, standing on the back edge of the base
        upright = ad.Box(size=[self.width, self.thickness, self.upright_height])
        back_y = -self.base_length / 2 + self.thickness / 2
        maker.add_at(
            upright.solid("upright").at("centre"),
            "base", "centre",
            post=ad.translate([
                0,
                back_y,
                self.upright_height / 2 - self.thickness / 2,
            ]),
        )

        # Slots in the base run front to back, slots in the upright run
        # vertically, so both legs adjust away from the corner.
        base_slot = ad.Box(
            size=[self.slot_width, self.slot_length, self.thickness + 1]
        )
        upright_slot = ad.Box(
            size=[self.slot_width, self.thickness + 1, self.slot_length]
        )
        dims = self.dims()
        for i, x in enumerate(dims.slot_x_positions):
            maker.add_at(
                base_slot.hole(f"base_slot_{i}").at("centre"),
                "base", "centre",
                post=ad.translate([x, dims.base_slot_y, 0]),
            )
            maker.add_at(
                upright_slot.hole(f"upright_slot_{i}").at("centre"),
                "base", "centre",
                post=ad.translate([x, back_y, dims.upright_slot_z]),
            )

        return maker
