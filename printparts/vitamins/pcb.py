"""PCB vitamin -- mockup of the board housed by the enclosure.

Green board with a connector block on its front edge (-Y) and a tall
component block standing in for whatever is fitted on top.
"""

import anchorscad as ad

from ..config import ENCLOSURE


@ad.shape
@ad.datatree
class Pcb(ad.CompositeShape):
    """Circuit board mockup vitamin."""
    width: float = ENCLOSURE.pcb.width
    depth: float = ENCLOSURE.pcb.depth
    thickness: float = ENCLOSURE.pcb.thickness
    hole_inset: float = ENCLOSURE.pcb.hole_inset
    component_height: float = ENCLOSURE.pcb.component_height
    connector_width: float = ENCLOSURE.pcb.connector_width
    connector_depth: float = ENCLOSURE.pcb.connector_depth
    connector_height: float = ENCLOSURE.pcb.connector_height

    EXAMPLE_SHAPE_ARGS = ad.args()

    def build(self) -> ad.Maker:
        # Bare board
        board = ad.Box(size=[self.width, self.depth, self.thickness])
        maker = board.solid("board").colour([0.1, 0.45, 0.2]).at("centre")

        # Connector flush with the front edge
        connector = ad.Box(
            size=[self.connector_width, self.connector_depth, self.connector_height]
        )
        maker.add_at(
            connector.solid("connector").colour([0.75, 0.75, 0.75]).at("centre"),
            "board", "centre",
            post=ad.translate([
                0,
                -self.depth / 2 + self.connector_depth / 2,
                self.thickness / 2 + self.connector_height / 2,
            ]),
        )

        # Component envelope, kept clear of the mounting holes
        keepout = 2 * self.hole_inset + 2
        component = ad.Box(
            size=[
                self.width - 2 * keepout,
                self.depth - 2 * keepout,
                self.component_height,
            ]
        )
        maker.add_at(
            component.solid("component").colour([0.15, 0.15, 0.15]).at("centre"),
            "board", "centre",
            post=ad.translate([
                0,
                keepout / 2,
                self.thickness / 2 + self.component_height / 2,
            ]),
        )

        return maker
