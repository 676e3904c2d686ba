"""Shared parametric dimensions for every printparts design.

Central config hub -- every part derives geometry from these dimensions.
Uses @dataclass with derived @property methods for computed values, so that
changing one driving dimension (a PCB size, a nominal peg diameter) moves
everything that mates with it.

All lengths are in millimetres.
"""

from dataclasses import dataclass, field
from typing import List, Tuple
import math
import os


@dataclass
class PrintTolerances:
    """Process tolerances for FDM printing with a 0.4 mm nozzle."""
    clearance: float = 0.2   # sliding fit, per side
    snug: float = 0.1        # push fit, per side
    min_wall: float = 1.2    # three perimeters
    epsilon: float = 0.01    # overcut so differences leave no skin
    fn: int = 64


@dataclass
class AccessoryMountDimensions:
    """Dovetail rail screwed to a surface plus a clip sliding onto it."""
    tol: PrintTolerances = None
    rail_length: float = 60.0
    rail_width: float = 30.0
    rail_thickness: float = 4.0
    dovetail_narrow: float = 12.0
    dovetail_wide: float = 16.0
    dovetail_height: float = 5.0
    screw_diameter: float = 3.4      # M3 clearance
    screw_head_diameter: float = 6.5
    screw_head_depth: float = 3.0
    screw_inset: float = 10.0
    clip_length: float = 30.0
    clip_wall: float = 3.0
    clip_roof: float = 4.0
    accessory_hole_diameter: float = 6.5  # 1/4"-20 clearance

    def __post_init__(self):
        if self.tol is None:
            self.tol = PrintTolerances()

    @property
    def rail_height(self) -> float:
        """Base plate plus dovetail."""
        return self.rail_thickness + self.dovetail_height

    @property
    def flank_angle(self) -> float:
        """Dovetail flank angle from vertical, in radians."""
        return math.atan((self.dovetail_wide - self.dovetail_narrow) / 2 / self.dovetail_height)

    @property
    def socket_narrow(self) -> float:
        """Socket width at the clip's underside.

        Each flank is the dovetail flank moved out by ``clearance`` along its
        normal, so the gap is the same at every height.
        """
        return self.dovetail_narrow + 2 * self.tol.clearance / math.cos(self.flank_angle)

    @property
    def socket_height(self) -> float:
        """Socket depth; clearance only on the roof side."""
        return self.dovetail_height + self.tol.clearance

    def socket_width_at(self, z: float) -> float:
        """Socket width at height ``z`` above its opening."""
        return self.socket_narrow + 2 * z * math.tan(self.flank_angle)

    @property
    def socket_wide(self) -> float:
        """Socket width at the socket roof."""
        return self.socket_width_at(self.socket_height)

    @property
    def clip_width(self) -> float:
        return self.socket_wide + 2 * self.clip_wall

    @property
    def clip_height(self) -> float:
        return self.socket_height + self.clip_roof

    @property
    def screw_positions(self) -> List[float]:
        """Y positions of the rail's two mounting screws."""
        return [self.screw_inset, self.rail_length - self.screw_inset]

    @property
    def clip_offset(self) -> float:
        """Y offset that centres the clip on the rail in the assembly."""
        return (self.rail_length - self.clip_length) / 2


@dataclass
class PcbDimensions:
    """Dimensions of the board housed by the enclosure (vitamin mockup)."""
    width: float = 50.0
    depth: float = 30.0
    thickness: float = 1.6
    hole_inset: float = 3.5
    component_height: float = 8.0
    connector_width: float = 8.0
    connector_depth: float = 6.0
    connector_height: float = 3.2


@dataclass
class EnclosureDimensions:
    """PCB-driven box with a lap-jointed lid."""
    pcb: PcbDimensions = None
    tol: PrintTolerances = None
    wall: float = 3.0
    floor: float = 2.0
    corner_radius: float = 4.0
    pcb_margin: float = 3.0
    inner_height: float = 20.0
    lid_thickness: float = 2.0
    lap_height: float = 3.0
    standoff_height: float = 5.0
    standoff_diameter: float = 6.0
    standoff_hole_diameter: float = 2.5  # M3 self-tapping pilot
    port_width: float = 12.0
    port_height: float = 7.0
    vent_slot: Tuple[float, float] = (10.0, 2.0)
    vent_spacing: float = 2.0
    vent_margin: float = 6.0

    def __post_init__(self):
        if self.pcb is None:
            self.pcb = PcbDimensions()
        if self.tol is None:
            self.tol = PrintTolerances()

    @property
    def inner_width(self) -> float:
        return self.pcb.width + 2 * self.pcb_margin

    @property
    def inner_depth(self) -> float:
        return self.pcb.depth + 2 * self.pcb_margin

    @property
    def outer_width(self) -> float:
        return self.inner_width + 2 * self.wall

    @property
    def outer_depth(self) -> float:
        return self.inner_depth + 2 * self.wall

    @property
    def base_height(self) -> float:
        return self.floor + self.inner_height

    @property
    def total_height(self) -> float:
        """Closed enclosure height."""
        return self.base_height + self.lid_thickness

    @property
    def inner_radius(self) -> float:
        return max(self.corner_radius - self.wall, 0.0)

    @property
    def lap_inset(self) -> float:
        """The rabbet removes the inner half of the wall."""
        return self.wall / 2

    @property
    def lap_thickness(self) -> float:
        return self.wall - self.lap_inset

    @property
    def lip_inset(self) -> float:
        """Lid lip is a push fit in the rabbet."""
        return self.lap_inset + self.tol.snug

    @property
    def lip_thickness(self) -> float:
        return self.lap_thickness - self.tol.snug

    @property
    def lip_height(self) -> float:
        return self.lap_height - self.tol.clearance

    @property
    def pcb_origin(self) -> Tuple[float, float]:
        """XY of the PCB's lower-left corner inside the enclosure."""
        return (self.wall + self.pcb_margin, self.wall + self.pcb_margin)

    @property
    def pcb_z(self) -> float:
        """Height of the PCB's underside (top of the standoffs)."""
        return self.floor + self.standoff_height

    @property
    def standoff_positions(self) -> List[Tuple[float, float]]:
        """Standoff centres, one under each PCB mounting hole."""
        x0, y0 = self.pcb_origin
        inset = self.pcb.hole_inset
        xs = (x0 + inset, x0 + self.pcb.width - inset)
        ys = (y0 + inset, y0 + self.pcb.depth - inset)
        return [(x, y) for y in ys for x in xs]

    @property
    def port_z(self) -> float:
        """Bottom of the connector port, level with the PCB top."""
        return self.pcb_z + self.pcb.thickness

    @property
    def vent_area(self) -> Tuple[float, float]:
        return (
            self.inner_width - 2 * self.vent_margin,
            self.inner_depth - 2 * self.vent_margin,
        )


@dataclass
class FitTestDimensions:
    """Hole plate and peg bar for calibrating sliding-fit clearance."""
    tol: PrintTolerances = None
    nominal_diameter: float = 5.0
    clearances: Tuple[float, ...] = (0.0, 0.1, 0.2, 0.3, 0.4, 0.5)  # per side
    pitch: float = 10.0
    margin: float = 6.0
    plate_width: float = 14.0
    plate_thickness: float = 4.0
    peg_height: float = 8.0
    peg_chamfer: float = 0.5
    bar_thickness: float = 3.0
    marker_diameter: float = 1.2
    marker_depth: float = 0.6
    marker_spacing: float = 1.6

    def __post_init__(self):
        if self.tol is None:
            self.tol = PrintTolerances()

    @property
    def peg_diameter(self) -> float:
        return self.nominal_diameter

    @property
    def hole_diameters(self) -> List[float]:
        return [self.nominal_diameter + 2 * c for c in self.clearances]

    @property
    def positions(self) -> List[float]:
        """X centre of each hole (and of the matching peg)."""
        return [self.margin + i * self.pitch for i in range(len(self.clearances))]

    @property
    def plate_length(self) -> float:
        return 2 * self.margin + (len(self.clearances) - 1) * self.pitch

    @property
    def marker_y(self) -> float:
        """Row of index markers between the holes and the far edge."""
        return (3 * self.plate_width + max(self.hole_diameters)) / 4


@dataclass
class BracketDimensions:
    """L-bracket with adjustment slots in both legs."""
    tol: PrintTolerances = None
    width: float = 30.0
    thickness: float = 4.0
    base_length: float = 40.0
    upright_height: float = 40.0
    slot_width: float = 4.4   # M4 clearance
    slot_length: float = 12.0
    slot_inset: float = 12.0  # far edge to slot centre
    slots_per_leg: int = 2

    def __post_init__(self):
        if self.tol is None:
            self.tol = PrintTolerances()

    @property
    def slot_x_positions(self) -> List[float]:
        """Slot centres across the width, evenly spread."""
        step = self.width / self.slots_per_leg
        return [-self.width / 2 + step * (i + 0.5) for i in range(self.slots_per_leg)]

    @property
    def base_slot_y(self) -> float:
        """Slot centre along the base, measured from the base centre."""
        return self.base_length / 2 - self.slot_inset

    @property
    def upright_slot_z(self) -> float:
        """Slot centre up the upright, measured from the base centre."""
        return self.upright_height - self.thickness / 2 - self.slot_inset


@dataclass
class ExportSettings:
    """How the external OpenSCAD binary is driven."""
    openscad_bin: str = field(
        default_factory=lambda: os.environ.get("OPENSCAD", "openscad")
    )
    mode_variable: str = "display_mode"
    mode_pattern: str = r"print_[a-z_]+"
    default_format: str = "stl"
    formats: Tuple[str, ...] = ("stl", "3mf", "off", "amf")
    build_dir: str = "build"
    output_dir: str = "stl"


# Default dimensions
TOL = PrintTolerances()
MOUNT = AccessoryMountDimensions()
ENCLOSURE = EnclosureDimensions()
FIT_TEST = FitTestDimensions()
BRACKET = BracketDimensions()
SETTINGS = ExportSettings()
