"""
CATALOG: MATERIAL AND HARDWARE CONSTANTS
========================================

PURPOSE:
--------
This module collects every fixed physical constant the arm model needs:
plate material, drivetrain hardware masses, segment geometry and the
gripper at the end of the arm. Instead of burying 0.0975437 lb/in³ and
0.303 lb inside the Segment class, we keep them in small frozen records
that can be swapped out in tests or in a different design study.

WHY THIS MATTERS:
-----------------
1. **Design Exploration**: Trying thinner plate or a lighter gearbox is a
   one-line change (build a new SegmentSpec) instead of an edit to the model.

2. **Testability**: Tests can pass a SegmentSpec with round numbers and
   check the mass formula by hand.

3. **Reproducibility**: The defaults below are the exact values the
   torque ranking was produced with.

ENGINEERING CONTEXT:
--------------------
Each arm segment is two mirrored aluminium plates joined together, with
bearings near both ends. The plates are pocketed (weight-reduction ratio)
and have corner radii and bolt holes cut out. A motor, a gearbox with
several stages, a motor controller and a chain sprocket ride on every
segment to drive the next joint.

All units are imperial: inches and pounds.
"""

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Material:
    """
    Sheet material used for the segment plates.

    Parameters:
    -----------
    name : str
        Human-readable name (e.g., "6061 Aluminum 6mm")

    density : float
        Material density (lb/in³)
        - Aluminium: ~0.0975 lb/in³

    thickness : float
        Plate thickness (in)
        - 6 mm plate = 0.23622 in
    """
    name: str
    density: float  # lb/in³
    thickness: float  # in


@dataclass(frozen=True)
class Drivetrain:
    """
    Hardware mounted on every segment to drive the next joint.

    The masses do not depend on segment length, so they are added to the
    plate mass as one fixed lump.
    """
    name: str
    controller_mass: float  # lb
    motor_mass: float  # lb
    gearbox_base_mass: float  # lb
    gearbox_stage_mass: float  # lb, per stage
    gearbox_stages: int
    sprocket_mass: float  # lb

    @property
    def total_mass(self) -> float:
        """Combined hardware mass (lb)."""
        return (
            self.controller_mass
            + self.motor_mass
            + self.gearbox_base_mass
            + self.gearbox_stage_mass * self.gearbox_stages
            + self.sprocket_mass
        )


@dataclass(frozen=True)
class SegmentSpec:
    """
    Geometry and hardware shared by every structural segment.

    Parameters:
    -----------
    width : float
        Plate width (in). Also the diameter of the rounded plate ends.

    material : Material
        Plate material (density, thickness)

    drivetrain : Drivetrain
        Hardware carried by the segment

    hole_area : float
        Area removed by bolt and bearing holes (in²)

    bearing_edge_distance : float
        Extra plate length past the joint at each end (in)

    weight_reduction_ratio : float
        Fraction of net plate material left after pocketing (0-1)

    mass_offset : float
        Distance from the far end of the segment to its centre of mass (in).
        The drivetrain sits near the distal joint, so the centre of mass is
        not at the middle of the plate.

    plates : int
        Number of mirrored plates per segment
    """
    width: float
    material: Material
    drivetrain: Drivetrain
    hole_area: float
    bearing_edge_distance: float
    weight_reduction_ratio: float
    mass_offset: float
    plates: int = 2

    @property
    def round_area(self) -> float:
        """Material lost to the rounded corners (in²)."""
        return self.width * self.width - math.pi * (self.width / 2) ** 2

    @property
    def negative_area(self) -> float:
        """Total area cut out of one plate (in²)."""
        return self.hole_area + self.round_area


@dataclass(frozen=True)
class GripperSpec:
    """Fixed end effector: no free parameters."""
    name: str
    mass: float  # lb
    length: float  # in
    center_of_mass: float  # in, from the gripper's mounting end


# ============================================================================
# DEFAULTS
# ============================================================================

ALUMINUM_6MM = Material(
    name="6061 Aluminum 6mm",
    density=0.0975437,  # lb/in³
    thickness=0.23622,  # in (6 mm)
)

# NEO brushless motor + SPARK MAX controller + 3-stage planetary gearbox
NEO_3_STAGE = Drivetrain(
    name="NEO 3-stage",
    controller_mass=0.25,
    motor_mass=0.938,
    gearbox_base_mass=0.576,
    gearbox_stage_mass=0.303,
    gearbox_stages=3,
    sprocket_mass=0.5,
)

DEFAULT_SEGMENT = SegmentSpec(
    width=6.0,
    material=ALUMINUM_6MM,
    drivetrain=NEO_3_STAGE,
    hole_area=3.9 + 1.1,  # in² (bearing bore + bolt holes)
    bearing_edge_distance=3.0,
    weight_reduction_ratio=0.4,
    mass_offset=5.0,
)

DEFAULT_GRIPPER = GripperSpec(
    name="Grabber",
    mass=7.5,
    length=12.0,
    center_of_mass=4.0,
)
