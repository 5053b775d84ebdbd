# Massive entities: Segment, Gripper, and the composite Arm
"""
Every part of the arm answers the same four questions: how heavy is it, how
long is it, where is its centre of mass (measured from its own proximal
end), and what torque does it put on the joint at its base.

    Arm ── Segment ── Segment ── Segment ── Gripper
    base                                    tip

The Arm is itself a Massive entity, built from its components in order.
All values are fixed at construction; nothing is mutated afterwards.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Tuple

import numpy as np

from .catalog import SegmentSpec, GripperSpec, DEFAULT_SEGMENT, DEFAULT_GRIPPER


class Massive(ABC):
    """Anything with mass (lb), length (in) and a centre of mass (in)."""

    @property
    @abstractmethod
    def mass(self) -> float:
        ...

    @property
    @abstractmethod
    def length(self) -> float:
        ...

    @property
    @abstractmethod
    def center_of_mass(self) -> float:
        ...

    @property
    def torque_at_base(self) -> float:
        """Gravity torque about the proximal end (in*lb)."""
        return self.mass * self.center_of_mass


def segment_material_mass(length: float, spec: SegmentSpec = DEFAULT_SEGMENT) -> float:
    """
    Mass of the plates of one segment (lb).

    plate area = (length + 2*edge) * width - cutouts
    mass       = area * thickness * density * reduction * plates
    """
    length_with_edges = length + 2 * spec.bearing_edge_distance
    plate_area = length_with_edges * spec.width - spec.negative_area
    plate_volume = plate_area * spec.material.thickness
    plate_mass = plate_volume * spec.material.density * spec.weight_reduction_ratio
    return plate_mass * spec.plates


class Segment(Massive):
    """
    One structural beam plus the drivetrain that drives the next joint.
    """

    def __init__(self, length: float, spec: SegmentSpec = DEFAULT_SEGMENT):
        if length <= 0:
            raise ValueError(f"Segment length must be positive, got {length}")
        self._length = float(length)
        self._spec = spec
        self._mass = segment_material_mass(self._length, spec) + spec.drivetrain.total_mass

    @property
    def spec(self) -> SegmentSpec:
        return self._spec

    @property
    def mass(self) -> float:
        return self._mass

    @property
    def length(self) -> float:
        return self._length

    @property
    def center_of_mass(self) -> float:
        # hardware sits near the distal joint
        return self._length - self._spec.mass_offset

    def __repr__(self) -> str:
        return f"Segment(length={self._length:g})"


class Gripper(Massive):
    """Fixed end effector."""

    def __init__(self, spec: GripperSpec = DEFAULT_GRIPPER):
        self._spec = spec

    @property
    def spec(self) -> GripperSpec:
        return self._spec

    @property
    def mass(self) -> float:
        return self._spec.mass

    @property
    def length(self) -> float:
        return self._spec.length

    @property
    def center_of_mass(self) -> float:
        return self._spec.center_of_mass

    def __repr__(self) -> str:
        return f"Gripper({self._spec.name!r})"


class Arm(Massive):
    """
    Ordered chain of segments with the gripper fixed at the tip.

    Segment order matters: each component's centre of mass is measured from
    the arm base as (lengths of everything before it) + (its own centre).
    The composite centre of mass is the mass-weighted mean of those
    positions:

        com = Σ m_i * (offset_i + c_i) / Σ m_i

    and the base torque is mass * com, NOT the sum of the components' own
    torques (those are measured about different points).

    Parameters:
    -----------
    lengths : Iterable[float]
        Segment lengths (in), base first

    segment_spec : SegmentSpec
        Geometry and hardware for every segment

    gripper_spec : GripperSpec
        End effector appended after the last segment
    """

    def __init__(
        self,
        lengths: Iterable[float],
        segment_spec: SegmentSpec = DEFAULT_SEGMENT,
        gripper_spec: GripperSpec = DEFAULT_GRIPPER,
    ):
        segments = [Segment(length, segment_spec) for length in lengths]
        self._components: Tuple[Massive, ...] = tuple(segments) + (Gripper(gripper_spec),)

        masses = np.array([c.mass for c in self._components], dtype=float)
        comp_lengths = np.array([c.length for c in self._components], dtype=float)
        centers = np.array([c.center_of_mass for c in self._components], dtype=float)

        # distance from the arm base to each component's proximal end
        offsets = np.concatenate(([0.0], np.cumsum(comp_lengths)[:-1]))

        total_mass = float(masses.sum())
        assert total_mass > 0, "Arm mass must be positive"

        self._mass = total_mass
        self._length = float(comp_lengths.sum())
        self._center_of_mass = float(np.dot(masses, offsets + centers) / total_mass)

    @property
    def components(self) -> Tuple[Massive, ...]:
        """Segments in base-to-tip order, then the gripper."""
        return self._components

    @property
    def segments(self) -> Tuple[Massive, ...]:
        return self._components[:-1]

    @property
    def gripper(self) -> Massive:
        return self._components[-1]

    @property
    def segment_lengths(self) -> Tuple[float, ...]:
        return tuple(s.length for s in self.segments)

    @property
    def mass(self) -> float:
        return self._mass

    @property
    def length(self) -> float:
        return self._length

    @property
    def center_of_mass(self) -> float:
        return self._center_of_mass

    def __repr__(self) -> str:
        lengths = ", ".join(f"{length:g}" for length in self.segment_lengths)
        return f"Arm([{lengths}])"
