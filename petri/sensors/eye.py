"""
Angular sensor model.

An Eye turns the positions of nearby targets into a fixed-length
stimulus vector, one value per photoreceptor cell. Each cell covers an
equal slice of the field of view; a target inside the field of view
adds energy to the cell it falls in, more the closer it is.

Geometry conventions:
- Heading 0 faces +y; positive headings rotate counter-clockwise,
  so the forward vector for heading h is (-sin h, cos h).
- Bearings are measured the same way, so a target straight ahead has
  a relative angle of 0, targets to the left are positive and targets
  to the right are negative.
- Cell 0 covers the right-most slice, cell `cells - 1` the left-most.

Field of view:
    - fov_range: how far the eye sees, in world units.
    - fov_angle: how wide the eye sees, in radians. pi/2 is a 90
      degree cone in front of the observer, 2*pi sees all around.
    - cells: number of photoreceptors. Around 3 to 11 works well;
      many more makes evolution slower to find a solution.
"""
import math
from typing import Sequence

import numpy as np

from .utils import wrap_angle

FOV_RANGE = 0.25
FOV_ANGLE = math.pi + math.pi / 4
CELLS = 9


class Eye:
    """
    Stateless angular sensor.

    Example:
        eye = Eye(fov_range=200.0, fov_angle=math.pi, cells=9)
        stimulus = eye.perceive((400.0, 400.0), 0.0, food_positions)
    """

    def __init__(
        self,
        fov_range: float = FOV_RANGE,
        fov_angle: float = FOV_ANGLE,
        cells: int = CELLS,
    ):
        """
        Initialize the eye.

        Args:
            fov_range: Maximum sight distance (exclusive), > 0.
            fov_angle: Angular width of the field of view, > 0.
            cells: Number of photoreceptor cells, >= 1.

        Raises:
            ValueError: If any parameter is out of range.
        """
        if not fov_range > 0:
            raise ValueError(f"fov_range must be positive, got {fov_range}")
        if not fov_angle > 0:
            raise ValueError(f"fov_angle must be positive, got {fov_angle}")
        if int(cells) != cells or cells < 1:
            raise ValueError(f"cells must be a positive integer, got {cells}")

        self.fov_range = float(fov_range)
        self.fov_angle = float(fov_angle)
        self.cells = int(cells)

    def perceive(
        self,
        position: Sequence[float],
        rotation: float,
        targets,
    ) -> np.ndarray:
        """
        Compute the stimulus produced by a set of targets.

        Args:
            position: Observer position (x, y).
            rotation: Observer heading in radians.
            targets: Array-like of target positions, shape (N, 2).

        Returns:
            Array of length `cells`. Each target inside the field of
            view adds (fov_range - distance) / fov_range to its cell.
        """
        stimulus = np.zeros(self.cells, dtype=np.float64)

        targets = np.asarray(targets, dtype=np.float64).reshape(-1, 2)
        if targets.shape[0] == 0:
            return stimulus

        displacement = targets - np.asarray(position, dtype=np.float64)
        distance = np.hypot(displacement[:, 0], displacement[:, 1])

        bearing = np.arctan2(-displacement[:, 0], displacement[:, 1])
        angle = wrap_angle(bearing - rotation)

        half_fov = self.fov_angle / 2.0
        visible = (distance < self.fov_range) & (angle >= -half_fov) & (angle <= half_fov)
        if not visible.any():
            return stimulus

        angle = angle[visible]
        distance = distance[visible]

        cell = np.floor((angle + half_fov) / self.fov_angle * self.cells).astype(np.int64)
        cell = np.clip(cell, 0, self.cells - 1)

        energy = (self.fov_range - distance) / self.fov_range
        np.add.at(stimulus, cell, energy)

        return stimulus

    def __repr__(self) -> str:
        return (
            f"Eye(fov_range={self.fov_range}, fov_angle={self.fov_angle}, "
            f"cells={self.cells})"
        )
