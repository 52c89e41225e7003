"""Keypoint data contract for sign recognition.

A KeypointFrame is what a perception pipeline must deliver for one camera
frame: fixed-cardinality landmark arrays with normalized coordinates.

    left_hand   (21, 3)   x, y, z
    right_hand  (21, 3)   x, y, z
    pose        (33, 4)   x, y, z, visibility
    face        (468, 3)  x, y, z

flatten() concatenates pose, face, left hand, right hand into the usual
1662-value feature vector fed to sequence classifiers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from packages.core.errors import InvalidKeypointsError

HAND_POINTS = 21
POSE_POINTS = 33
FACE_POINTS = 468

HAND_SHAPE = (HAND_POINTS, 3)
POSE_SHAPE = (POSE_POINTS, 4)
FACE_SHAPE = (FACE_POINTS, 3)

FEATURE_SIZE = POSE_POINTS * 4 + FACE_POINTS * 3 + 2 * HAND_POINTS * 3  # 1662

_AXES = ("x", "y", "z")
_POSE_AXES = ("x", "y", "z", "visibility")


def _as_array(part: str, values: Any, shape: tuple[int, int]) -> np.ndarray:
    array = np.asarray(values, dtype=np.float32)
    if array.shape != shape:
        raise InvalidKeypointsError(part, shape, tuple(array.shape))
    return array


@dataclass(frozen=True, eq=False)
class KeypointFrame:
    """Hand, pose and face landmarks for a single frame.

    Arrays are converted to float32 and shape-checked on construction.

    Raises:
        InvalidKeypointsError: If any array has the wrong shape
    """

    left_hand: np.ndarray
    right_hand: np.ndarray
    pose: np.ndarray
    face: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "left_hand", _as_array("left_hand", self.left_hand, HAND_SHAPE))
        object.__setattr__(self, "right_hand", _as_array("right_hand", self.right_hand, HAND_SHAPE))
        object.__setattr__(self, "pose", _as_array("pose", self.pose, POSE_SHAPE))
        object.__setattr__(self, "face", _as_array("face", self.face, FACE_SHAPE))

    @classmethod
    def empty(cls) -> "KeypointFrame":
        """Frame with every landmark at zero (nothing detected)."""
        return cls(
            left_hand=np.zeros(HAND_SHAPE, dtype=np.float32),
            right_hand=np.zeros(HAND_SHAPE, dtype=np.float32),
            pose=np.zeros(POSE_SHAPE, dtype=np.float32),
            face=np.zeros(FACE_SHAPE, dtype=np.float32),
        )

    @property
    def has_hands(self) -> bool:
        """True if either hand has any non-zero landmark."""
        return bool(self.left_hand.any() or self.right_hand.any())

    def flatten(self) -> np.ndarray:
        """Concatenate pose, face, left hand, right hand into one vector."""
        return np.concatenate([
            self.pose.ravel(),
            self.face.ravel(),
            self.left_hand.ravel(),
            self.right_hand.ravel(),
        ])

    def equals(self, other: "KeypointFrame") -> bool:
        """Element-wise equality of all arrays."""
        return (
            np.array_equal(self.left_hand, other.left_hand)
            and np.array_equal(self.right_hand, other.right_hand)
            and np.array_equal(self.pose, other.pose)
            and np.array_equal(self.face, other.face)
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to point records for JSON serialization."""
        return {
            "hands": {
                "left": _to_points(self.left_hand, _AXES),
                "right": _to_points(self.right_hand, _AXES),
            },
            "pose": _to_points(self.pose, _POSE_AXES),
            "face": _to_points(self.face, _AXES),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "KeypointFrame":
        """Create from point records (as produced by to_dict).

        Raises:
            InvalidKeypointsError: If a part is not a list of point objects
                with numeric coordinates, or has the wrong number of points
        """
        if not isinstance(data, dict):
            raise InvalidKeypointsError("frame", (), reason="must be an object")
        hands = data.get("hands", {})
        if not isinstance(hands, dict):
            raise InvalidKeypointsError("hands", HAND_SHAPE, reason="must be an object")
        return cls(
            left_hand=_from_points("left_hand", hands.get("left", []), _AXES, HAND_SHAPE),
            right_hand=_from_points("right_hand", hands.get("right", []), _AXES, HAND_SHAPE),
            pose=_from_points("pose", data.get("pose", []), _POSE_AXES, POSE_SHAPE),
            face=_from_points("face", data.get("face", []), _AXES, FACE_SHAPE),
        )


def _to_points(array: np.ndarray, axes: tuple[str, ...]) -> list[dict[str, float]]:
    return [dict(zip(axes, (float(v) for v in row))) for row in array]


def _from_points(
    part: str,
    points: list[dict[str, float]],
    axes: tuple[str, ...],
    shape: tuple[int, int],
) -> np.ndarray:
    try:
        rows = [[float(p.get(axis, 0.0)) for axis in axes] for p in points]
    except (AttributeError, TypeError, ValueError) as e:
        raise InvalidKeypointsError(part, shape, reason=f"are malformed: {e}") from e
    return np.asarray(rows, dtype=np.float32).reshape(len(rows), len(axes))


class PlaceholderPerception:
    """Stand-in perception source producing random normalized landmarks.

    x and y in [0, 1), z in [0, 0.1), visibility in [0, 1). The frame
    argument is ignored.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def _points(self, count: int, with_visibility: bool = False) -> np.ndarray:
        xy = self.rng.random((count, 2))
        z = self.rng.random((count, 1)) * 0.1
        columns = [xy, z]
        if with_visibility:
            columns.append(self.rng.random((count, 1)))
        return np.hstack(columns)

    def extract(self, frame: Any = None) -> KeypointFrame:
        return KeypointFrame(
            left_hand=self._points(HAND_POINTS),
            right_hand=self._points(HAND_POINTS),
            pose=self._points(POSE_POINTS, with_visibility=True),
            face=self._points(FACE_POINTS),
        )
