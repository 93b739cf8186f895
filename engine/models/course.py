"""
Course and tee models.

A tee is the immutable course configuration the handicap formulas read:
slope, rating, par and the per-hole stroke index.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Course:
    """A golf course with its check-in coordinates."""
    id: str
    name: str
    lat: float
    lng: float
    city: str = ""
    state: str = ""
    address: str = ""
    image_url: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "city": self.city,
            "state": self.state,
            "lat": self.lat,
            "lng": self.lng,
            "image_url": self.image_url,
        }


@dataclass(frozen=True)
class Tee:
    """
    A set of tees on a course.

    Attributes:
        slope: Slope rating (55-155).
        rating: Course rating (60-85).
        par: Par for the 18 holes (60-80).
        stroke_index: Difficulty rank per hole position (index = hole - 1),
            a permutation of 1..18 where 1 is the hardest hole.
        id: Tee identifier.
        course_id: Course this tee belongs to.
        name: Display name ("Blue", "Championship").
        color: Marker color.
        yardage: Total yardage.
    """
    slope: int
    rating: float
    par: int
    stroke_index: tuple[int, ...] = field(default_factory=tuple)
    id: str = ""
    course_id: str = ""
    name: str = ""
    color: str = ""
    yardage: int = 0

    def __post_init__(self) -> None:
        # Freeze list input so the tee can be shared between calls
        if not isinstance(self.stroke_index, tuple):
            object.__setattr__(self, "stroke_index", tuple(self.stroke_index))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "course_id": self.course_id,
            "name": self.name,
            "color": self.color,
            "slope": self.slope,
            "rating": self.rating,
            "par": self.par,
            "stroke_index": list(self.stroke_index),
            "yardage": self.yardage,
        }
