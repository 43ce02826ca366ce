"""
CatPoint Core Models

Sensor model. Uses Pydantic for validation and serialization.
"""

from pydantic import BaseModel, ConfigDict, Field

from .enums import SensorType


class Sensor(BaseModel):
    """Door, window or motion detector with a binary active state.

    Identity is ``(name, sensor_type)``. ``active`` is mutable and does not
    take part in equality or hashing, so a sensor keeps its place in a set
    while it toggles.
    """
    name: str = Field(min_length=1)
    sensor_type: SensorType
    active: bool = False

    model_config = ConfigDict(validate_assignment=True)

    @property
    def key(self) -> tuple[str, str]:
        return (self.name, self.sensor_type.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return self.key < other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        state = "active" if self.active else "inactive"
        return f"Sensor({self.name!r}, {self.sensor_type.value}, {state})"
