"""Room-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class RoomResponse(BaseModel):
    id: str
    serial_number: int
    name: str
    position: int
    hidden: bool

    model_config = ConfigDict(from_attributes=True)


class SeedRoomsRequest(BaseModel):
    slug: str = Field(..., min_length=1)


class SeedRoomsResponse(BaseModel):
    """Seeding outcome; ``distribution`` is empty when rooms already existed."""

    message: str
    rooms: list[RoomResponse]
    distribution: dict[str, int] | None = None


class RoomVisibilityRequest(BaseModel):
    slug: str = Field(..., min_length=1)
    room_id: str = Field(..., min_length=1)
    hidden: bool
