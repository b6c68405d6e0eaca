from pydantic import ConfigDict

from umission.core.response.base_model import CustomBaseModel


class Badge(CustomBaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    icon: str
    description: str
    color: str


class AchievementsResponse(CustomBaseModel):
    badges: list[Badge]
    merit_points: int
    completed_events: int
