"""
Data models for the paint map server
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Dict, Optional, Union


DEFAULT_TITLE = "無題の地図"


class Account(BaseModel):
    """Registered user; `id` is the key into the map store"""
    id: str
    user_name: str
    password: str  # plaintext, compared by equality only


class LegendItem(BaseModel):
    """One score level: position in the legend is the score"""
    title: str
    color: str


def default_legend() -> List[LegendItem]:
    return [
        LegendItem(title="項目1", color="#FFFFFF"),
        LegendItem(title="項目2", color="#75FBFD"),
        LegendItem(title="項目3", color="#FFFF54"),
        LegendItem(title="項目4", color="#EA3323"),
    ]


class MapData(BaseModel):
    """Map owned by a single account"""
    type: str = "city"
    title: str = DEFAULT_TITLE
    description: str = ""
    legend: List[LegendItem] = Field(default_factory=default_legend)
    score_format: int = 1
    data: Dict[str, Union[int, float]] = {}   # region key -> score
    share_level: int = 0                      # 0 = private
    last_update: int = 0                      # microseconds
    non_zero_legend: Optional[str] = None


class Position(BaseModel):
    lat: float
    lng: float
    zoom: int


class MapTemplate(BaseModel):
    """Static rendering metadata for one map type"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: str
    position: Position
    source: str
    fill_layer: str = Field(alias="fillLayer")
    outline_layer: Optional[str] = Field(default=None, alias="outlineLayer")
    min_zoom: int = Field(alias="minZoom")
    max_zoom: int = Field(alias="maxZoom")
    world_copy_jump: Optional[int] = Field(default=None, alias="worldCopyJump")

    def rendering_fields(self) -> Dict:
        """Wire-format fields merged into map responses (everything but `type`)"""
        return self.model_dump(by_alias=True, exclude_none=True, exclude={"type"})


class AuthResult(BaseModel):
    """Outcome of a credential check; a missing account is not an error"""
    exists: bool
    matches: bool
    account_id: Optional[str] = None

    @property
    def login(self) -> bool:
        return self.exists and self.matches


class ServerConfig(BaseModel):
    """Server configuration (config/server.yaml)"""
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]
    default_map_type: str = "city"
    api_paths: List[str] = ["/", "/api"]
