"""
Pydantic models for the engine's request/response envelopes.

Field names follow the engine schema. Every field is optional on the wire:
fields with an engine-defined default carry that default here, fields whose
absence is meaningful default to None. Unknown keys are ignored, so a newer
engine build that adds fields does not break decoding.
"""

from typing import Any

from pydantic import BaseModel, Field

# ============================================================================
# Shared value messages
# ============================================================================


class WirePoint2D(BaseModel):
    x: float = 0.0
    y: float = 0.0


class WirePoint(BaseModel):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class WirePointI(BaseModel):
    x: int = 0
    y: int = 0


class WireRectangleI(BaseModel):
    p0: WirePointI | None = None
    p1: WirePointI | None = None


class WireImageData(BaseModel):
    """Packed grid: bits_per_pixel is 1 for pathing/placement, 8 for height."""

    bits_per_pixel: int = 0
    size: WirePointI | None = None
    data: bytes = b""


# ============================================================================
# Data catalogs (ResponseData)
# ============================================================================


class WireAbilityData(BaseModel):
    ability_id: int = 0
    link_name: str = ""
    link_index: int = 0
    button_name: str | None = None
    friendly_name: str | None = None
    hotkey: str | None = None
    remaps_to_ability_id: int | None = None
    available: bool = False
    target: int = 1
    allow_minimap: bool = False
    allow_autocast: bool = False
    is_building: bool = False
    footprint_radius: float | None = None
    is_instant_placement: bool = False
    cast_range: float | None = None


class WireDamageBonus(BaseModel):
    attribute: int = 1
    bonus: float = 0.0


class WireWeapon(BaseModel):
    type: int = 1
    damage: float = 0.0
    damage_bonus: list[WireDamageBonus] = Field(default_factory=list)
    attacks: int = 0
    range: float = 0.0
    speed: float = 0.0


class WireUnitTypeData(BaseModel):
    unit_id: int = 0
    name: str = ""
    available: bool = False
    cargo_size: int = 0
    mineral_cost: int = 0
    vespene_cost: int = 0
    food_required: float = 0.0
    food_provided: float = 0.0
    ability_id: int | None = None
    race: int = 0
    build_time: float = 0.0
    has_vespene: bool = False
    has_minerals: bool = False
    sight_range: float = 0.0
    tech_alias: list[int] = Field(default_factory=list)
    unit_alias: int | None = None
    tech_requirement: int | None = None
    require_attached: bool = False
    attributes: list[int] = Field(default_factory=list)
    movement_speed: float = 0.0
    armor: float = 0.0
    weapons: list[WireWeapon] = Field(default_factory=list)


class WireUpgradeData(BaseModel):
    upgrade_id: int = 0
    name: str = ""
    mineral_cost: int = 0
    vespene_cost: int = 0
    research_time: float = 0.0
    ability_id: int = 0


class WireBuffData(BaseModel):
    buff_id: int = 0
    name: str = ""


class WireEffectData(BaseModel):
    effect_id: int = 0
    name: str = ""
    friendly_name: str = ""
    radius: float = 0.0


class ResponseData(BaseModel):
    abilities: list[WireAbilityData] = Field(default_factory=list)
    units: list[WireUnitTypeData] = Field(default_factory=list)
    upgrades: list[WireUpgradeData] = Field(default_factory=list)
    buffs: list[WireBuffData] = Field(default_factory=list)
    effects: list[WireEffectData] = Field(default_factory=list)


# ============================================================================
# Game info (ResponseGameInfo)
# ============================================================================


class WirePlayerInfo(BaseModel):
    player_id: int = 0
    type: int = 1
    race_requested: int = 0
    race_actual: int | None = None
    difficulty: int | None = None
    ai_build: int | None = None
    player_name: str | None = None


class WireStartRaw(BaseModel):
    map_size: WirePointI | None = None
    pathing_grid: WireImageData | None = None
    terrain_height: WireImageData | None = None
    placement_grid: WireImageData | None = None
    playable_area: WireRectangleI | None = None
    start_locations: list[WirePoint2D] = Field(default_factory=list)


class ResponseGameInfo(BaseModel):
    map_name: str = ""
    mod_names: list[str] = Field(default_factory=list)
    local_map_path: str = ""
    player_info: list[WirePlayerInfo] = Field(default_factory=list)
    start_raw: WireStartRaw | None = None


# ============================================================================
# Observation / score
# ============================================================================


class WireCategoryScoreDetails(BaseModel):
    none: float = 0.0
    army: float = 0.0
    economy: float = 0.0
    technology: float = 0.0
    upgrade: float = 0.0


class WireVitalScoreDetails(BaseModel):
    life: float = 0.0
    shields: float = 0.0
    energy: float = 0.0


class WireScoreDetails(BaseModel):
    idle_production_time: float = 0.0
    idle_worker_time: float = 0.0
    total_value_units: float = 0.0
    total_value_structures: float = 0.0
    killed_value_units: float = 0.0
    killed_value_structures: float = 0.0
    collected_minerals: float = 0.0
    collected_vespene: float = 0.0
    collection_rate_minerals: float = 0.0
    collection_rate_vespene: float = 0.0
    spent_minerals: float = 0.0
    spent_vespene: float = 0.0
    food_used: WireCategoryScoreDetails | None = None
    killed_minerals: WireCategoryScoreDetails | None = None
    killed_vespene: WireCategoryScoreDetails | None = None
    lost_minerals: WireCategoryScoreDetails | None = None
    lost_vespene: WireCategoryScoreDetails | None = None
    friendly_fire_minerals: WireCategoryScoreDetails | None = None
    friendly_fire_vespene: WireCategoryScoreDetails | None = None
    used_minerals: WireCategoryScoreDetails | None = None
    used_vespene: WireCategoryScoreDetails | None = None
    total_used_minerals: WireCategoryScoreDetails | None = None
    total_used_vespene: WireCategoryScoreDetails | None = None
    total_damage_dealt: WireVitalScoreDetails | None = None
    total_damage_taken: WireVitalScoreDetails | None = None
    total_healed: WireVitalScoreDetails | None = None
    current_apm: float = 0.0
    current_effective_apm: float = 0.0


class WireScore(BaseModel):
    score_type: int = 1
    score: int = 0
    score_details: WireScoreDetails | None = None


class WireObservation(BaseModel):
    game_loop: int = 0
    score: WireScore | None = None


class ResponseObservation(BaseModel):
    observation: WireObservation | None = None


# ============================================================================
# Misc responses
# ============================================================================


class ResponseDebug(BaseModel):
    """Debug acknowledgment; the engine sends no payload."""


class ResponsePing(BaseModel):
    game_version: str = ""
    data_version: str = ""
    data_build: int = 0
    base_build: int = 0


class Response(BaseModel):
    """Envelope for one engine reply. At most one sub-message is usually set."""

    id: int | None = None
    status: int | None = None
    error: list[str] = Field(default_factory=list)
    data: ResponseData | None = None
    game_info: ResponseGameInfo | None = None
    observation: ResponseObservation | None = None
    debug: ResponseDebug | None = None
    ping: ResponsePing | None = None


# ============================================================================
# Requests
# ============================================================================


class RequestData(BaseModel):
    ability_id: bool = True
    unit_type_id: bool = True
    upgrade_id: bool = True
    buff_id: bool = True
    effect_id: bool = True


class RequestGameInfo(BaseModel):
    pass


class RequestObservation(BaseModel):
    disable_fog: bool | None = None
    game_loop: int | None = None


class RequestDebug(BaseModel):
    """Batch of debug commands, each already in its wire shape."""

    debug: list[dict[str, Any]] = Field(default_factory=list)


class RequestPing(BaseModel):
    pass


class RequestQuit(BaseModel):
    pass


class Request(BaseModel):
    id: int | None = None
    data: RequestData | None = None
    game_info: RequestGameInfo | None = None
    observation: RequestObservation | None = None
    debug: RequestDebug | None = None
    ping: RequestPing | None = None
    quit: RequestQuit | None = None

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
