import math
from datetime import date, datetime
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

DEFAULT_HEIGHT = 2.4  # metres — standard wall height for new walls and rooms


def _to_number(value, default: float = 0.0) -> float:
    """Coerce user input to a float. Blank, missing or non-numeric input gives the default."""
    if value is None:
        return default
    try:
        number = float(str(value).strip())
    except (ValueError, TypeError):
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def _to_height(value) -> float:
    return _to_number(value, default=DEFAULT_HEIGHT)


def _to_depth(value) -> int:
    return 2 if _to_number(value, default=3) == 2 else 3


def _to_watts(value) -> int:
    watts = int(_to_number(value, default=150))
    return watts if watts in (100, 150, 200) else 150


def _to_text(value) -> str:
    return "" if value is None else str(value)


Number = Annotated[float, BeforeValidator(_to_number)]
Height = Annotated[float, BeforeValidator(_to_height)]
Text = Annotated[str, BeforeValidator(_to_text)]


# --- Catalog ---

class TilePreset(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    length_mm: float
    width_mm: float


# --- Room measurements ---

class FloorArea(BaseModel):
    length: Number = 0.0
    width: Number = 0.0


class WallSegment(BaseModel):
    length: Number = 0.0
    height: Height = DEFAULT_HEIGHT
    deduct: Number = 0.0  # m² of doors/windows


class ModularTileEntry(BaseModel):
    preset: Text = ""
    proportion: Number = 0.0


def default_modular_mix() -> List[ModularTileEntry]:
    return [
        ModularTileEntry(preset="600×600", proportion=25),
        ModularTileEntry(preset="600×300", proportion=50),
        ModularTileEntry(preset="300×300", proportion=25),
    ]


# --- Room options (one descriptor per material/install option) ---

class CementBoardOption(BaseModel):
    kind: Literal["cement_board"] = "cement_board"


class AntiCrackOption(BaseModel):
    kind: Literal["anti_crack"] = "anti_crack"


class LevellingCompoundOption(BaseModel):
    kind: Literal["levelling_compound"] = "levelling_compound"
    depth_mm: Annotated[int, BeforeValidator(_to_depth)] = 3


class LevellingClipsOption(BaseModel):
    kind: Literal["levelling_clips"] = "levelling_clips"
    manual_qty: Number = 0.0  # used when the tile size is too small for clips


class TankingOption(BaseModel):
    kind: Literal["tanking"] = "tanking"
    walls: bool = True
    floor: bool = False


class SealerOption(BaseModel):
    kind: Literal["sealer"] = "sealer"


class UnderfloorHeatingOption(BaseModel):
    kind: Literal["underfloor_heating"] = "underfloor_heating"
    watts_per_m2: Annotated[int, BeforeValidator(_to_watts)] = 150


class TrimOption(BaseModel):
    kind: Literal["trim"] = "trim"
    length_m: Number = 0.0


RoomOption = Annotated[
    Union[
        CementBoardOption,
        AntiCrackOption,
        LevellingCompoundOption,
        LevellingClipsOption,
        TankingOption,
        SealerOption,
        UnderfloorHeatingOption,
        TrimOption,
    ],
    Field(discriminator="kind"),
]


class RoomSpec(BaseModel):
    name: Text = "Room 1"
    tile_type: Literal["floor", "wall"] = "floor"
    floor_areas: List[FloorArea] = []
    walls: List[WallSegment] = []

    # Four-wall shortcut: one rectangle instead of individual segments
    use_four_wall_calc: bool = False
    room_length: Number = 0.0
    room_width: Number = 0.0
    room_height: Height = DEFAULT_HEIGHT
    four_wall_deduct: Number = 0.0

    tile_size_preset: Text = ""
    use_modular_pattern: bool = False
    modular_tiles: List[ModularTileEntry] = Field(default_factory=default_modular_mix)

    options: List[RoomOption] = []


# --- Pricing inputs ---

class RateSheet(BaseModel):
    model_config = ConfigDict(frozen=True)

    labour_mode: Literal["m2", "day"] = "m2"
    floor_rate: Number = 45.0
    wall_rate: Number = 55.0
    day_rate: Number = 250.0
    days_estimate: Number = 1.0

    adhesive_price_per_bag: Number = 15.0
    adhesive_coverage_per_bag: Number = 4.0
    grout_price_per_bag: Number = 8.50
    cement_board_price_per_sheet: Number = 8.0
    cement_board_labour_per_m2: Number = 5.0
    levelling_compound_price_per_bag: Number = 12.0
    levelling_compound_labour_per_m2: Number = 4.0
    ufh_mat_price_per_m2: Number = 35.0
    ufh_thermostat_price: Number = 120.0
    ufh_labour_per_m2: Number = 8.0
    levelling_clips_price_per_100: Number = 18.0
    anti_crack_per_m2: Number = 8.0
    anti_crack_labour_per_m2: Number = 4.0
    tanking_per_tub: Number = 85.0
    tanking_labour_per_m2: Number = 6.0
    sealer_per_m2: Number = 6.0
    sealer_labour_per_m2: Number = 3.0
    trim_price_per_length: Number = 3.50

    vat_enabled: bool = False
    vat_rate: Number = 20.0


class GroutSpec(BaseModel):
    """Global tile size used when a room has no preset or modular mix of its own."""
    model_config = ConfigDict(frozen=True)

    tile_length: Number = 600.0    # mm
    tile_width: Number = 300.0     # mm
    tile_thickness: Number = 10.0  # mm
    joint_width: Number = 2.0      # mm
    waste_percent: Number = 10.0


class CustomerInfo(BaseModel):
    name: Text = ""
    address: Text = ""
    email: Text = ""
    phone: Text = ""


# --- Computed output ---

class AreaTotals(BaseModel):
    model_config = ConfigDict(frozen=True)

    floor_area: float = 0.0
    wall_area: float = 0.0


class MaterialLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    description: str
    quantity: float     # measured amount (kg, m², clips, m)
    unit: str
    units: Optional[int] = None  # purchasable units after rounding up; None when sold per m²
    unit_label: str = ""
    cost: float


class LabourLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    description: str
    area: float
    cost: float


class RoomBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    floor_area: float
    wall_area: float
    clips_per_m2: Optional[float] = None
    ufh_watts: float = 0.0


class QuoteResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    floor_area: float
    wall_area: float

    labour_mode: str
    tiling_labour: float
    install_labour: List[LabourLine] = []
    install_labour_total: float
    total_labour_cost: float

    materials: List[MaterialLine] = []
    materials_total: float

    sub_total: float
    margin_percent: float
    margin_amount: float
    total_with_margin: float
    vat_enabled: bool
    vat_rate: float
    vat_amount: float
    grand_total: float

    ufh_thermostat_count: int = 0
    ufh_total_watts: float = 0.0
    rooms: List[RoomBreakdown] = []
    notes: List[str] = []

    def material(self, key: str) -> Optional[MaterialLine]:
        for line in self.materials:
            if line.key == key:
                return line
        return None

    def labour(self, key: str) -> Optional[LabourLine]:
        for line in self.install_labour:
            if line.key == key:
                return line
        return None

    @property
    def has_calculations(self) -> bool:
        return self.floor_area > 0 or self.wall_area > 0


# --- API request/response bodies ---

class AreasRequest(BaseModel):
    rooms: List[RoomSpec] = []


class QuoteRequest(BaseModel):
    rooms: List[RoomSpec] = []
    rates: RateSheet = RateSheet()
    grout: GroutSpec = GroutSpec()


class MessageRequest(QuoteRequest):
    customer: CustomerInfo = CustomerInfo()
    quote_date: Optional[date] = None


class MessageResponse(BaseModel):
    message: str
    whatsapp_url: str
    email_url: str


class DefaultsResponse(BaseModel):
    rates: RateSheet
    grout: GroutSpec
    room: RoomSpec


class SpeechRequest(BaseModel):
    transcript: str
    numeric: bool = True


class SpeechResponse(BaseModel):
    value: Optional[str] = None


class SavedQuoteCreate(BaseModel):
    customer: CustomerInfo = CustomerInfo()
    rooms: List[RoomSpec] = []
    rates: RateSheet = RateSheet()
    grout: GroutSpec = GroutSpec()


class SavedQuote(SavedQuoteCreate):
    id: int
    saved_at: str
    created_at: datetime
    grand_total: float


class RatePreset(BaseModel):
    name: str
    rates: RateSheet
    updated_at: Optional[datetime] = None


class CustomerBase(BaseModel):
    name: str
    address: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None


class CustomerCreate(CustomerBase):
    pass


class Customer(CustomerBase):
    id: int
    created_at: datetime
    class Config:
        from_attributes = True


class CustomerUpdate(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None
