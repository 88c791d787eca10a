"""Pydantic view frames produced by screens and returned by the API"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field


class LogoFrame(BaseModel):
    """Logo image, or its one-character placeholder when loading failed"""

    url: str
    placeholder: str
    show_placeholder: bool = False


class StatusBadge(BaseModel):
    text: str
    style: str  # success | warning | danger
    color: str


class DetailPanelFrame(BaseModel):
    """Secondary panel whose visible height follows the reveal factor"""

    amount_label: str = "Amount Due"
    amount_text: str
    due_label: str = "Due Date"
    due_date: str
    reveal_factor: float
    visible: bool


class BillCardFrame(BaseModel):
    index: int
    title: str
    masked_number: str
    status: StatusBadge
    logo: LogoFrame
    entry_phase: str
    expansion_phase: str
    expanded: bool
    opacity: float
    offset_fraction: float
    chevron_degrees: float
    detail: DetailPanelFrame


class BannerFrame(BaseModel):
    image_url: str
    visible: bool
    opacity: float
    scale: float
    headline: str


class RewardScreenFrame(BaseModel):
    title: str
    at_ms: float
    banner: BannerFrame
    button_label: str
    cards: List[BillCardFrame]


class ConfirmationFrame(BaseModel):
    open: bool
    icon: str = "percent"
    heading: str = "Claimed!"
    message: str
    action_label: str = "Great!"


class BrandTileFrame(BaseModel):
    index: int
    name: str
    logo: LogoFrame


class BrandGridFrame(BaseModel):
    title: str
    columns: int
    rows: List[List[BrandTileFrame]]
    confirmation: Optional[ConfirmationFrame] = None


class BillSchema(BaseModel):
    """Bill as exposed to clients; the raw card number never leaves the server"""

    brand: str
    masked_number: str
    amount: Decimal
    due_date: str
    status: str
    logo_url: str


class TapRequest(BaseModel):
    index: int = Field(..., ge=0, description="Card position in the list")
    at_ms: float = Field(..., ge=0, allow_inf_nan=False, description="Time of the tap since mount")


class RewardFrameRequest(BaseModel):
    """Request body for POST /v1/screens/reward/frame"""

    at_ms: float = Field(..., ge=0, allow_inf_nan=False, description="Render time since mount in milliseconds")
    taps: List[TapRequest] = Field(default_factory=list)
