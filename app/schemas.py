from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Literal, Optional, Tuple


class BikeModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str
    price_per_day: int = Field(..., gt=0, description="VND por día")
    available: bool = True
    engine: str = ""
    transmission: Literal["automatic", "manual"] = "automatic"
    fuel_type: Literal["petrol", "electric"] = "petrol"
    photo: Optional[str] = None


class RentalOption(BaseModel):
    """Una tienda de renta en una ciudad. Inmutable: los filtros crean copias."""
    model_config = ConfigDict(frozen=True)

    city: str
    shop: str
    contact: str
    bikes: Tuple[BikeModel, ...] = ()
    discount: Optional[str] = None
    delivery: str = ""
    requirements: Tuple[str, ...] = ()
    rating: Optional[float] = Field(None, ge=0, le=5)
    address: Optional[str] = None
    working_hours: Optional[str] = None

    def find_bike(self, model: str) -> Optional[BikeModel]:
        return next((b for b in self.bikes if b.model == model), None)


class BookingRequest(BaseModel):
    shop_name: str
    bike_model: str
    start_date: str
    end_date: str
    customer_name: str
    delivery_address: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None


class NegotiationResult(BaseModel):
    success: bool
    final_price: int
    original_price: int
    message: str


class BookingSummary(BaseModel):
    booking_id: str = ""
    shop: str
    contact: str
    address: Optional[str] = None
    bike: BikeModel
    days: int
    daily_price: str
    total_price: str
    requirements: Tuple[str, ...] = ()
    delivery: str = ""
    discount: Optional[str] = None
    start_date: str
    end_date: str
    agent_note: str = ""

    @property
    def duration(self) -> str:
        return f"{self.days} days"


class ToolCall(BaseModel):
    name: str = Field(..., description="Tool name, e.g. search_rentals")
    arguments: Dict[str, Any] = Field(default_factory=dict)
