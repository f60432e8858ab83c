from pydantic import BaseModel, Field
from .models import Shipment, TrackingInformation

class TrackingInformationIn(BaseModel):
    shipping_company: str = Field(..., examples=["DHL"])
    tracking_number: str = Field(..., examples=["1234567890"])

    def to_domain(self) -> TrackingInformation:
        return TrackingInformation(shipping_company=self.shipping_company, tracking_number=self.tracking_number)

class ShipmentOut(BaseModel):
    shipping_company: str
    tracking_number: str
    tracking_info: str

    @classmethod
    def from_shipment(cls, shipment: Shipment) -> "ShipmentOut":
        info = shipment.tracking_information
        return cls(
            shipping_company=info.shipping_company,
            tracking_number=info.tracking_number,
            tracking_info=shipment.tracking_info,
        )
