from .models import Shipment, TrackingInformation

__all__ = ["Shipment", "TrackingInformation"]
