from typing import Optional

_UNSET = object()


class TrackingInformation:
    __slots__ = ("shipping_company", "tracking_number")

    def __init__(self, shipping_company=_UNSET, tracking_number=_UNSET):
        # fields stay unset unless given
        if shipping_company is not _UNSET:
            self.shipping_company = shipping_company
        if tracking_number is not _UNSET:
            self.tracking_number = tracking_number

    @property
    def display(self) -> str:
        return f"{self.shipping_company}: {self.tracking_number}"

    def __repr__(self):
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.__slots__ if hasattr(self, name))
        return f"TrackingInformation({fields})"


class Shipment:
    """A package in transit. Carrier and tracking number live on its TrackingInformation."""

    __slots__ = ("tracking_information",)

    def __init__(self, tracking_information: Optional[TrackingInformation] = None):
        self.tracking_information = tracking_information

    @property
    def tracking_info(self) -> str:
        # AttributeError when no TrackingInformation is associated
        return self.tracking_information.display

    def __repr__(self):
        return f"Shipment(tracking_information={self.tracking_information!r})"
