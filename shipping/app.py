import os, sys
import argparse
from typing import Optional
from loguru import logger
from .models import Shipment, TrackingInformation
from .schemas import ShipmentOut

SHIPPING_COMPANY = os.getenv("SHIPPING_COMPANY", "DHL")
TRACKING_NUMBER = os.getenv("TRACKING_NUMBER", "1234567890")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

def configure_logging(level: Optional[str] = None):
    level = level or LOG_LEVEL
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format="{time:HH:mm:ss} | {level: <8} | {message}")

def build_shipment(shipping_company: str, tracking_number: str) -> Shipment:
    shipment = Shipment()
    tracking_information = TrackingInformation()
    shipment.tracking_information = tracking_information

    shipment.tracking_information.shipping_company = shipping_company
    shipment.tracking_information.tracking_number = tracking_number
    logger.debug(f"[Shipping] Associated {tracking_information!r} with shipment")
    return shipment

def main(argv: Optional[list] = None, shipping_company: Optional[str] = None, tracking_number: Optional[str] = None) -> Shipment:
    parser = argparse.ArgumentParser(prog="shipping", description="Print a shipment's tracking info")
    parser.add_argument("--json", action="store_true", help="print the shipment as JSON")
    args = parser.parse_args(argv)

    configure_logging()
    shipment = build_shipment(
        shipping_company if shipping_company is not None else SHIPPING_COMPANY,
        tracking_number if tracking_number is not None else TRACKING_NUMBER,
    )
    logger.info(f"[Shipping] Tracking info ready: {shipment.tracking_info}")

    if args.json:
        print(ShipmentOut.from_shipment(shipment).model_dump_json())
    else:
        print(shipment.tracking_info)
    return shipment
