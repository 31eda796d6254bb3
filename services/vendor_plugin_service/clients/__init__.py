"""
Vendor Plugin Service Clients

HTTP clients for external vendor APIs.
"""

from .vendor_client import VendorApiClient

__all__ = ["VendorApiClient"]
