"""
gRPC transport for the category service.
"""

from .handler import CategoryServicer, build_generic_handler
from .server import create_server

__all__ = ["CategoryServicer", "build_generic_handler", "create_server"]
