from .registration_service import build_producer_info, register_with_coordinator

__all__ = ["build_producer_info", "register_with_coordinator"]
