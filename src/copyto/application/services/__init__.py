from .copy_service import CopyServiceRequest, CopyToService

__all__ = ["CopyServiceRequest", "CopyToService"]
