from jobportal.services.portal import PortalService, ServiceError

__all__ = ["PortalService", "ServiceError"]
