# Service layer exports
from dsprofile.services.display_service import DisplayService as DisplayService
from dsprofile.services.profile_service import ProfileService as ProfileService

__all__ = [
    "DisplayService",
    "ProfileService",
]
