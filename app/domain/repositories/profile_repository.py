from abc import ABC, abstractmethod
from typing import Optional, List
from ..models.profile import Profile


class ProfileRepository(ABC):
    """Repository interface - defines contract for profile data access"""
    
    @abstractmethod
    async def find_by_user(self, user_id: str) -> Optional[Profile]:
        """Find the profile owned by a user"""
        pass
    
    @abstractmethod
    async def find_by_handle(self, handle: str) -> Optional[Profile]:
        """Find profile by its public handle"""
        pass
    
    @abstractmethod
    async def find_all(self) -> List[Profile]:
        """List all profiles, newest first"""
        pass
    
    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save profile (create or update)"""
        pass
    
    @abstractmethod
    async def delete_by_user(self, user_id: str) -> bool:
        """Delete the profile owned by a user, returns True if one was removed"""
        pass
