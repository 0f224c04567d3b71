# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING

# Local application imports
from ...domain.repositories.profile_repository import ProfileRepository
from ...domain.models.profile import Profile, SocialLinks, Experience, Education
from ...domain.constants import ProfileFields, EntryFields
from ...utils.datetime_utils import date_to_datetime, datetime_to_date, ensure_utc
from .mongo_connection import get_profile_collection
from .mongo_user_repository import to_object_id


class MongoProfileRepository(ProfileRepository):
    """MongoDB implementation of ProfileRepository"""
    
    def __init__(self, profile_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.profile_collection = profile_collection if profile_collection is not None else get_profile_collection()
    
    async def find_by_user(self, user_id: str) -> Optional[Profile]:
        if not user_id:
            return None
        return await self._find_one({ProfileFields.USER_ID: user_id})
    
    async def find_by_handle(self, handle: str) -> Optional[Profile]:
        if not handle:
            return None
        return await self._find_one({ProfileFields.HANDLE: handle})
    
    async def find_all(self) -> List[Profile]:
        try:
            cursor = self.profile_collection.find().sort(ProfileFields.CREATED_AT, DESCENDING)
            profiles = []
            async for document in cursor:
                profiles.append(self._document_to_profile(document))
            return profiles
        except Exception as e:
            raise RuntimeError(f"Error listing profiles: {str(e)}")
    
    async def save(self, profile: Profile) -> Profile:
        """
        Save profile (create new or replace existing)
        
        A profile carrying an ID is written with upsert, so a previously
        deleted profile can be restored under its original ID.
        """
        if not profile:
            raise ValueError("Profile cannot be None")
        
        profile_dict = self._profile_to_dict(profile)
        
        try:
            if profile.id:
                object_id = to_object_id(profile.id)
                if object_id is None:
                    raise ValueError(f"Invalid profile ID format: {profile.id}")
                await self.profile_collection.replace_one(
                    {ProfileFields.MONGO_ID: object_id},
                    profile_dict,
                    upsert=True,
                )
            else:
                result = await self.profile_collection.insert_one(profile_dict)
                object_id = result.inserted_id
            document = await self.profile_collection.find_one({ProfileFields.MONGO_ID: object_id})
        except ValueError:
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving profile: {str(e)}")
        
        if document is None:
            raise RuntimeError("Profile was saved but could not be retrieved")
        return self._document_to_profile(document)
    
    async def delete_by_user(self, user_id: str) -> bool:
        if not user_id:
            return False
        try:
            result = await self.profile_collection.delete_one({ProfileFields.USER_ID: user_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting profile: {str(e)}")
        return result.deleted_count > 0
    
    async def _find_one(self, query: Dict[str, Any]) -> Optional[Profile]:
        try:
            document = await self.profile_collection.find_one(query)
        except Exception as e:
            raise RuntimeError(f"Error finding profile: {str(e)}")
        if document is None:
            return None
        return self._document_to_profile(document)
    
    def _document_to_profile(self, document: Dict[str, Any]) -> Profile:
        """
        Convert MongoDB document to Profile domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            Profile domain model
        """
        if not document or ProfileFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return Profile(
            id=str(document[ProfileFields.MONGO_ID]),
            user_id=document.get(ProfileFields.USER_ID, ""),
            handle=document.get(ProfileFields.HANDLE, ""),
            status=document.get(ProfileFields.STATUS, ""),
            skills=list(document.get(ProfileFields.SKILLS) or []),
            company=document.get(ProfileFields.COMPANY),
            website=document.get(ProfileFields.WEBSITE),
            location=document.get(ProfileFields.LOCATION),
            bio=document.get(ProfileFields.BIO),
            githubusername=document.get(ProfileFields.GITHUB_USERNAME),
            social=SocialLinks(**(document.get(ProfileFields.SOCIAL) or {})),
            experience=[
                self._document_to_experience(entry)
                for entry in document.get(ProfileFields.EXPERIENCE) or []
            ],
            education=[
                self._document_to_education(entry)
                for entry in document.get(ProfileFields.EDUCATION) or []
            ],
            created_at=ensure_utc(document.get(ProfileFields.CREATED_AT)),
        )
    
    def _document_to_experience(self, entry: Dict[str, Any]) -> Experience:
        return Experience(
            id=entry[EntryFields.ID],
            title=entry.get(EntryFields.TITLE, ""),
            company=entry.get(EntryFields.COMPANY, ""),
            location=entry.get(EntryFields.LOCATION),
            from_date=datetime_to_date(entry.get(EntryFields.FROM_DATE)),
            to_date=datetime_to_date(entry.get(EntryFields.TO_DATE)),
            current=bool(entry.get(EntryFields.CURRENT, False)),
            description=entry.get(EntryFields.DESCRIPTION),
        )
    
    def _document_to_education(self, entry: Dict[str, Any]) -> Education:
        return Education(
            id=entry[EntryFields.ID],
            school=entry.get(EntryFields.SCHOOL, ""),
            degree=entry.get(EntryFields.DEGREE, ""),
            fieldofstudy=entry.get(EntryFields.FIELD_OF_STUDY, ""),
            from_date=datetime_to_date(entry.get(EntryFields.FROM_DATE)),
            to_date=datetime_to_date(entry.get(EntryFields.TO_DATE)),
            current=bool(entry.get(EntryFields.CURRENT, False)),
            description=entry.get(EntryFields.DESCRIPTION),
        )
    
    def _profile_to_dict(self, profile: Profile) -> Dict[str, Any]:
        """Convert Profile domain model to MongoDB document (without _id)"""
        social = profile.social
        return {
            ProfileFields.USER_ID: profile.user_id,
            ProfileFields.HANDLE: profile.handle,
            ProfileFields.STATUS: profile.status,
            ProfileFields.SKILLS: list(profile.skills),
            ProfileFields.COMPANY: profile.company,
            ProfileFields.WEBSITE: profile.website,
            ProfileFields.LOCATION: profile.location,
            ProfileFields.BIO: profile.bio,
            ProfileFields.GITHUB_USERNAME: profile.githubusername,
            ProfileFields.SOCIAL: {
                "youtube": social.youtube,
                "twitter": social.twitter,
                "facebook": social.facebook,
                "linkedin": social.linkedin,
                "instagram": social.instagram,
            },
            ProfileFields.EXPERIENCE: [
                {
                    EntryFields.ID: entry.id,
                    EntryFields.TITLE: entry.title,
                    EntryFields.COMPANY: entry.company,
                    EntryFields.LOCATION: entry.location,
                    EntryFields.FROM_DATE: date_to_datetime(entry.from_date),
                    EntryFields.TO_DATE: date_to_datetime(entry.to_date),
                    EntryFields.CURRENT: entry.current,
                    EntryFields.DESCRIPTION: entry.description,
                }
                for entry in profile.experience
            ],
            ProfileFields.EDUCATION: [
                {
                    EntryFields.ID: entry.id,
                    EntryFields.SCHOOL: entry.school,
                    EntryFields.DEGREE: entry.degree,
                    EntryFields.FIELD_OF_STUDY: entry.fieldofstudy,
                    EntryFields.FROM_DATE: date_to_datetime(entry.from_date),
                    EntryFields.TO_DATE: date_to_datetime(entry.to_date),
                    EntryFields.CURRENT: entry.current,
                    EntryFields.DESCRIPTION: entry.description,
                }
                for entry in profile.education
            ],
            ProfileFields.CREATED_AT: profile.created_at,
        }
