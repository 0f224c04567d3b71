from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProfileUpsertRequest(BaseModel):
    """
    DTO for profile create-or-update request.
    
    ``skills`` is a comma-separated list; the five social fields are flat
    on the request and nested under ``social`` on the profile.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    handle: str = Field(min_length=1, max_length=40)
    status: str = Field(min_length=1)
    skills: str = Field(min_length=1)
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class ExperienceCreateRequest(BaseModel):
    """DTO for adding an experience entry"""
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    title: str = Field(min_length=1)
    company: str = Field(min_length=1)
    location: Optional[str] = None
    from_date: date = Field(alias="from")
    to_date: Optional[date] = Field(default=None, alias="to")
    current: bool = False
    description: Optional[str] = None


class EducationCreateRequest(BaseModel):
    """DTO for adding an education entry"""
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    school: str = Field(min_length=1)
    degree: str = Field(min_length=1)
    fieldofstudy: str = Field(min_length=1)
    from_date: date = Field(alias="from")
    to_date: Optional[date] = Field(default=None, alias="to")
    current: bool = False
    description: Optional[str] = None


class SocialLinksResponse(BaseModel):
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class ExperienceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    company: str
    location: Optional[str] = None
    from_date: Optional[date] = Field(default=None, alias="from")
    to_date: Optional[date] = Field(default=None, alias="to")
    current: bool = False
    description: Optional[str] = None


class EducationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    school: str
    degree: str
    fieldofstudy: str
    from_date: Optional[date] = Field(default=None, alias="from")
    to_date: Optional[date] = Field(default=None, alias="to")
    current: bool = False
    description: Optional[str] = None


class ProfileOwnerResponse(BaseModel):
    """Owner summary embedded in profile responses"""
    id: str
    name: Optional[str] = None
    avatar: Optional[str] = None


class ProfileResponse(BaseModel):
    """DTO for profile response"""
    id: str
    user: ProfileOwnerResponse
    handle: str
    status: str
    skills: List[str] = Field(default_factory=list)
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    social: SocialLinksResponse = Field(default_factory=SocialLinksResponse)
    experience: List[ExperienceResponse] = Field(default_factory=list)
    education: List[EducationResponse] = Field(default_factory=list)
    created_at: Optional[datetime] = None
