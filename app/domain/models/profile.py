# Standard library imports
from dataclasses import dataclass, field, fields, replace
from datetime import date, datetime
from typing import Any, Dict, List, Optional, TypeVar

# Local application imports
from ..exceptions import EducationNotFoundError, ExperienceNotFoundError


@dataclass
class SocialLinks:
    """Named social network URLs of a profile"""
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None

    def merge(self, links: Dict[str, str]) -> "SocialLinks":
        """Return a copy with the supplied links overriding the current ones"""
        known = {link.name for link in fields(self)}
        return replace(self, **{k: v for k, v in links.items() if k in known and v})


@dataclass
class Experience:
    """Work experience entry, owned by a Profile"""
    id: str
    title: str
    company: str
    from_date: date
    location: Optional[str] = None
    to_date: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("Title is required")
        if not self.company or not self.company.strip():
            raise ValueError("Company is required")


@dataclass
class Education:
    """Education entry, owned by a Profile"""
    id: str
    school: str
    degree: str
    fieldofstudy: str
    from_date: date
    to_date: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.school or not self.school.strip():
            raise ValueError("School is required")
        if not self.degree or not self.degree.strip():
            raise ValueError("Degree is required")
        if not self.fieldofstudy or not self.fieldofstudy.strip():
            raise ValueError("Field of study is required")


Entry = TypeVar("Entry", Experience, Education)


def _index_of(entries: List[Entry], entry_id: str) -> int:
    for index, entry in enumerate(entries):
        if entry.id == entry_id:
            return index
    return -1


@dataclass
class Profile:
    """
    Pure domain model for a developer Profile.
    
    One profile per user. Experience and education are kept most-recent-first:
    new entries go to the head of the list.
    """
    id: Optional[str]
    user_id: str
    handle: str
    status: str
    skills: List[str] = field(default_factory=list)
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    social: SocialLinks = field(default_factory=SocialLinks)
    experience: List[Experience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    created_at: Optional[datetime] = None

    # Scalar fields a profile submission may overwrite
    PATCHABLE_FIELDS = (
        "handle",
        "status",
        "skills",
        "company",
        "website",
        "location",
        "bio",
        "githubusername",
    )

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.user_id:
            raise ValueError("User ID is required")
        if not self.handle or not self.handle.strip():
            raise ValueError("Handle is required")
        if not self.status or not self.status.strip():
            raise ValueError("Status is required")

    def apply_patch(self, changes: Dict[str, Any]) -> None:
        """
        Apply a sparse patch: only keys present in ``changes`` are written.
        
        ``social`` is merged link by link so links omitted from the patch
        survive.
        """
        for name in self.PATCHABLE_FIELDS:
            if name in changes:
                setattr(self, name, changes[name])
        if changes.get("social"):
            self.social = self.social.merge(changes["social"])
        # Re-run invariants on the patched values
        self.__post_init__()

    def add_experience(self, entry: Experience) -> None:
        self.experience.insert(0, entry)

    def remove_experience(self, entry_id: str) -> Experience:
        index = _index_of(self.experience, entry_id)
        if index < 0:
            raise ExperienceNotFoundError(entry_id)
        return self.experience.pop(index)

    def add_education(self, entry: Education) -> None:
        self.education.insert(0, entry)

    def remove_education(self, entry_id: str) -> Education:
        index = _index_of(self.education, entry_id)
        if index < 0:
            raise EducationNotFoundError(entry_id)
        return self.education.pop(index)
