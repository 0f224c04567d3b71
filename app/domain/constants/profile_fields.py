"""Constants for Profile model field names"""


class ProfileFields:
    """Field name constants for Profile documents"""
    USER_ID = "user_id"
    HANDLE = "handle"
    STATUS = "status"
    SKILLS = "skills"
    COMPANY = "company"
    WEBSITE = "website"
    LOCATION = "location"
    BIO = "bio"
    GITHUB_USERNAME = "githubusername"
    SOCIAL = "social"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    CREATED_AT = "created_at"
    
    # MongoDB specific
    MONGO_ID = "_id"


class EntryFields:
    """Field name constants for experience/education sub-documents"""
    ID = "id"
    TITLE = "title"
    COMPANY = "company"
    LOCATION = "location"
    SCHOOL = "school"
    DEGREE = "degree"
    FIELD_OF_STUDY = "fieldofstudy"
    FROM_DATE = "from"
    TO_DATE = "to"
    CURRENT = "current"
    DESCRIPTION = "description"
