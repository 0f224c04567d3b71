"""Constants for Post model field names"""


class PostFields:
    """Field name constants for Post documents"""
    USER_ID = "user_id"
    TEXT = "text"
    NAME = "name"
    AVATAR = "avatar"
    LIKES = "likes"
    COMMENTS = "comments"
    CREATED_AT = "created_at"
    
    # Embedded comment
    COMMENT_ID = "id"
    
    # MongoDB specific
    MONGO_ID = "_id"
