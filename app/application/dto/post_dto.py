from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PostCreateRequest(BaseModel):
    """DTO for post creation request"""
    model_config = ConfigDict(str_strip_whitespace=True)

    text: str = Field(min_length=1)


class CommentCreateRequest(BaseModel):
    """DTO for comment creation request"""
    model_config = ConfigDict(str_strip_whitespace=True)

    text: str = Field(min_length=1)


class LikeResponse(BaseModel):
    user: str


class CommentResponse(BaseModel):
    id: str
    user: str
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    created_at: Optional[datetime] = None


class PostResponse(BaseModel):
    """DTO for post response"""
    id: str
    user: str
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    likes: List[LikeResponse] = Field(default_factory=list)
    comments: List[CommentResponse] = Field(default_factory=list)
    created_at: Optional[datetime] = None


class MessageResponse(BaseModel):
    """Plain acknowledgement body"""
    msg: str
