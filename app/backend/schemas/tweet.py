from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class TweetCreateRequest(BaseModel):
    content: Optional[str] = None


class TweetRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    tweet_id: UUID
    owner_id: UUID
    content: str
    created_at: datetime
    updated_at: datetime
