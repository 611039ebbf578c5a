from sqlmodel import SQLModel, Field
from uuid import UUID, uuid4
from datetime import datetime

from app.backend.models.user import timestamp_column, utcnow


class Tweet(SQLModel, table=True):
    tweet_id: UUID = Field(default_factory=uuid4, primary_key=True)
    owner_id: UUID = Field(index=True, foreign_key="useraccount.user_id")
    content: str
    created_at: datetime = Field(default_factory=utcnow, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utcnow, sa_column=timestamp_column())
