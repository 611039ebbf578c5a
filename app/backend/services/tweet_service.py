from typing import Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.backend.core.errors import InternalError, ValidationError
from app.backend.models.tweet import Tweet


def create_tweet(db: Session, owner_id: UUID, content: Optional[str]) -> Tweet:
    """인증된 사용자 명의로 트윗 1건 생성."""
    if not content or not content.strip():
        raise ValidationError("Content is required")

    tweet = Tweet(owner_id=owner_id, content=content.strip())
    db.add(tweet)
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise InternalError("Something went wrong while creating the tweet") from exc
    db.refresh(tweet)
    return tweet
