from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.backend.dependencies.auth import get_current_user
from app.backend.models.user import UserAccount
from app.backend.schemas.tweet import TweetCreateRequest, TweetRead
from app.backend.services.tweet_service import create_tweet
from app.db.session import get_session

tweet_router = APIRouter(prefix="/api/v1/tweets", tags=["tweets"])


@tweet_router.post("", response_model=TweetRead, status_code=status.HTTP_201_CREATED)
def post_tweet(
    body: TweetCreateRequest,
    db: Session = Depends(get_session),
    current_user: UserAccount = Depends(get_current_user),
):
    return create_tweet(db, current_user.user_id, body.content)
