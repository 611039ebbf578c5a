# app/main.py  (엔트리포인트)
from dotenv import load_dotenv

# 루트 .env 로딩 (backend가 dotenv를 직접 안 쓰는 구조라서 여기서 한 번에 로딩)
load_dotenv()

from app.backend.main import app as app  # noqa: E402,F401
