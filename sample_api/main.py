"""Sample API used to exercise scenario chains: token login plus a few protected endpoints."""
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, List, Optional, Set
from uuid import uuid4

from fastapi import Depends, FastAPI, Header, HTTPException, Query, status
from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials are accepted as-is; any username gets a token."""
    username: str = Field(default="", description="User name")
    password: str = Field(default="", description="Password")


class LoginResponse(BaseModel):
    success: bool = Field(description="Login result")
    token: str = Field(description="Bearer token for /api endpoints")


class DataItem(BaseModel):
    id: int
    name: str
    value: int


class DataResponse(BaseModel):
    success: bool = True
    data: List[DataItem]


class SearchResponse(BaseModel):
    query: str
    limit: int
    category: str
    results: List[Dict[str, Any]]


class TokenStore:
    def __init__(self) -> None:
        self._tokens: Set[str] = set()
        self._lock = Lock()

    def issue(self) -> str:
        token = uuid4().hex
        with self._lock:
            self._tokens.add(token)
        return token

    def __contains__(self, token: str) -> bool:
        with self._lock:
            return token in self._tokens

    def clear(self) -> None:
        with self._lock:
            self._tokens.clear()


app = FastAPI(
    title="scenario-flow sample API",
    description="Login and protected endpoints for scenario-flow examples",
    version="1.0.0",
)

TOKEN_STORE = TokenStore()

SAMPLE_ITEMS = [
    DataItem(id=1, name="Item 1", value=100),
    DataItem(id=2, name="Item 2", value=200),
    DataItem(id=3, name="Item 3", value=300),
]

CATALOG = [
    {"id": 1, "title": "Learning Python", "category": "books"},
    {"id": 2, "title": "Test Driven Development", "category": "books"},
    {"id": 3, "title": "javascript in depth", "category": "programming"},
    {"id": 4, "title": "javascript patterns", "category": "programming"},
    {"id": 5, "title": "javascript testing", "category": "programming"},
    {"id": 6, "title": "test fixtures cookbook", "category": "books"},
]


def require_token(authorization: Optional[str] = Header(default=None)) -> str:
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication token is missing or invalid",
        )
    token = authorization.split(" ", 1)[1]
    if token not in TOKEN_STORE:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
    return token


@app.get("/")
def read_root():
    """ヘルスチェック"""
    return {"status": "ok", "service": "sample-api"}


@app.post("/login", response_model=LoginResponse)
def login(request: LoginRequest) -> LoginResponse:
    return LoginResponse(success=True, token=TOKEN_STORE.issue())


@app.get("/api/user")
def get_user(_token: str = Depends(require_token)):
    return {
        "success": True,
        "data": {"id": 1, "username": "demouser", "email": "demo@example.com"},
    }


@app.get("/api/data", response_model=DataResponse)
def get_data(_token: str = Depends(require_token)) -> DataResponse:
    return DataResponse(data=SAMPLE_ITEMS)


@app.get("/api/status")
def get_status(_token: str = Depends(require_token)):
    return {
        "success": True,
        "status": "online",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/api/search", response_model=SearchResponse)
def search(
    q: str = Query(default=""),
    limit: int = Query(default=10, ge=0),
    category: str = Query(default="all"),
    _token: str = Depends(require_token),
) -> SearchResponse:
    hits = [
        item
        for item in CATALOG
        if (category == "all" or item["category"] == category)
        and q.lower() in item["title"].lower()
    ]
    return SearchResponse(query=q, limit=limit, category=category, results=hits[:limit])
