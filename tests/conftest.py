import pytest
from authlib.jose import jwt
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from folio.app import create_app
from folio.config import JWT_SECRET
from folio.database import Base, get_session
from folio.models import Author, User

TEST_DB_URL = "sqlite+aiosqlite://"  # in-memory

engine = create_async_engine(TEST_DB_URL, echo=False)
TestSession = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

USER_EMAIL = "reader@example.com"


def _sign(claims: dict) -> str:
    return jwt.encode({"alg": "HS256"}, claims, JWT_SECRET).decode()


@pytest.fixture(autouse=True)
async def setup_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def session():
    async with TestSession() as s:
        yield s


@pytest.fixture
async def seeded(session):
    """Authors 1-3 and one user whose email matches the default test token."""
    session.add_all([
        Author(id=1, name="Frank Herbert"),
        Author(id=2, name="Ursula K. Le Guin"),
        Author(id=3, name="Brian Herbert"),
        User(id="user-1", email=USER_EMAIL),
    ])
    await session.commit()


@pytest.fixture
def claims():
    return {"sub": "user-1", "email": USER_EMAIL}


@pytest.fixture
def make_token():
    return _sign


@pytest.fixture
async def client(claims):
    app = create_app()

    async def override_session():
        async with TestSession() as s:
            yield s

    app.dependency_overrides[get_session] = override_session
    transport = ASGITransport(app=app)
    headers = {"Authorization": f"Bearer {_sign(claims)}"}
    async with AsyncClient(transport=transport, base_url="http://test", headers=headers) as c:
        yield c
