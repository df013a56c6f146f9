import os
from pathlib import Path

DB_PATH = os.environ.get("FOLIO_DB_PATH", str(Path.cwd() / "folio.db"))
DATABASE_URL = f"sqlite+aiosqlite:///{DB_PATH}"

# Bearer token verification
JWT_SECRET = os.environ.get("FOLIO_JWT_SECRET", "folio-development-secret-change-me")
JWT_ALGORITHM = os.environ.get("FOLIO_JWT_ALGORITHM", "HS256")

# Claim used to look up the caller's user record
IDENTITY_CLAIM = os.environ.get("FOLIO_IDENTITY_CLAIM", "email")

LOG_LEVEL = os.environ.get("FOLIO_LOG_LEVEL", "INFO")
