import os

# Module-level engine in app.database is built at import time
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test_mechanic_manager.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
