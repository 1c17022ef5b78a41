import os
import threading

from dotenv import load_dotenv

# Load .env when available (local development)
load_dotenv()


class BackendSettings:
    _instance = None
    _lock = threading.Lock()

    def __init__(self):
        self.DEBUG_MODE = os.environ.get("DEBUG_MODE", "development")

        # Hosted storage backend
        self.SUPABASE_URL = os.environ.get("SUPABASE_URL", None)
        self.SUPABASE_KEY = os.environ.get("SUPABASE_KEY", None)

        self.HOST = os.environ.get("HOST", "0.0.0.0")
        self.PORT = int(os.environ.get("PORT", 3000))

        # Comma separated list, "*" allows every origin
        self.CORS_ORIGINS = [
            origin.strip()
            for origin in os.environ.get("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        # Maximum size of multipart bodies (attachments) in bytes
        self.MAX_UPLOAD_SIZE = int(os.environ.get("MAX_UPLOAD_SIZE", 10 * 1024 * 1024))

    @property
    def storage_configured(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_KEY)

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super(BackendSettings, cls).__new__(cls)
        return cls._instance

settings = BackendSettings()
