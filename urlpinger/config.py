import os
from dotenv import load_dotenv

load_dotenv()

__version__ = "0.1.0"


# Kept as raw strings; Pinger validates them through PingConfig.
class Settings:
    REQUEST_TIMEOUT_SECONDS: str = os.getenv("URLPINGER_TIMEOUT_SECONDS", "10")
    MAX_CONCURRENCY: str = os.getenv("URLPINGER_MAX_CONCURRENCY", "64")
    DEFAULT_MODE: str = os.getenv("URLPINGER_DEFAULT_MODE", "async")


settings = Settings()
