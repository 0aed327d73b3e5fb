import os
import secrets
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()
BASE_URL = os.getenv("BASE_URL", "http://127.0.0.1:8000")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Contact call-to-action shown under the results
CONTACT_HANDLE = os.getenv("CONTACT_HANDLE", "@yourhandle")
CONTACT_URL = os.getenv("CONTACT_URL", "https://instagram.com/yourhandle")

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

SESSION_SECRET_KEY = os.getenv("SESSION_SECRET_KEY")
SESSION_SECRET_IS_TEMPORARY = not SESSION_SECRET_KEY
if SESSION_SECRET_IS_TEMPORARY:
    # Random key for development; sessions won't survive a restart
    SESSION_SECRET_KEY = secrets.token_urlsafe(32)
