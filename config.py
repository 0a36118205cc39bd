import os
from dotenv import load_dotenv

# Load .env from project root (same folder as main.py)
load_dotenv()

ENV = os.getenv("ENV", "development")
DEBUG = os.getenv("DEBUG", "False").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()

# Knowledge base
ADDITIVES_PATH = os.getenv("ADDITIVES_PATH", "")  # optional JSON table, bundled table when empty
KB_DUPLICATE_POLICY = os.getenv("KB_DUPLICATE_POLICY", "severest")  # "severest" or "error"

# Analysis
DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "tr")
MAX_INGREDIENTS = int(os.getenv("MAX_INGREDIENTS", "50"))
MAX_INGREDIENT_LENGTH = int(os.getenv("MAX_INGREDIENT_LENGTH", "100"))

# OCR
GOOGLE_VISION_API_KEY = os.getenv("GOOGLE_VISION_API_KEY", "")
VISION_ENDPOINT = os.getenv("VISION_ENDPOINT", "https://vision.googleapis.com/v1/images:annotate")
OCR_TIMEOUT = float(os.getenv("OCR_TIMEOUT", "25"))

# Feature flags
ENABLE_IMAGE_ANALYSIS = os.getenv("ENABLE_IMAGE_ANALYSIS", "True").lower() == "true"
