import os
from dotenv import load_dotenv

load_dotenv()

MAX_CONTENT_LENGTH = int(os.getenv('MAX_CONTENT_LENGTH', '1048576'))  # 1 MB default
API_KEY = os.getenv("API_KEY", "")
RATE_LIMIT_STORAGE_URI = os.getenv("RATE_LIMIT_STORAGE_URI", "memory://")
SENTRY_DSN = os.getenv("SENTRY_DSN", "")
SENTRY_TRACES_SAMPLE_RATE = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.0"))
SENTRY_PROFILES_SAMPLE_RATE = float(os.getenv("SENTRY_PROFILES_SAMPLE_RATE", "0.0"))
APP_ENV = os.getenv("APP_ENV", "production")
APP_VERSION = os.getenv("APP_VERSION", "0.1.0")

# Corpus (empty = built-in default documents)
CORPUS_PATH = os.getenv("CORPUS_PATH", "")

# Ranking & Fallback
TOP_K = int(os.getenv("TOP_K", "3"))
CONFIDENCE_THRESHOLD = float(os.getenv("CONFIDENCE_THRESHOLD", "0.75"))
TRACE_SNIPPET_CHARS = int(os.getenv("TRACE_SNIPPET_CHARS", "50"))

# Request Limits
MAX_QUERY_LENGTH = int(os.getenv("MAX_QUERY_LENGTH", "5000"))
MAX_TOP_K = int(os.getenv("MAX_TOP_K", "20"))
BATCH_SIZE_LIMIT = int(os.getenv("BATCH_SIZE_LIMIT", "50"))

# Rate Limits (flask-limiter syntax)
RATE_LIMIT_DEFAULT = os.getenv("RATE_LIMIT_DEFAULT", "120 per minute")
REASON_RATE_LIMIT = os.getenv("REASON_RATE_LIMIT", "60/minute")
BATCH_RATE_LIMIT = os.getenv("BATCH_RATE_LIMIT", "10/minute")
