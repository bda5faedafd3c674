"""Constants for Model Arena."""

# Default configuration values
DEFAULT_GATEWAY_URL = "https://ai-gateway.vercel.sh/v1"
DEFAULT_LEADERBOARD_URL = "https://artificialanalysis-llm-performance-leaderboard.hf.space/api/v1/models"
DEFAULT_MODEL = "groq/llama-3.1-70b-versatile"
DEFAULT_SERVER_HOST = "0.0.0.0"
DEFAULT_SERVER_PORT = 3000
REQUEST_TIMEOUT = 60

# Cache TTLs in seconds
BENCHMARK_TTL = 24 * 60 * 60
LISTING_CACHE_TTL = 5 * 60
MODELS_CACHE_TTL = 5 * 60
LEADERBOARD_TTL = 60 * 60

# Catalog and benchmark modes
CATALOG_SOURCE_STATIC = "static"
CATALOG_SOURCE_GATEWAY = "gateway"
BENCHMARK_MODE_SIMULATED = "simulated"
BENCHMARK_MODE_GATEWAY = "gateway"

# Logging configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# HTTP status codes
HTTP_SUCCESS = 200
HTTP_BAD_REQUEST = 400
HTTP_ERROR = 500

# Benchmark simulation
BENCHMARK_TOKEN_COUNT = 100
TPS_JITTER = (0.85, 1.15)
TTFT_JITTER = (0.9, 1.1)
BENCHMARK_PROMPT = "Explain the principles of quantum computing to a high school student."
BENCHMARK_MAX_TOKENS = 100

# Listing sources
SOURCE_CACHE = "cache"
SOURCE_BENCHMARK = "benchmark"

# Chat
CHAT_SYSTEM_PROMPT = "You are a software engineer exploring Generative AI."
STREAMING_MEDIA_TYPE = "text/event-stream"
CACHE_CONTROL_NO_CACHE = "no-cache"
SSE_DATA_PREFIX = "data:"
SSE_DONE = "[DONE]"

# Request/Response field names
DATA_FIELD = "data"
SOURCE_FIELD = "source"
MODELS_FIELD = "models"
MODEL_ID_FIELD = "modelId"

# Message roles
USER_ROLE = "user"
SYSTEM_ROLE = "system"

# Health check constants
HEALTH_STATUS_HEALTHY = "healthy"
HEALTH_STATUS_UNHEALTHY = "unhealthy"
HEALTH_STATUS_OK = "Ok"
HEALTH_STATUS_ERROR = "error"

# Leaderboard
UNKNOWN_PROVIDER = "unknown"
KNOWN_PROVIDERS = ["openai", "anthropic", "google", "meta", "mistral", "groq", "xai"]

# HTTP headers
CONTENT_TYPE_JSON = "application/json"
ACCEPT_HEADER = "Accept"
AUTHORIZATION_HEADER = "Authorization"

# Available models client
MODELS_CLIENT_MAX_ATTEMPTS = 3
MODELS_CLIENT_RETRY_DELAY_SEC = 5

# FastAPI app constants
APP_TITLE = "Model Arena"
APP_DESCRIPTION = "Chat with gateway models and compare their throughput benchmarks"
APP_VERSION = "0.1.0"
