import os
from dotenv import load_dotenv

load_dotenv()

# Per-lookup deadline; exceeding it is a LookupTimeout, never a "not found"
LOOKUP_TIMEOUT_SECONDS = float(os.getenv("LOOKUP_TIMEOUT_SECONDS", "5.0"))

# Registration timestamps are zoned here (and stored naive in this zone)
ORDER_TIMEZONE = os.getenv("ORDER_TIMEZONE", "America/Sao_Paulo")

# "memory" or "sql"
ORDER_STORE = os.getenv("ORDER_STORE", "memory")

# Empty means the in-process fixture directory is used instead of HTTP
DIRECTORY_URL = os.getenv("DIRECTORY_URL", "")

OTLP_ENDPOINT = os.getenv("OTLP_ENDPOINT", "")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
