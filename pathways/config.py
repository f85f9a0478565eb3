import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Worker threads used to fan out gate evaluation across the career catalog
MAX_WORKERS = int(os.getenv("PATHWAYS_MAX_WORKERS", "8"))

TOP_PROGRAMS = int(os.getenv("PATHWAYS_TOP_PROGRAMS", "5"))
TOP_BURSARIES = int(os.getenv("PATHWAYS_TOP_BURSARIES", "3"))

_timeout = os.getenv("PATHWAYS_GATE_TIMEOUT_SECONDS")
GATE_TIMEOUT_SECONDS = float(_timeout) if _timeout else None
