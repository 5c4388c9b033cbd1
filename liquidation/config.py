import os
from dotenv import load_dotenv

load_dotenv()

# Runtime environment (dev, staging, prod)
ENVIRONMENT = os.getenv("ENVIRONMENT", "dev")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
PORT = int(os.getenv("PORT", "8080"))

# Decree skeleton: local path or http(s) URL, fetched on every render
DECREE_TEMPLATE = os.getenv("DECREE_TEMPLATE", "templates/decreto_liquidazione.txt")
TEMPLATE_TIMEOUT = float(os.getenv("TEMPLATE_TIMEOUT", "10"))

# Multi-party surcharge policy: banded | flat_10 | flat_30
SURCHARGE_POLICY = os.getenv("SURCHARGE_POLICY", "banded")
