"""Configuration management - loads environment variables."""

import os
from dotenv import load_dotenv

load_dotenv()

# Canvas API Configuration
CANVAS_TOKEN = os.getenv("CANVAS_TOKEN")
CANVAS_BASE_URL = os.getenv("CANVAS_BASE_URL", "https://canvas.instructure.com")
CANVAS_API_VERSION = int(os.getenv("CANVAS_API_VERSION", "1"))

# Account that newly created courses are attached to
CANVAS_ACCOUNT_ID = os.getenv("CANVAS_ACCOUNT_ID", "1")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
