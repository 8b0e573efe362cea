"""
Configuration settings for the PocketIC client.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Server binary
PIC_BIN_PATH = os.getenv('PIC_BIN_PATH', None)
PIC_TTL = int(os.getenv('PIC_TTL')) if os.getenv('PIC_TTL') else None

# Readiness polling
POLL_INTERVAL_MS = int(os.getenv('PIC_POLL_INTERVAL_MS', '20'))
POLL_TIMEOUT_MS = int(os.getenv('PIC_POLL_TIMEOUT_MS', '30000'))  # 30 seconds

# Output streams
SHOW_RUNTIME_LOGS = os.getenv('PIC_SHOW_RUNTIME_LOGS', 'False').lower() == 'true'
SHOW_CANISTER_LOGS = os.getenv('PIC_SHOW_CANISTER_LOGS', 'False').lower() == 'true'

# Client
PIC_URL = os.getenv('PIC_URL', None)
REQUEST_TIMEOUT_MS = int(os.getenv('PIC_REQUEST_TIMEOUT_MS', '30000'))
