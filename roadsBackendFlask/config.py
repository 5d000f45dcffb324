"""
Configuration management for the Roads backend
"""
import os
import json
from typing import Dict, Any
from pathlib import Path

# Look for config.json in the same directory as this file
CONFIG_FILE = Path(__file__).with_name("config.json")

class Config:
    def __init__(self):
        self._config: Dict[str, Any] = {}
        self._load_config()
    
    def _load_config(self):
        """Load configuration from config.json if it exists"""
        if CONFIG_FILE.exists():
            with CONFIG_FILE.open("r", encoding="utf-8") as f:
                self._config = json.load(f)
    
    def get(self, key: str, default: str = "") -> str:
        """Get configuration value from environment or config file"""
        return str(os.getenv(key, self._config.get(key, default)))

# Global config instance
config = Config()

# Configuration constants
GOOGLE_MAPS_API_KEY  = config.get("GOOGLE_MAPS_API_KEY", "").strip()
ROADS_BASE_URL       = config.get("ROADS_BASE_URL", "https://roads.googleapis.com").strip().rstrip("/")

HTTP_TIMEOUT           = float(config.get("HTTP_TIMEOUT", "20.0"))
HTTP_MAX_RETRIES       = int(config.get("HTTP_MAX_RETRIES", "2"))
RETRY_BASE_DELAY       = float(config.get("RETRY_BASE_DELAY", "0.5"))
RETRY_OVER_QUERY_LIMIT = config.get("RETRY_OVER_QUERY_LIMIT", "true").lower() == "true"

FIREBASE_PROJECT_ID  = config.get("FIREBASE_PROJECT_ID", "").strip()
SERVICE_ACCOUNT_FILE = config.get("GOOGLE_APPLICATION_CREDENTIALS", "").strip()

REQUIRE_AUTH         = config.get("REQUIRE_AUTH", "false").lower() == "true"
CORS_ORIGINS         = [o.strip() for o in config.get("CORS_ORIGINS", "*").split(",")]

LOG_LEVEL            = config.get("LOG_LEVEL", "INFO").upper()

# Validate critical config
if HTTP_MAX_RETRIES < 0:
    raise RuntimeError(f"HTTP_MAX_RETRIES must be >= 0, got {HTTP_MAX_RETRIES}")
if HTTP_TIMEOUT <= 0:
    raise RuntimeError(f"HTTP_TIMEOUT must be positive, got {HTTP_TIMEOUT}")
