#!/usr/bin/env python3
"""Modular configuration system for Civic Impact Tickets

Configuration hierarchy:
- app_config: Top-level settings (environment, session storage)
- vendor_config: Vendor API credentials and HTTP timeout
- logging_config: Logging configuration
"""
import os
from pathlib import Path
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .vendor_config import VendorConfig, VENDOR_API_KEY_ENV
from .app_config import TicketsConfig

# deployment/environments/ at the project root
ENV_DIR = Path(__file__).resolve().parents[2] / "deployment" / "environments"
env_files = {
    "development": "dev.env",
    "dev": "dev.env",
    "testing": "test.env",
    "test": "test.env",
    "staging": "staging.env",
    "production": "production.env",
}

def env_file_for(env: str) -> Path:
    """Environment file for ENV, falling back to dev.env"""
    return ENV_DIR / env_files.get(env, "dev.env")

# Load environment file based on ENV
env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
env_file = env_file_for(env)
load_dotenv(env_file, override=False)

# Create global settings instance
settings = TicketsConfig.from_env()

def get_settings() -> TicketsConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> TicketsConfig:
    """Reload settings from environment"""
    global settings
    settings = TicketsConfig.from_env()
    return settings

__all__ = [
    # Main config
    'TicketsConfig',
    'get_settings',
    'reload_settings',
    'settings',
    # Sub-configs
    'LoggingConfig',
    'VendorConfig',
    'VENDOR_API_KEY_ENV',
    # Environment files
    'ENV_DIR',
    'env_file_for',
]
