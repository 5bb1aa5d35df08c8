"""
Configuration module for the repository clone service.

Values are read from the process environment (optionally seeded from a .env
file) once at import time.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Name of the per-application folder under the user's documents directory
APP_NAME = os.getenv("APP_NAME", "GitHub")

# Overrides the user documents directory used for the fallback clone path
CLONE_DOCUMENTS_DIR = os.getenv("CLONE_DOCUMENTS_DIR")

# Git provider preference
LOCAL_CLONE_PATH = os.getenv("LOCAL_CLONE_PATH", "")
GIT_CLONE_PATH_CONFIG_KEY = os.getenv("GIT_CLONE_PATH_CONFIG_KEY", "clone.defaultPath")

# Clone primitive
GIT_EXECUTABLE = os.getenv("GIT_EXECUTABLE", "git")

