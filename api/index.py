"""Vercel serverless entry point for modelprices."""
import sys
import os

# Add src to path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from modelprices.config import AppConfig
from modelprices.web.app import create_app

# The catalog is fetched lazily on the first page view
app = create_app(config=AppConfig.from_env())
