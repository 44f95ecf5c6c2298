"""CLI entry point for the form-intake FastAPI server.

This module provides the uvicorn-compatible app instance for deployment.
"""
from form_intake.api import create_app

# Create the FastAPI app instance
app = create_app()
