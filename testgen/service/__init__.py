"""HTTP service mode for testgen."""

from .app import GENERATE_PATH, create_app, run_service

__all__ = ["GENERATE_PATH", "create_app", "run_service"]
