# AceKey Selection Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package logger shared by every AceKey module."""
import logging

logger: logging.Logger = logging.getLogger("acekey")
