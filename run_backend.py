#!/usr/bin/env python
"""Script to run the todo API server."""
import sys
from pathlib import Path

# Add the repo root to the Python path
sys.path.insert(0, str(Path(__file__).resolve().parent))

import uvicorn

from todo_api import config

if __name__ == "__main__":
    uvicorn.run(
        "todo_api.main:create_app",
        factory=True,
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )
