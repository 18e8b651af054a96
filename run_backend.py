#!/usr/bin/env python
"""Script to run the Kanban backend server."""
import os
from pathlib import Path

import uvicorn

if __name__ == "__main__":
    # Run from the project root so the default sqlite path lands here
    os.chdir(Path(__file__).resolve().parent)
    uvicorn.run(
        "kanban.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=True
    )
