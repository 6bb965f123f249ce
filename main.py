# main.py
"""
Entry point for running the Architecture Advisor API locally.
Serves the FastAPI app defined in api/main.py with uvicorn.
"""

import uvicorn

from architecture_core import config

# Import the app so `uvicorn main:app` works as well
from api.main import app

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
