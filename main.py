"""
Ride Dispatch Backend
=====================
Entry point. Run with: uvicorn main:app --reload
"""

import uvicorn

from ridedispatch.api.app import create_app
from ridedispatch.config import settings

app = create_app()

if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=True)
