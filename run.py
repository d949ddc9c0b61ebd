#!/usr/bin/env python3
"""
Run script for the Voicescribe API
"""
import uvicorn

from voicescribe.config.settings import settings
from voicescribe.main import app

if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, reload=settings.debug)
