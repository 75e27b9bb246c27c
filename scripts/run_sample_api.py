#!/usr/bin/env python3
"""
Serve the sample API for the example scenarios.

Usage:
  python scripts/run_sample_api.py
"""
import os

import uvicorn
from dotenv import load_dotenv

load_dotenv()

if __name__ == "__main__":
    uvicorn.run(
        "sample_api.main:app",
        host=os.environ.get("SAMPLE_API_HOST", "0.0.0.0"),
        port=int(os.environ.get("SAMPLE_API_PORT", "3323")),
    )
