#!/usr/bin/env python3
"""
TemplateReview - Service Server
HTTP API on localhost:9998

Architecture:
- This is a THIN HTTP layer
- ALL operations go through core/operations.py

Endpoints:
- /api/health
- /api/operations
- /api/analyze, /api/validate, /api/enhance
- /api/review/{operation}
"""

import os
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from .. import __version__
from .routers import review_router

# ============================================================
# CONFIG
# ============================================================

HOST = os.environ.get("TEMPLATEREVIEW_HOST", "127.0.0.1")
PORT = int(os.environ.get("TEMPLATEREVIEW_PORT", "9998"))
LOG_LEVEL = os.environ.get("TEMPLATEREVIEW_LOG_LEVEL", "INFO").upper()

VERSION = __version__

logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO), format='%(asctime)s [%(levelname)s] %(message)s')
logger = logging.getLogger("templatereview")


app = FastAPI(title="TemplateReview Service", version=VERSION)
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
app.include_router(review_router)


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": VERSION}


def run(host: Optional[str] = None, port: Optional[int] = None):
    host = host or HOST
    port = port or PORT
    logger.info(f"Starting TemplateReview v{VERSION} on {host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
