#!/usr/bin/env python3
"""
Run the Name Clusters API (POST /group, POST /cluster, GET /health).

Environment (or .env):
- PORT: listen port (default 8000); RELOAD=1 enables auto-reload.
- CLUSTER_K_SHARED / CLUSTER_K_NOT_SHARED: default exponents when a request omits them (2.0 / 0.4).
- CLUSTER_IGNORE: comma-separated words ignored when a request sends no ignore list.
"""
import os

from dotenv import load_dotenv
import uvicorn

load_dotenv()

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8000))
    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=port,
        reload=os.environ.get("RELOAD", "0") == "1",
    )
