import argparse
import os
import sys
from pathlib import Path

import uvicorn

# Add project root to sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from src.core.config import settings


def start_server():
    parser = argparse.ArgumentParser(description="Run the BlueBloom API")
    parser.add_argument("--host", default=os.environ.get("BLUEBLOOM_HOST", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=int(os.environ.get("BLUEBLOOM_PORT", "8000")))
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    args = parser.parse_args()

    print("--- BLUEBLOOM API ---")
    print(f"[INFO] Data directory:   {settings.data_dir}")
    print(f"[INFO] Catalog directory: {settings.config_dir}")
    print(f"[INFO] Live CitObs data:  {'enabled' if settings.citobs_enabled else 'disabled'}")
    print(f"[INFO] API docs at http://{args.host}:{args.port}/docs")
    print("---------------------\n")

    uvicorn.run(
        "src.web.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    start_server()
