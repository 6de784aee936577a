"""
Development server launcher.

Loads .env file and runs one of the services with uvicorn in reload mode.

Usage:
    python scripts/run_dev.py auth        # http://localhost:8081
    python scripts/run_dev.py hydration   # http://localhost:8082
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

import uvicorn

from app.core.config import settings

SERVICES = {
    "auth": ("app.main:auth_app", settings.AUTH_PORT),
    "hydration": ("app.main:hydration_app", settings.HYDRATION_PORT),
}

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run a Hydration Tracking service.")
    parser.add_argument("service", choices=sorted(SERVICES))
    args = parser.parse_args()

    app_path, port = SERVICES[args.service]

    print("=" * 60)
    print(f"Hydration Tracking Development Server ({args.service})")
    print("=" * 60)
    print()
    print(f"API: http://localhost:{port}/api/v1")
    print(f"Docs: http://localhost:{port}/docs")
    print()
    print("Press Ctrl+C to stop")
    print("=" * 60)

    uvicorn.run(app_path, host="0.0.0.0", port=port, reload=True, log_level=settings.LOG_LEVEL.lower())
