"""
Development Server Entry Point
==============================

Usage:
    python run.py              # Development mode with reload
    python run.py --no-reload  # Development mode without reload
"""

import argparse


def main():
    """Run the development server."""
    import uvicorn

    parser = argparse.ArgumentParser(description="Run the Compliance Tracker role registry server")
    parser.add_argument(
        "--no-reload",
        action="store_true",
        help="Disable auto-reload",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Bind host")
    parser.add_argument("--port", type=int, default=8000, help="Bind port")
    args = parser.parse_args()

    uvicorn.run(
        "app.main:app",
        host=args.host,
        port=args.port,
        reload=not args.no_reload,
    )


if __name__ == "__main__":
    main()
