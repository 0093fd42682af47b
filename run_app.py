#!/usr/bin/env python3
"""
Storefront Runner
=================

Script to run the storefront API in development or production mode.

Usage:
    python run_app.py                    # Development mode with auto-reload
    python run_app.py --mode prod        # Production mode, no reload
    python run_app.py --port 8001        # Custom port
    python run_app.py --host 127.0.0.1   # Custom host
"""

import argparse
import os
import sys


def print_banner():
    """Print application banner"""
    banner = """
╔═══════════════════════════════════════════════════════╗
║                  🛍️  Storefront API                   ║
╚═══════════════════════════════════════════════════════╝
    """
    print(banner)


def check_environment():
    """Report the configuration sources that will be used"""
    print("\n🔍 Checking environment...")

    if os.path.exists(".env"):
        print("✅ .env file found")
    else:
        print("⚠️  .env file not found, using defaults")

    from storefront.core.config import get_settings
    settings = get_settings()
    if settings.is_sqlite:
        db_path = settings.DATABASE_URL.replace("sqlite:///", "", 1)
        if os.path.exists(db_path):
            print("✅ Database file found")
        else:
            print("⚠️  Database file not found (will be created)")

    return True


def run_app(host="0.0.0.0", port=8000, reload=True):
    """Run the FastAPI application"""
    print(f"\n🚀 Starting Storefront API on {host}:{port}")
    print(f"📖 API Docs: http://{host}:{port}/api/docs")
    print("\n" + "=" * 50)

    import uvicorn
    try:
        uvicorn.run(
            "storefront.main:app",
            host=host,
            port=port,
            reload=reload,
            log_level="info"
        )
    except KeyboardInterrupt:
        print("\n👋 Server stopped by user")


def main():
    parser = argparse.ArgumentParser(
        description="Storefront Runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_app.py                      # Development server on port 8000
  python run_app.py --port 8001          # Custom port
  python run_app.py --mode prod          # Production mode
        """
    )

    parser.add_argument(
        "--mode",
        choices=["dev", "prod"],
        default="dev",
        help="Server mode (default: dev)"
    )
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host to bind to (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind to (default: 8000)"
    )
    parser.add_argument(
        "--no-reload",
        action="store_true",
        help="Disable auto-reload"
    )

    args = parser.parse_args()

    print_banner()

    if not check_environment():
        return 1

    reload = not args.no_reload and args.mode != "prod"
    run_app(args.host, args.port, reload)

    return 0


if __name__ == "__main__":
    sys.exit(main())
