#!/usr/bin/env python3
"""
Explore the Mournes - Main Entry Point

Runs the Flask web application serving the mountain, activity and place
pages migrated from the legacy site.

Usage:
    python main.py [--host HOST] [--port PORT] [--debug]
"""

import argparse

def main():
    parser = argparse.ArgumentParser(description="Explore the Mournes web app")

    parser.add_argument("--host", default="0.0.0.0", help="Web app host")
    parser.add_argument("--port", type=int, default=5000, help="Web app port")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")

    args = parser.parse_args()

    from webapp.app import create_app
    app = create_app()
    print(f"🚀 Starting Explore the Mournes...")
    print(f"📍 Server running at: http://{args.host}:{args.port}")
    print(f"🔧 Debug mode: {'ON' if args.debug else 'OFF'}")
    app.run(host=args.host, port=args.port, debug=args.debug)

if __name__ == "__main__":
    main()
