"""
Main entry point for running the Flask server when executed as a module.
Uses the application factory pattern.
"""
import argparse
import logging

from verse_server.app_factory import create_app


def main():
    parser = argparse.ArgumentParser(description="Run the Quran Verse Matcher API server.")
    parser.add_argument("--host", type=str, default=None, help="Hostname to listen on (default: from config or 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: from config or 3000)")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode (Flask debug, enhanced logging)")
    args = parser.parse_args()

    app = create_app(debug_mode=args.debug)

    host = args.host or app.config.get('HOST', '0.0.0.0')
    port = args.port or app.config.get('PORT', 3000)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.debug("Debug mode active. Root logger level set to DEBUG.")

    app.run(host=host, port=port, debug=args.debug)


if __name__ == "__main__":
    main()
