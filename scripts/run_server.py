#!/usr/bin/env python3
"""Run the Flask development server."""

import logging
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from skirmish.web import create_app


def main():
    app = create_app()
    logging.basicConfig(
        level=str(app.config["LOG_LEVEL"]).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Request logs drown out the combat logs
    logging.getLogger("werkzeug").setLevel(logging.WARNING)

    host, port = app.config["HOST"], app.config["PORT"]
    print("\n" + "=" * 50)
    print("VOID SKIRMISH")
    print("=" * 50)
    print("\nStarting development server...")
    print(f"Open http://{host}:{port} in your browser")
    print("Press Ctrl+C to stop\n")
    app.run(debug=True, host=host, port=port)


if __name__ == "__main__":
    main()
