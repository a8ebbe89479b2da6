"""Development entrypoint for running the Flask API locally.

Usage:
- FLASK_APP=gemini_relay.main:app flask run --reload
- python -m gemini_relay.main
- gemini-relay (installed console script)
"""

from __future__ import annotations

import logging

from gemini_relay import create_app
from gemini_relay.config import Config

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = create_app()


def main() -> None:
    logging.info(f"Gemini API server is running at http://{Config.HOST}:{Config.PORT}")
    # Simple built-in server for quick smoke testing
    app.run(host=Config.HOST, port=Config.PORT, debug=Config.RELAY_ENV == "dev")


if __name__ == "__main__":
    main()
