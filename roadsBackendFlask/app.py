# roadsBackendFlask/app.py
from flask import Flask
from flask_cors import CORS

from roadsBackendFlask.config import CORS_ORIGINS, GOOGLE_MAPS_API_KEY, ROADS_BASE_URL
from roadsBackendFlask.http_headers.api import create_api_routes
from roadsBackendFlask.logger import setup_logging, log

def create_app():
    app = Flask(__name__)
    setup_logging()
    log.info(f"Starting Roads Flask application against {ROADS_BASE_URL}...")
    if not GOOGLE_MAPS_API_KEY:
        log.warning("GOOGLE_MAPS_API_KEY is not set; Roads API requests will be sent without a key")
    CORS(app, origins=CORS_ORIGINS if CORS_ORIGINS != ["*"] else "*", supports_credentials=True)

    create_api_routes(app)
    return app

def main():
    app = create_app()
    app.run(host="0.0.0.0", port=5000, debug=False)

if __name__ == "__main__":
    main()
