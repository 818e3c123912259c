import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from flask import Flask, jsonify
from flask_cors import CORS
from src.config import Config

# register blueprints dynamically
from routes import register_routes


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Enable CORS for all routes
    CORS(app, origins=app.config["CORS_ORIGINS"], methods=["GET", "POST", "OPTIONS"], allow_headers=["Content-Type", "Authorization"])

    # register routes/blueprints
    register_routes(app)

    @app.get("/")
    def index():
        return jsonify({"message": "Line Item Pricing API", "currency": app.config["CURRENCY"]}), 200

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=5000, debug=app.config["DEBUG"])
