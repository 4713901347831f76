import logging

from flask import Flask, jsonify
from flask_cors import CORS

from product_service.config import ConfigurationError, load_settings
from product_service.products import PRODUCTS

logger = logging.getLogger(__name__)

app = Flask(__name__)
# any frontend may read the catalog, but only with GET
CORS(
    app,
    resources={r"/products": {"origins": "*", "methods": ["GET"], "send_wildcard": True}},
)


@app.route("/products", methods=["GET"])
def get_products():
    return jsonify([p.to_dict() for p in PRODUCTS]), 200


def main():
    """Load config and serve until terminated."""
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
    )

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        raise SystemExit(1)

    logger.info("Product service listening on %s:%d", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
