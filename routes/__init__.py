from src.logger import get_logger

logger = get_logger("routes")


def register_routes(app):
    try:
        from invoices.invoice_routes import bp as invoice_bp
        app.register_blueprint(invoice_bp, url_prefix="/invoices")
    except ImportError as e:
        logger.error("Failed to import invoice_routes: %s", e)
        raise

    try:
        from purchases.purchase_routes import bp as purchase_bp
        app.register_blueprint(purchase_bp, url_prefix="/purchases")
    except ImportError as e:
        logger.error("Failed to import purchase_routes: %s", e)
        raise
