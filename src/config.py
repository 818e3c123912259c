import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    DEBUG = os.getenv("FLASK_DEBUG", "1") == "1"
    SECRET_KEY = os.getenv("SECRET_KEY", "change_me")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Document currency and the suffix used on rendered amounts
    CURRENCY = os.getenv("CURRENCY", "INR")
    CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "₹")

    # Round document totals to whole currency units when callers don't say
    ROUND_OFF = os.getenv("ROUND_OFF", "0") == "1"
