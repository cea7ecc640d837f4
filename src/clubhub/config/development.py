import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Start with the demo club data instead of an empty address book.
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))
