import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))
