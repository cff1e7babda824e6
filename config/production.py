import os

DATA_FILE = os.getenv("DATA_FILE", "data/attendance.json")

TIMEZONE = os.getenv("APP_TIMEZONE", "")

DEBUG = bool(int(os.getenv("DEBUG", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
