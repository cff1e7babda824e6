import os

DATA_FILE = os.getenv("DATA_FILE", "data/test_attendance.json")

TIMEZONE = os.getenv("APP_TIMEZONE", "")

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
