import os

# JSON document holding the event name and every check-in
DATA_FILE = os.getenv("DATA_FILE", "data/attendance.json")

# IANA timezone used for record dates and CSV times; empty = host local time
TIMEZONE = os.getenv("APP_TIMEZONE", "")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
