import os

STORE_CONFIG = {
    "data_dir": os.getenv("DATA_DIR", "data"),
    "employees_file": "employees.json",
    "pauses_file": "pauses.json",
    "threshold_minutes": 20,
    "max_pending": 64,
    "auto_init": False,
}

DEBUG = False
TESTING = True
