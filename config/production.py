import os

STORE_CONFIG = {
    "data_dir": os.getenv("DATA_DIR", "/var/lib/pause-tracker"),
    "employees_file": os.getenv("EMPLOYEES_FILE", "employees.json"),
    "pauses_file": os.getenv("PAUSES_FILE", "pauses.json"),
    "threshold_minutes": int(os.getenv("BREAK_THRESHOLD_MINUTES", "20")),
    "max_pending": int(os.getenv("MAX_PENDING_UPDATES", "64")),
    "auto_init": bool(int(os.getenv("AUTO_INIT_STORE", "0"))),
}

DEBUG = False
