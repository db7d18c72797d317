MAX_KEYS = 5000
PURGE_FRACTION = 3  # one third
