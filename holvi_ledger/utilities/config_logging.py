# holvi_ledger/utilities/config_logging.py
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
        },
    },
    "loggers": {
        "holvi_ledger": {
            "level": "DEBUG",
            "handlers": ["console"],
            "propagate": True,
        },
        # openpyxl warns about unsupported extensions in most bank exports
        "openpyxl": {"level": "ERROR", "propagate": True},
    },
}
