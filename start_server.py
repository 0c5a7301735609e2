#!/usr/bin/env python3
"""
Launcher for the HackRx Document Query Dispatcher

Installed as the `hackrx-dispatcher` command. HOST, PORT and RELOAD come from
the environment; the log level follows Config.LOG_LEVEL.
"""

import os
import uvicorn

from config import Config


def main():
    config = Config()
    uvicorn.run(
        "app:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
        reload=os.getenv("RELOAD", "false").lower() == "true",
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
