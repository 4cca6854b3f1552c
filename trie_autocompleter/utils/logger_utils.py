# logger_utils.py -  for logging messages and performance metrics, timestamps etc

import os
import sys
import time
from datetime import datetime
from typing import Optional

# Directory where all log files will be stored
LOG_DIR = "logs"

# Path to the default log file, can be overriden with Log.configure()
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "autocompleter.log")

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class Log:
    """
    Lightweight process-wide logger for writing messages and tracking metrics.
    Settings live on the class so every module shares them:
      Log.info("loaded"), Log.configure(echo=True, level="DEBUG")
    """
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    path = DEFAULT_LOG_PATH
    level = "INFO"
    echo = False  # mirror lines to stderr
    use_color = True

    @classmethod
    def configure(
        cls,
        path: Optional[str] = None,
        level: Optional[str] = None,
        echo: Optional[bool] = None,
        use_color: Optional[bool] = None,
    ) -> None:
        if path is not None:
            cls.path = path
        if level is not None:
            level = level.upper()
            if level not in LEVELS:
                raise ValueError(f"unknown log level: {level}")
            cls.level = level
        if echo is not None:
            cls.echo = echo
        if use_color is not None:
            cls.use_color = use_color

    @classmethod
    def write(cls, level: str, msg: str) -> None:
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        if LEVELS.get(level, 0) < LEVELS[cls.level]:
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        folder = os.path.dirname(cls.path)
        if folder:
            os.makedirs(folder, exist_ok=True)  # create lazily, on first write
        with open(cls.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

        if cls.echo:
            if cls.use_color and level in cls.COLORS:
                print(f"{cls.COLORS[level]}{line}{cls.COLORS['RESET']}", file=sys.stderr)
            else:
                print(line, file=sys.stderr)

    # Public logging methods
    @classmethod
    def debug(cls, msg: str) -> None:
        cls.write("DEBUG", msg)

    @classmethod
    def info(cls, msg: str) -> None:
        cls.write("INFO", msg)

    @classmethod
    def warning(cls, msg: str) -> None:
        cls.write("WARNING", msg)

    @classmethod
    def error(cls, msg: str) -> None:
        cls.write("ERROR", msg)

    @classmethod
    def metric(cls, tag, value, unit=""):
        """
        Record a metric (like timing, counts, or performance stats) at INFO.
        Example: dictionary load done: 0.123s
        """
        cls.info(f"{tag}: {value}{unit}")

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("dictionary load"):
                read_dictionary(path)
        It automatically logs how long the block took.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """When exiting the 'with' block, calculate how long it took and record it as a metric. """
        self.elapsed = round(time.perf_counter() - self.start, 3)
        Log.metric(f"{self.label} done", self.elapsed, "s")
