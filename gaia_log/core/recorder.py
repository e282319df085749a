from __future__ import annotations
import os
from datetime import datetime
from enum import Enum
from typing import Optional, TextIO


class Severity(str, Enum):
    """Importance class of a log line, written verbatim into the line."""

    MESSAGE = "Message"
    MILESTONE = "Milestone"
    WARNING = "Warning"
    ERROR = "Error"


def generate_log_text(text: str, severity: Severity, author: str = "Anonymous") -> str:
    # time|severity|author|text
    stamp = datetime.now().strftime("%H:%M:%S")
    return "|".join([stamp, Severity(severity).value, author, text])


class LogRecorder:
    """Appends log lines to a local file named after the time it was opened.

    - The directory is created on demand.
    - Every line is flushed as soon as it is written.
    """

    def __init__(self, path: str = "./", print_to_console: bool = False) -> None:
        self.print_to_console = print_to_console
        os.makedirs(path, exist_ok=True)
        self.log_name = datetime.now().strftime("%Y-%m-%d %H-%M") + ".log"
        self.log_path = os.path.join(path, self.log_name)
        self._file: Optional[TextIO] = open(self.log_path, "a", encoding="utf-8")

    @property
    def closed(self) -> bool:
        return self._file is None

    def record_raw_text(self, raw_record: str) -> None:
        if self._file is None:
            raise ValueError(f"Log file {self.log_path} is closed")
        self._file.write(raw_record + "\n")
        self._file.flush()
        if self.print_to_console:
            print(raw_record)

    def record(self, text: str, severity: Severity, author: str = "Anonymous") -> None:
        self.record_raw_text(generate_log_text(text, severity, author))

    def record_message(self, text: str, author: str = "Anonymous") -> None:
        """Simple output of a program."""
        self.record(text, Severity.MESSAGE, author)

    def record_milestone(self, text: str, author: str = "Anonymous") -> None:
        """Important time points of a program."""
        self.record(text, Severity.MILESTONE, author)

    def record_warning(self, text: str, author: str = "Anonymous") -> None:
        """Messages that deserve attention."""
        self.record(text, Severity.WARNING, author)

    def record_error(self, text: str, author: str = "Anonymous") -> None:
        """Abnormal situations of a program."""
        self.record(text, Severity.ERROR, author)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "LogRecorder":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
