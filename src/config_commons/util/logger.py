import datetime
import multiprocessing
import os
from enum import Enum
from pathlib import Path

from colorify import *


class LogLevelType(Enum):
    debug = 0
    info = 1
    warning = 2
    error = 3


def generate_timestamp():
    now = datetime.datetime.now()
    return now.strftime("%Y-%m-%d %H:%M:%S.%f")


def format_message(message: str, level: LogLevelType = LogLevelType.info, colorize: bool = True):
    match level:
        case LogLevelType.debug | LogLevelType.info:
            color = C.blue
        case LogLevelType.warning:
            color = C.orange
        case LogLevelType.error:
            color = C.red
        case _:
            return f"{generate_timestamp()} [{colorify('NONE', C.red) if colorize else 'NONE'}] {message}"
    return f"{generate_timestamp()} [{colorify(level.name, color) if colorize else level.name}] {message}"


def _run_receiver(filename, clear_file, pipe_in):
    # proces odbiorczy - zapisuje komunikaty do pliku az do otrzymania "STOP"
    log_file = Path(filename)
    log_file.parent.mkdir(exist_ok=True, parents=True)
    if clear_file:
        log_file.write_text("")
    try:
        with open(log_file, "a") as file:
            while True:
                data = pipe_in.recv()
                if data == "STOP":
                    break
                [level, message] = data
                file.write(format_message(message, level, colorize=False) + "\n")
                file.flush()
    except (KeyboardInterrupt, EOFError):
        pass


class MessageLogger:
    """Logger komunikatów zapisujący do pliku w osobnym procesie.

    Komunikaty są przesyłane przez `multiprocessing.Pipe` do procesu
    odbiorczego, dzięki czemu wywołania logowania nie blokują na operacjach
    dyskowych.

    Args:
        filename (str | Path): Ścieżka pliku logu (katalogi tworzone automatycznie).
        clear_file (bool): Czy wyczyścić plik przy starcie.
        debug (bool): Czy przepuszczać komunikaty poziomu debug.
    """

    def __init__(self, filename, clear_file: bool = True, debug: bool = True):
        self.filename = os.fspath(filename)
        self.pipe_out, pipe_in = multiprocessing.Pipe()
        self.process = multiprocessing.Process(
            target=_run_receiver, args=(self.filename, clear_file, pipe_in), daemon=True
        )
        self.process.start()
        self.__debug = debug

    def error(self, message):
        self.pipe_out.send([LogLevelType.error, str(message)])

    def warning(self, message):
        self.pipe_out.send([LogLevelType.warning, str(message)])

    def info(self, message):
        self.pipe_out.send([LogLevelType.info, str(message)])

    def debug(self, message):
        if self.__debug:
            self.pipe_out.send([LogLevelType.debug, str(message)])

    def set_debug(self, debug: bool):
        self.__debug = debug

    def close(self):
        """Zatrzymuje proces odbiorczy po zapisaniu zaległych komunikatów."""
        try:
            if self.process.is_alive():
                self.pipe_out.send("STOP")
                self.process.join()
            self.pipe_out.close()
        except OSError:
            pass  # Pipe jest już zamknięty

    def __del__(self):
        if hasattr(self, "process"):
            self.close()


def debug(message: str, message_logger: MessageLogger = None, colorize: bool = False):
    if message_logger is not None:
        message_logger.debug(message)
    else:
        print(format_message(message, LogLevelType.debug, colorize))


def info(message: str, message_logger: MessageLogger = None, colorize: bool = False):
    if message_logger is not None:
        message_logger.info(str(message))
    else:
        print(format_message(message, LogLevelType.info, colorize))


def warning(message: str, message_logger: MessageLogger = None, colorize: bool = False):
    if message_logger is not None:
        message_logger.warning(message)
    else:
        print(format_message(message, LogLevelType.warning, colorize))


def error(message: str, message_logger: MessageLogger = None, colorize: bool = False):
    if message_logger is not None:
        message_logger.error(message)
    else:
        print(format_message(message, LogLevelType.error, colorize))
