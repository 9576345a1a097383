import logging
import os
from logging.handlers import QueueHandler, QueueListener
from queue import Queue


class FileLogListener:
    """
    Write the records of `logger` to `log_path` from a background thread.
    """
    def __init__(self, log_path, logger: logging.Logger):
        log_path = os.path.abspath(log_path)

        # If log already exists move it to <log_path>_old
        # Anything in the _old file will be overwritten
        if os.path.isfile(log_path):
            os.replace(log_path, log_path + "_old")

        log_queue = Queue()
        self.queue_handler = QueueHandler(log_queue)
        self.logger = logger
        logger.addHandler(self.queue_handler)

        formatter = logging.Formatter("%(levelname)s: %(name)s: %(message)s")

        self.file_handler = logging.FileHandler(log_path)
        self.file_handler.setFormatter(formatter)

        self.log_path = log_path
        self.queue_listener = QueueListener(log_queue, self.file_handler)

    def start(self):
        self.queue_listener.start()

    def stop(self):
        """Flush queued records, then detach from the logger."""
        self.queue_listener.stop()
        self.logger.removeHandler(self.queue_handler)
        self.file_handler.close()
