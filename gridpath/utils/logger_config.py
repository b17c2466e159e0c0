import logging
import os
from logging.handlers import RotatingFileHandler

class StepFormatter(logging.Formatter):
    """
    A compact log formatter for search progress.
    It formats logs as '[step N] message'.
    """
    def format(self, record):
        """Overrides the default format method."""
        if hasattr(record, 'step'):
            message = f"[step {record.step}] {record.getMessage()}"
        else:
            message = f"[{record.levelname}] {record.getMessage()}"
        return message

def setup_logging(log_level=logging.INFO, log_dir="logs"):
    """
    Set up logging for the application.

    This configures two logging streams:
    1. The root logger for general messages (world loading, CLI, summaries),
       which logs to the console and a file (`general.log`).
    2. A dedicated 'search' logger for per-step search events, which uses a
       compact format. Its console output is controlled by `log_level`.

    Args:
        log_level (int): The logging level for the console handlers.
                         Use logging.INFO for concise output and logging.DEBUG
                         to see every route update.
        log_dir (str): Directory receiving the rotating log files.
    """
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    # 1. --- Root Logger Configuration ---
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    general_formatter = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(general_formatter)
    # Search messages have their own handlers below
    console_handler.addFilter(lambda record: not record.name.startswith('search'))
    root_logger.addHandler(console_handler)

    general_log_file = os.path.join(log_dir, 'general.log')
    file_handler = RotatingFileHandler(general_log_file, maxBytes=5*1024*1024, backupCount=3)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    root_logger.addHandler(file_handler)

    # 2. --- Search Logger Configuration ---
    search_logger = logging.getLogger('search')
    search_logger.setLevel(logging.DEBUG)
    search_logger.propagate = False
    if search_logger.hasHandlers():
        search_logger.handlers.clear()

    search_console_handler = logging.StreamHandler()
    search_console_handler.setLevel(log_level)
    search_console_handler.setFormatter(StepFormatter())
    search_logger.addHandler(search_console_handler)

    search_log_file = os.path.join(log_dir, 'search_details.log')
    search_file_handler = RotatingFileHandler(search_log_file, maxBytes=10*1024*1024, backupCount=5)
    search_file_handler.setLevel(logging.DEBUG)
    search_file_handler.setFormatter(
        logging.Formatter('%(asctime)s - %(levelname)s - [step %(step)6d] - %(name)s - %(message)s')
    )
    # Only records carrying a step number go to the detailed file
    search_file_handler.addFilter(lambda record: hasattr(record, 'step'))
    search_logger.addHandler(search_file_handler)


class StepLoggerAdapter(logging.LoggerAdapter):
    """
    A logger adapter that injects the current search step into log records.
    """
    def process(self, msg, kwargs):
        """Adds the step count of the tracked search to the record's 'extra' dict."""
        if 'progress' in self.extra:
            kwargs['extra'] = {'step': self.extra['progress'].steps}
        return msg, kwargs

def get_search_logger(progress, name='search'):
    """
    Get a logger adapter for search events.

    Args:
        progress: Any object exposing a `steps` attribute (the running
                  iteration count of a search).
        name (str): The name of the logger (e.g., 'search.astar').

    Returns:
        StepLoggerAdapter: A logger adapter instance.
    """
    logger = logging.getLogger(name)
    return StepLoggerAdapter(logger, {'progress': progress})
