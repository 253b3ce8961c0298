# 文件: logger_config.py
import logging
import os
import sys

LOG_FORMAT = '%(asctime)s - %(name)-14s - %(levelname)-8s - %(message)s'

def setup_logging(log_file=None, level=logging.INFO, console=False):
    """Configures the root logger once for the process. Library modules only call getLogger()."""
    handlers = []
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode='a'))
    if console or not handlers:
        # stderr keeps the tqdm bar on stdout readable
        handlers.append(logging.StreamHandler(sys.stderr))

    root = logging.getLogger()
    if root.hasHandlers():
        root.handlers.clear()
    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    return root
