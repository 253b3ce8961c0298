# weights_store.py
# This module's ONLY job is persistence of the 125x9 weight table.

import os
import logging
import tempfile
import numpy as np
from config import config

from errors import WeightsFormatError

logger = logging.getLogger("WeightsStore")

def initial_weights():
    """Every ply starts from the same seed row."""
    return np.tile(np.asarray(config.INITIAL_WEIGHTS, dtype=np.float64), (config.NUM_CELLS, 1))

def parse_weights(lines):
    """Parses 125 lines of 9 comma-separated numbers. Raises WeightsFormatError."""
    rows = [line.strip() for line in lines]
    rows = [row for row in rows if row]
    if len(rows) != config.NUM_CELLS:
        raise WeightsFormatError(f"expected {config.NUM_CELLS} rows, found {len(rows)}")

    table = np.empty((config.NUM_CELLS, config.NUM_WEIGHTS), dtype=np.float64)
    for i, row in enumerate(rows):
        parts = row.split(',')
        if len(parts) != config.NUM_WEIGHTS:
            raise WeightsFormatError(f"row {i}: expected {config.NUM_WEIGHTS} values, found {len(parts)}")
        try:
            table[i] = [float(part) for part in parts]
        except ValueError as e:
            raise WeightsFormatError(f"row {i}: {e}") from None
    if not np.all(np.isfinite(table)):
        raise WeightsFormatError("table contains NaN or infinite values")
    return table

def format_weights(weights):
    # %.17g round-trips every float64 exactly
    return ''.join(','.join('%.17g' % value for value in row) + '\n' for row in weights)

class WeightsStore:
    """
    Loads and saves the weight table as plain text, one ply per line.
    Neither method raises on I/O problems: failures are logged and reported
    through the return value.
    """
    def __init__(self, path=None, atomic=None):
        self.path = path or config.WEIGHTS_FILE
        self.atomic = config.ATOMIC_SAVE if atomic is None else atomic

    def load(self):
        """Returns the table, or None if the file is missing or malformed."""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                table = parse_weights(f)
        except FileNotFoundError:
            logger.warning(f"No weight file at '{self.path}'. Using seed weights.")
            return None
        except (OSError, UnicodeDecodeError, WeightsFormatError) as e:
            logger.error(f"Could not load weights from '{self.path}': {e}. Using seed weights.")
            return None
        logger.info(f"Loaded {table.shape[0]}x{table.shape[1]} weights from '{self.path}'.")
        return table

    def save(self, weights):
        """Rewrites the whole file. Returns True on success."""
        weights = np.asarray(weights, dtype=np.float64)
        if weights.shape != (config.NUM_CELLS, config.NUM_WEIGHTS):
            logger.error(f"Refusing to save weights of shape {weights.shape}.")
            return False
        if not np.all(np.isfinite(weights)):
            logger.error("Refusing to save weights containing NaN or infinite values.")
            return False

        payload = format_weights(weights)
        try:
            if self.atomic:
                self._write_atomic(payload)
            else:
                with open(self.path, 'w', encoding='utf-8') as f:
                    f.write(payload)
        except OSError as e:
            logger.error(f"Failed to save weights to '{self.path}': {e}")
            return False
        logger.info(f"Saved weights to '{self.path}'.")
        return True

    def _write_atomic(self, payload):
        directory = os.path.dirname(os.path.abspath(self.path))
        fd, tmp_path = tempfile.mkstemp(prefix='.weights-', suffix='.tmp', dir=directory)
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
