# visualize.py

import os
import logging
import numpy as np
import seaborn as sns
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from config import config

logger = logging.getLogger("Visualizer")

WEIGHT_LABELS = ["my 4", "my 3", "my 2", "my 1", "opp 4", "opp 3", "opp 2", "opp 1", "bias"]

def plot_weights(weights, path=None, title=None):
    """Saves the per-ply weight table as a heatmap (plies on the y axis). Returns the PNG path."""
    weights = np.asarray(weights, dtype=np.float64)
    if path is None:
        path = os.path.join(config.OUTPUTS_DIR, "heatmaps", "weights.png")
    os.makedirs(os.path.dirname(path) or '.', exist_ok=True)

    fig, ax = plt.subplots(figsize=(8, 16))
    try:
        sns.heatmap(weights, cmap="coolwarm", center=0.0, ax=ax,
                    xticklabels=WEIGHT_LABELS, yticklabels=10)
        ax.set_xlabel("Weight")
        ax.set_ylabel("Ply")
        ax.set_title(title or "TequilaBot weights per ply")
        fig.savefig(path, bbox_inches='tight')
    finally:
        plt.close(fig)
    logger.info(f"Saved weight heatmap to {path}.")
    return path
