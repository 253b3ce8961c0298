# evaluator.py

import math
import numpy as np

def score(row, features):
    """
    Rational score of a board for one ply's weight row:

        (w0*f0 + w1*f1 + w2*f2 + w3*f3) / (w4*f4 + w5*f5 + w6*f6 + w7*f7) + w8

    A zero denominator yields +inf / -inf by the numerator's sign, and w8 when the
    numerator is zero as well. Evaluated on Python floats, so no numpy
    divide-by-zero warnings are raised.
    """
    row = np.asarray(row, dtype=np.float64)
    features = np.asarray(features, dtype=np.float64)
    numerator = float(np.dot(row[0:4], features[0:4]))
    denominator = float(np.dot(row[4:8], features[4:8]))
    bias = float(row[8])

    if denominator == 0.0:
        if numerator > 0.0: return math.inf
        if numerator < 0.0: return -math.inf
        return bias
    return numerator / denominator + bias

def score_ply(weights, ply, features):
    return score(weights[ply], features)
