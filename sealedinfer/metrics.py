"""Accuracy measures for multi-label predictions scored against 0/1 labels."""

from __future__ import annotations

from collections.abc import Sequence

THRESHOLD = 0.5
"""A prediction at or above this score counts as a positive label."""

LABEL_COUNT = 12
"""Number of labels that must all match for :func:`accuracy_all` to score a hit."""


def _paired(predictions: Sequence[float], labels: Sequence[int]):
    if len(predictions) != len(labels):
        raise ValueError(
            f"predictions and labels differ in length: "
            f"{len(predictions)} != {len(labels)}"
        )
    return zip(predictions, labels)


def accuracy_any(predictions: Sequence[float], labels: Sequence[int]) -> float:
    """Return 1.0 if any label marked 1 is predicted positive, else 0.0."""
    hit = any(
        score >= THRESHOLD and label == 1
        for score, label in _paired(predictions, labels)
    )
    return 1.0 if hit else 0.0


def accuracy_all(predictions: Sequence[float], labels: Sequence[int]) -> float:
    """Return 1.0 if exactly :data:`LABEL_COUNT` thresholded predictions match, else 0.0.

    Each prediction is turned into 1 when it reaches :data:`THRESHOLD` and 0
    otherwise, then compared with its label.
    """
    matches = sum(
        1
        for score, label in _paired(predictions, labels)
        if (1 if score >= THRESHOLD else 0) == label
    )
    return 1.0 if matches == LABEL_COUNT else 0.0