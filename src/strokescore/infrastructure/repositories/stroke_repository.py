# src/strokescore/infrastructure/repositories/stroke_repository.py
"""Repository implementation for captured strokes stored as CSV files."""

import logging
import os
from typing import Dict, List, Optional

import numpy as np

from ...core.domain.models.point import Curve
from ...core.interfaces.repository import Repository

logger = logging.getLogger(__name__)

STROKE_SUFFIX = ".csv"


class StrokeRepository(Repository[Curve]):
    """
    Repository for strokes kept in a directory, one ``<id>.csv`` per stroke.

    Each file holds one ``x,y`` pair per line in drawing order.
    """

    def __init__(self, data_dir: str):
        """
        Initialize repository with data directory.

        Args:
            data_dir: Directory containing stroke files
        """
        self._data_dir = data_dir
        self._cache: Dict[str, Curve] = {}

    @property
    def data_dir(self) -> str:
        return self._data_dir

    def _path(self, id: str) -> str:
        return os.path.join(self._data_dir, f"{id}{STROKE_SUFFIX}")

    def get(self, id: str) -> Optional[Curve]:
        """
        Load a stroke by ID.

        Args:
            id: Stroke identifier (file name without extension)

        Returns:
            Curve, or None if no such file exists
        """
        if id in self._cache:
            return self._cache[id]

        path = self._path(id)
        if not os.path.exists(path):
            return None

        curve = self.read_file(path)
        self._cache[id] = curve
        return curve

    def list(self) -> List[str]:
        if not os.path.isdir(self._data_dir):
            return []
        return sorted(
            name[: -len(STROKE_SUFFIX)]
            for name in os.listdir(self._data_dir)
            if name.endswith(STROKE_SUFFIX)
        )

    def create(self, id: str, entity: Curve) -> Curve:
        if os.path.exists(self._path(id)):
            raise ValueError(f"Stroke with id {id} already exists")
        return self._write(id, entity)

    def update(self, id: str, entity: Curve) -> Curve:
        if not os.path.exists(self._path(id)):
            raise ValueError(f"Stroke with id {id} not found")
        return self._write(id, entity)

    def delete(self, id: str) -> None:
        path = self._path(id)
        if os.path.exists(path):
            os.remove(path)
        self._cache.pop(id, None)

    def _write(self, id: str, entity: Curve) -> Curve:
        os.makedirs(self._data_dir, exist_ok=True)
        np.savetxt(self._path(id), entity.to_array(), delimiter=",", fmt="%.6f")
        self._cache[id] = entity
        logger.debug("Saved %d-point stroke %s", len(entity), id)
        return entity

    @staticmethod
    def read_file(path: str) -> Curve:
        """
        Read a stroke CSV file.

        Raises:
            ValueError: If the file does not contain x,y rows
        """
        coords = np.loadtxt(path, delimiter=",", ndmin=2)
        if coords.size == 0:
            return Curve()
        return Curve.from_array(coords)
