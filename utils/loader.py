"""
Module used to import card sorts from JSON files
"""

import json
import logging
import os

from constants import DATA

logger = logging.getLogger(__name__)

type LoadedSort = list[frozenset]


def _to_sort(sort_id: str, groups: object) -> LoadedSort:
    if isinstance(groups, dict):
        groups = list(groups.values())
    if not isinstance(groups, list):
        raise ValueError(f"Sort {sort_id!r} is neither a list nor an object of groups")

    sort: LoadedSort = []
    for group in groups:
        if not isinstance(group, list):
            raise ValueError(f"Sort {sort_id!r} has a group that is not a list: {group!r}")
        sort.append(frozenset(group))
    return sort


def load_sorts(path: str) -> dict[str, LoadedSort]:
    """
    Load a sort collection from a JSON file.

    The file holds an object mapping sort IDs to their groups, given either as
    a list of card lists or as an object mapping group labels to card lists.
    Relative paths are resolved against the DATA directory.

    Returns:
        Mapping from sort ID to card sort, groups as frozensets.

    Raises:
        ValueError: If the document does not follow that layout.
    """
    with open(os.path.join(DATA, path), "r") as file:
        data = json.load(file)

    if not isinstance(data, dict):
        raise ValueError(f"Expected an object of card sorts in {path}")

    sorts = {sort_id: _to_sort(sort_id, groups) for sort_id, groups in data.items()}
    logger.debug(f"Loaded {len(sorts)} card sorts from {path}")
    return sorts
