"""Fusion récursive des éléments de permission.

Deux règles coexistent volontairement et ne doivent pas être unifiées :

* deux mappings fusionnent clé par clé, la valeur entrante remplaçant
  l'ancienne sauf si les deux côtés sont des conteneurs (fusion récursive) ;
* deux séquences se concatènent, l'entrée étant ajoutée à la fin.

Une séquence qui rencontre un mapping est convertie en mapping indexé par
position (clés entières), puis les éléments de l'autre côté sont ajoutés :
aucune entrée existante n'est perdue. Un conteneur entrant vide laisse la
valeur existante intacte. Tout autre couple est remplacé par la valeur entrante.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any


class MergePolicy(str, Enum):
    OVERWRITE_BY_KEY = "overwrite_by_key"
    CONCATENATE = "concatenate"
    LIFT_TO_MAPPING = "lift_to_mapping"
    KEEP_BASE = "keep_base"
    REPLACE = "replace"


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _is_container(value: Any) -> bool:
    return isinstance(value, Mapping) or _is_sequence(value)


def merge_policy(base: Any, incoming: Any) -> MergePolicy:
    if _is_container(base) and _is_container(incoming) and not incoming:
        return MergePolicy.KEEP_BASE
    if isinstance(base, Mapping) and isinstance(incoming, Mapping):
        return MergePolicy.OVERWRITE_BY_KEY
    if _is_sequence(base) and _is_sequence(incoming):
        return MergePolicy.CONCATENATE
    if _is_container(base) and _is_container(incoming):
        return MergePolicy.LIFT_TO_MAPPING
    return MergePolicy.REPLACE


def _plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if _is_sequence(value):
        return [_plain(item) for item in value]
    return value


def _next_index(mapping: Mapping) -> int:
    indexes = [key for key in mapping if isinstance(key, int) and not isinstance(key, bool)]
    return max(indexes) + 1 if indexes else 0


def _lift(base: Any, incoming: Any) -> dict:
    """Fusionne une séquence et un mapping ; les positions deviennent des clés entières."""

    if isinstance(base, Mapping):
        merged = {key: _plain(value) for key, value in base.items()}
        index = _next_index(merged)
        for item in incoming:
            merged[index] = _plain(item)
            index += 1
        return merged
    merged = {index: _plain(item) for index, item in enumerate(base)}
    return merge_recursive(merged, incoming)


def merge_recursive(base: Any, incoming: Any) -> Any:
    """Retourne une nouvelle valeur ; ni ``base`` ni ``incoming`` ne sont modifiés."""

    policy = merge_policy(base, incoming)
    if policy is MergePolicy.KEEP_BASE:
        return _plain(base)
    if policy is MergePolicy.CONCATENATE:
        return [_plain(item) for item in base] + [_plain(item) for item in incoming]
    if policy is MergePolicy.LIFT_TO_MAPPING:
        return _lift(base, incoming)
    if policy is MergePolicy.OVERWRITE_BY_KEY:
        merged = {key: _plain(value) for key, value in base.items()}
        for key, value in incoming.items():
            current = merged.get(key)
            if key in merged and _is_container(current) and _is_container(value):
                merged[key] = merge_recursive(current, value)
            else:
                merged[key] = _plain(value)
        return merged
    return _plain(incoming)
