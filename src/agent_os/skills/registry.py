"""
Skill registry - ordered collection of discovered bundles.

The order is the order shown to the operator, so menu numbers stay
stable for the lifetime of the registry.
"""

from __future__ import annotations

import typing as _typing

import agent_os.skills.bundle as bundle_module


class SkillRegistry:
    """
    Immutable, ordered collection of skill bundles.

    Identifiers are unique within a registry.
    """

    def __init__(self, bundles: _typing.Iterable[bundle_module.SkillBundle]) -> None:
        self._bundles: tuple[bundle_module.SkillBundle, ...] = tuple(bundles)
        self._index: dict[str, int] = {}
        for i, bundle in enumerate(self._bundles):
            if bundle.identifier in self._index:
                raise ValueError(f"Duplicate skill identifier: {bundle.identifier}")
            self._index[bundle.identifier] = i

    def __len__(self) -> int:
        return len(self._bundles)

    def __iter__(self) -> _typing.Iterator[bundle_module.SkillBundle]:
        return iter(self._bundles)

    def __getitem__(self, index: int) -> bundle_module.SkillBundle:
        return self._bundles[index]

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._index

    def __repr__(self) -> str:
        return f"SkillRegistry({list(self.identifiers())!r})"

    def identifiers(self) -> list[str]:
        """Bundle identifiers in registry order."""
        return [bundle.identifier for bundle in self._bundles]

    def get(self, identifier: str) -> bundle_module.SkillBundle | None:
        """Look up a bundle by identifier."""
        index = self._index.get(identifier)
        if index is None:
            return None
        return self._bundles[index]
