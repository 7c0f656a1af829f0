"""Dependency graph queries over a resource catalog."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from resdeps.errors import CyclicDependency, TraversalDepthExceeded, UnknownResource
from resdeps.resolution.catalog import ResourceCatalog

logger = logging.getLogger(__name__)

CHAIN_SEPARATOR = " -> "
TREE_SEPARATOR = " <- "


def _emit(lines: Iterable[str], out: TextIO | None) -> None:
    sink = out or sys.stdout
    for line in lines:
        sink.write(f"{line}\n")


class DependencyGraph:
    """Traverse the requires-relation of a :class:`ResourceCatalog`.

    The graph is a view: it holds a reference to the catalog and nothing
    else, so every query is a pure function of the catalog and the root
    identifier. Traversal state lives in local variables of each call.

    Args:
        catalog: The catalog snapshot to query.
        max_depth: Longest path, counted in resources, a single-path walk may
            follow. Defaults to the catalog size.

    """

    def __init__(self, catalog: ResourceCatalog, max_depth: int | None = None) -> None:
        self.catalog = catalog
        self.max_depth = len(catalog) if max_depth is None else max_depth

    def _requirements(self, resource_id: str, required_by: str | None) -> tuple[str, ...]:
        entry = self.catalog.find(resource_id)
        if entry is None:
            raise UnknownResource(resource_id, required_by)
        return entry.requires

    # Single-path walks

    def _iter_paths(self, root: str) -> Iterator[tuple[tuple[str, ...], bool]]:
        """Yield ``(path, is_leaf)`` for every path from ``root``, in pre-order.

        Requirements are followed left to right. A resource that repeats on
        the current path raises :class:`CyclicDependency`.
        """
        self.catalog.get(root)
        stack: list[tuple[str, ...]] = [(root,)]
        while stack:
            path = stack.pop()
            node = path[-1]
            if node in path[:-1]:
                start = path.index(node)
                raise CyclicDependency(path[start:])
            required_by = path[-2] if len(path) > 1 else None
            requires = self._requirements(node, required_by)
            if len(path) > self.max_depth:
                raise TraversalDepthExceeded(root, self.max_depth, path)
            yield path, not requires
            stack.extend(path + (requirement,) for requirement in reversed(requires))

    def chains(self, root: str) -> list[tuple[str, ...]]:
        """Return every root-to-leaf path, depth first, left to right.

        A resource reachable along several routes appears once per route, so
        stacked diamonds multiply the path count. Use :meth:`topological_order`
        to list each resource once.
        """
        return [path for path, is_leaf in self._iter_paths(root) if is_leaf]

    def direct_dependency_lines(self, root: str) -> list[str]:
        """Return the progressive chain lines for ``root``.

        The first line is the root alone and each following line extends a
        path by one requirement, e.g. ``c``, ``c -> b``, ``c -> b -> a``.
        When a resource has several requirements each branch is extended in
        turn, so a shared prefix is printed once.
        """
        lines = [CHAIN_SEPARATOR.join(path) for path, _ in self._iter_paths(root)]
        logger.debug("Progressive chains from %s: %d lines", root, len(lines))
        return lines

    def dependency_tree_lines(self, root: str) -> list[str]:
        """Return one ``root <- ... <- leaf`` line per root-to-leaf path."""
        return [TREE_SEPARATOR.join(path) for path in self.chains(root)]

    def list_direct_dependencies(self, root: str, out: TextIO | None = None) -> None:
        _emit(self.direct_dependency_lines(root), out)

    def list_dependency_tree(self, root: str, out: TextIO | None = None) -> None:
        _emit(self.dependency_tree_lines(root), out)

    # Topological order

    def _depth_first(
        self,
        starts: Iterable[str],
        *,
        strict: bool = True,
    ) -> tuple[list[str], list[list[str]]]:
        """Explore ``requires`` depth first from each start in turn.

        Returns the post-order (every resource after all it requires) and the
        cycles closed by back edges. With ``strict`` the first cycle or
        unknown requirement raises; otherwise unknown requirements are
        skipped and cycles are collected.
        """
        order: list[str] = []
        done: set[str] = set()
        cycles: list[list[str]] = []

        for start in starts:
            if start in done:
                continue
            # Insertion-ordered, so list(visiting) is the current path
            visiting: dict[str, None] = {start: None}
            stack = [(start, iter(self._requirements(start, None)))]
            while stack:
                node, children = stack[-1]
                for child in children:
                    if child in done:
                        continue
                    if child in visiting:
                        path = list(visiting)
                        cycle = path[path.index(child) :] + [child]
                        if strict:
                            raise CyclicDependency(cycle)
                        cycles.append(cycle)
                        continue
                    if not strict and child not in self.catalog:
                        continue
                    requires = self._requirements(child, node)
                    visiting[child] = None
                    stack.append((child, iter(requires)))
                    break
                else:
                    stack.pop()
                    del visiting[node]
                    done.add(node)
                    order.append(node)

        return order, cycles

    def topological_order(self, root: str) -> list[str]:
        """Return every resource reachable from ``root``, dependencies first.

        Ties are broken by depth-first discovery over each ``requires`` list
        from left to right; ``root`` is always last and resources reachable
        along several paths appear once.
        """
        self.catalog.get(root)
        order, _ = self._depth_first([root])
        logger.debug("Topological order from %s: %d resources", root, len(order))
        return order

    def list_dependency_tree_top_down(self, root: str, out: TextIO | None = None) -> None:
        _emit(self.topological_order(root), out)

    # Whole-graph queries

    def get_dependencies(self, resource_id: str) -> list[str]:
        """Get all transitive requirements of a resource, dependencies first."""
        return self.topological_order(resource_id)[:-1]

    def get_dependents(self, resource_id: str) -> list[str]:
        """Get every resource that directly or transitively requires this one."""
        self.catalog.get(resource_id)

        reverse: dict[str, list[str]] = {}
        for entry in self.catalog:
            for requirement in entry.requires:
                reverse.setdefault(requirement, []).append(entry.resource)

        visited = {resource_id}
        to_visit = [resource_id]
        while to_visit:
            current = to_visit.pop()
            for dependent in reverse.get(current, []):
                if dependent not in visited:
                    visited.add(dependent)
                    to_visit.append(dependent)

        return [rid for rid in self.catalog.ids() if rid in visited and rid != resource_id]

    def find_cycles(self) -> list[list[str]]:
        """Find dependency cycles across the whole catalog.

        Each cycle is closed by repeating its first resource and is reported
        once regardless of where the search entered it.
        """
        _, found = self._depth_first(self.catalog.ids(), strict=False)

        cycles = []
        seen: set[tuple[str, ...]] = set()
        for cycle in found:
            body = cycle[:-1]
            pivot = body.index(min(body))
            key = tuple(body[pivot:] + body[:pivot])
            if key not in seen:
                seen.add(key)
                cycles.append(cycle)
        return cycles

    def get_leaves(self) -> list[str]:
        """Get resources with no requirements."""
        return [entry.resource for entry in self.catalog if entry.is_leaf]

    def get_roots(self) -> list[str]:
        """Get resources that no other resource requires."""
        required = {req for entry in self.catalog for req in entry.requires}
        return [rid for rid in self.catalog.ids() if rid not in required]

    def get_isolated_nodes(self) -> list[str]:
        """Get resources with no requirements and no dependents."""
        leaves = set(self.get_leaves())
        return [rid for rid in self.get_roots() if rid in leaves]

    def _longest_path(self) -> int | None:
        """Length in resources of the longest requires-path, ``None`` if cyclic."""
        order, cycles = self._depth_first(self.catalog.ids(), strict=False)
        if cycles:
            return None
        depth: dict[str, int] = {}
        for rid in order:
            known = [depth[req] for req in self.catalog.direct_requirements(rid) if req in depth]
            depth[rid] = 1 + max(known, default=0)
        return max(depth.values(), default=0)

    def get_statistics(self) -> dict:
        """Get graph statistics."""
        return {
            "total_resources": len(self.catalog),
            "total_edges": sum(len(entry.requires) for entry in self.catalog),
            "leaf_count": len(self.get_leaves()),
            "root_count": len(self.get_roots()),
            "isolated_count": len(self.get_isolated_nodes()),
            "dangling_count": len(self.catalog.dangling_requirements()),
            "cycle_count": len(self.find_cycles()),
            "max_depth": self._longest_path(),
        }

    def export_dot(self, root: str | None = None) -> str:
        """Export the graph, or the part reachable from ``root``, as DOT."""
        if root is None:
            included = self.catalog.ids()
        else:
            self.catalog.get(root)
            reachable, _ = self._depth_first([root], strict=False)
            members = set(reachable)
            included = [rid for rid in self.catalog.ids() if rid in members]

        lines = ["digraph ResourceDependencies {"]
        lines.append("  rankdir=LR;")
        lines.append("  node [shape=box];")

        missing: list[str] = []
        for rid in included:
            entry = self.catalog.get(rid)
            safe_key = rid.replace('"', '\\"')
            safe_label = (entry.name or rid).replace('"', '\\"')
            if entry.is_leaf:
                style = "style=filled,fillcolor=lightyellow"
            else:
                style = "style=filled,fillcolor=lightblue"
            lines.append(f'  "{safe_key}" [label="{safe_label}",{style}];')
            for requirement in entry.requires:
                if requirement not in self.catalog and requirement not in missing:
                    missing.append(requirement)

        for requirement in missing:
            safe_key = requirement.replace('"', '\\"')
            lines.append(f'  "{safe_key}" [style=dashed,color=red];')

        for rid in included:
            safe_key = rid.replace('"', '\\"')
            for requirement in self.catalog.direct_requirements(rid):
                safe_dep = requirement.replace('"', '\\"')
                lines.append(f'  "{safe_key}" -> "{safe_dep}";')

        lines.append("}")
        return "\n".join(lines)
