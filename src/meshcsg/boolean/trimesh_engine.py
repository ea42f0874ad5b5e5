"""Trimesh-backed boolean engine for triangle streams.

This engine is optional.  It converts triangle streams to
``trimesh.Trimesh`` instances, dispatches boolean operations via
:mod:`trimesh.boolean`, and converts the resulting mesh back into a
:class:`meshcsg.mesh.Mesh`.  It is mostly useful as an independent
cross-check of the native engine.

Availability depends on both the ``trimesh`` package and at least one
boolean backend supported by ``trimesh`` (e.g. manifold3d, Blender).
"""

from __future__ import annotations

from typing import Iterable, Optional, Set

import numpy as np

try:
    import trimesh
except ImportError:  # pragma: no cover - optional dependency
    trimesh = None  # type: ignore[assignment]

from meshcsg.geom3d import Triangle
from meshcsg.mesh import Mesh

from . import native as _native

ENGINE_NAME = "trimesh"


def engines_available() -> Set[str]:
    """Return the set of trimesh boolean backends that are operational."""

    if trimesh is None:  # pragma: no cover - optional dependency
        return set()
    return set(trimesh.boolean.engines_available)


def is_available(backend: Optional[str] = None) -> bool:
    """Check whether the engine can run (trimesh + backend present)."""

    available = engines_available()
    if not available:
        return False
    if backend is None:
        return True
    return backend in available


def to_trimesh(triangles: Iterable[Triangle]) -> "trimesh.Trimesh":
    """Index a triangle stream into a ``trimesh.Trimesh``.

    Corners closer than 1e-9 in every coordinate share a vertex.
    """
    if trimesh is None:  # pragma: no cover - optional dependency
        raise RuntimeError("trimesh is not installed")

    vertex_map = {}
    verts = []
    faces = []
    for tri in triangles:
        face_inds = []
        for pt in tri.corners:
            key = (round(pt[0], 9), round(pt[1], 9), round(pt[2], 9))
            idx = vertex_map.get(key)
            if idx is None:
                idx = len(verts)
                vertex_map[key] = idx
                verts.append([pt[0], pt[1], pt[2]])
            face_inds.append(idx)
        faces.append(face_inds)

    if not faces:
        return trimesh.Trimesh(vertices=np.zeros((0, 3)),
                               faces=np.zeros((0, 3), dtype=np.int64), process=False)

    mesh = trimesh.Trimesh(vertices=np.asarray(verts, dtype=float),
                           faces=np.asarray(faces, dtype=np.int64), process=False)
    mesh.remove_unreferenced_vertices()
    return mesh


def from_trimesh(mesh: "trimesh.Trimesh") -> Mesh:
    """Convert a ``trimesh.Trimesh`` back into a :class:`Mesh`."""
    triangles = np.asarray(mesh.triangles, dtype=float)
    if triangles.size == 0:
        return Mesh()
    return Mesh.from_array(triangles)


def solid_boolean(a, b, operation: str, backend: Optional[str] = None) -> Mesh:
    """Perform a boolean between ``a`` and ``b`` using trimesh."""

    if operation not in _native.OPERATIONS:
        raise ValueError(f'bad boolean operation passed to solid_boolean: {operation!r}')
    if trimesh is None:  # pragma: no cover - optional dependency
        raise RuntimeError("trimesh is not installed; install trimesh to enable this engine")

    available = engines_available()
    if backend is not None and backend not in available:
        raise RuntimeError(
            f"trimesh backend '{backend}' is not available (available: {available})"
        )
    if backend is None and not available:
        raise RuntimeError(
            "no trimesh boolean backends are available; install manifold3d or another supported engine"
        )

    meshes = [to_trimesh(a), to_trimesh(b)]
    combine = getattr(trimesh.boolean, operation)
    try:
        result = combine(meshes, engine=backend, check_volume=False)
    except Exception as exc:  # pragma: no cover - depends on external binaries
        raise RuntimeError(f"trimesh boolean operation failed: {exc}") from exc

    if result is None or result.faces.size == 0:
        return Mesh()
    return from_trimesh(result)


__all__ = ['ENGINE_NAME', 'engines_available', 'is_available', 'to_trimesh',
           'from_trimesh', 'solid_boolean']
