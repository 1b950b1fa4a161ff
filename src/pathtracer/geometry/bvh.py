# src/geometry/bvh.py
import logging
import random
import time
from typing import Callable, List, Optional, Sequence
import numpy as np
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

class BVHConstructionError(RuntimeError):
    """
    Raised when a BVH cannot be built: a surface without a bounding box,
    an empty span, or an unknown split axis. No partial tree is returned.
    """

def choose_axis() -> int:
    """Split axis for one node, drawn uniformly from {0, 1, 2}."""
    return random.randint(0, 2)

def box_key(axis: int, time0: float, time1: float) -> Callable[[Hittable], float]:
    """
    Sort key ordering surfaces by the minimum of their bounding box on axis.
    """
    if axis not in (0, 1, 2):
        raise BVHConstructionError(f"Unrecognized BVH split axis: {axis!r}")

    def key(obj: Hittable) -> float:
        return _require_box(obj, time0, time1).minimum[axis]

    return key

def _require_box(obj: Hittable, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise BVHConstructionError(f"No bounding box for {obj!r} in BVH construction")
    return box

class BVHNode(Hittable):
    """
    Binary BVH node. Each child is either another node or a leaf surface;
    a span of one surface puts the same surface on both sides.

    The constructor sorts objects[start:end] in place. Use from_list() to
    build over a private copy.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int,
                 time0: float = 0.0, time1: float = 0.0):
        object_span = end - start
        if object_span <= 0:
            raise BVHConstructionError("Cannot build a BVH node over an empty span")

        key = box_key(choose_axis(), time0, time1)

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            if key(objects[start]) < key(objects[start + 1]):
                self.left, self.right = objects[start], objects[start + 1]
            else:
                self.left, self.right = objects[start + 1], objects[start]
        else:
            objects[start:end] = sorted(objects[start:end], key=key)
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, time0, time1)
            self.right = BVHNode(objects, mid, end, time0, time1)

        box_left = _require_box(self.left, time0, time1)
        box_right = _require_box(self.right, time0, time1)
        self.box = AABB.surrounding_box(box_left, box_right)

    @classmethod
    def from_list(cls, objects: Sequence[Hittable], time0: float = 0.0,
                  time1: float = 0.0) -> "BVHNode":
        started = time.perf_counter()
        working = list(objects)
        root = cls(working, 0, len(working), time0, time1)
        logger.debug("Built BVH over %d objects in %.3fs",
                     len(working), time.perf_counter() - started)
        return root

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)
        # Update t_max for right branch if we hit something on the left
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self.right.hit(ray, t_min, t_max)
        # Anything the right side found is nearer than the left hit
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return self.box

    def depth(self) -> int:
        left = self.left.depth() if isinstance(self.left, BVHNode) else 0
        right = self.right.depth() if isinstance(self.right, BVHNode) else 0
        return 1 + max(left, right)

class FlatBVH(Hittable):
    """
    Frozen, index-addressed form of a BVH produced by flatten_bvh().

    Node i covers [bbox_min[i], bbox_max[i]]; leaves have object_index >= 0
    and no children, internal nodes have object_index == -1. Node 0 is the
    root.
    """
    def __init__(self, bbox_min: np.ndarray, bbox_max: np.ndarray,
                 left_indices: np.ndarray, right_indices: np.ndarray,
                 object_indices: np.ndarray, objects: Sequence[Hittable]):
        self.bbox_min = bbox_min
        self.bbox_max = bbox_max
        self.left_indices = left_indices
        self.right_indices = right_indices
        self.object_indices = object_indices
        self.objects = tuple(objects)
        # Plain Python copies for the traversal loop, numpy scalar access is slow
        self._boxes = [
            AABB(Vector3(*lo), Vector3(*hi)) for lo, hi in zip(bbox_min.tolist(), bbox_max.tolist())
        ]
        self._left = left_indices.tolist()
        self._right = right_indices.tolist()
        self._object = object_indices.tolist()

    def __len__(self) -> int:
        return len(self._boxes)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        closest = t_max
        result = None
        stack = [0]
        while stack:
            i = stack.pop()
            if not self._boxes[i].hit(ray, t_min, closest):
                continue
            obj = self._object[i]
            if obj >= 0:
                rec = self.objects[obj].hit(ray, t_min, closest)
                if rec is not None:
                    closest = rec.t
                    result = rec
                continue
            # Left is popped first, mirroring BVHNode.hit
            if self._right[i] != self._left[i]:
                stack.append(self._right[i])
            stack.append(self._left[i])
        return result

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return self._boxes[0]

def flatten_bvh(bvh_root: BVHNode, time0: float = 0.0, time1: float = 0.0) -> FlatBVH:
    """
    Traverse and flatten the BVH tree into NumPy arrays.

    Leaf surfaces get their own entry holding their bounding box; the
    duplicated leaf of a single-object span is stored once and both child
    slots point at it.
    """
    nodes = []
    objects: List[Hittable] = []
    object_slots = {}

    def leaf(obj: Hittable) -> int:
        if id(obj) in object_slots:
            return object_slots[id(obj)]
        box = _require_box(obj, time0, time1)
        index = len(nodes)
        nodes.append((box, -1, -1, len(objects)))
        objects.append(obj)
        object_slots[id(obj)] = index
        return index

    def traverse(node) -> int:
        if not isinstance(node, BVHNode):
            return leaf(node)
        index = len(nodes)
        nodes.append(None)  # placeholder
        left_index = traverse(node.left)
        right_index = left_index if node.right is node.left else traverse(node.right)
        nodes[index] = (node.box, left_index, right_index, -1)
        return index

    traverse(bvh_root)
    n = len(nodes)

    bbox_min = np.zeros((n, 3), dtype=np.float64)
    bbox_max = np.zeros((n, 3), dtype=np.float64)
    left_indices = -np.ones(n, dtype=np.int32)
    right_indices = -np.ones(n, dtype=np.int32)
    object_indices = -np.ones(n, dtype=np.int32)

    for i, (box, left, right, obj) in enumerate(nodes):
        bbox_min[i] = [box.minimum.x, box.minimum.y, box.minimum.z]
        bbox_max[i] = [box.maximum.x, box.maximum.y, box.maximum.z]
        left_indices[i] = left
        right_indices[i] = right
        object_indices[i] = obj

    return FlatBVH(bbox_min, bbox_max, left_indices, right_indices, object_indices, objects)
