"""
Canvas Design Editor - Transform Mixin

Contains all geometry-changing operations for the Canvas model:
- Group move (rigid translation of the frame and every member)
- Group proportional resize (anchored at the frame's top-left corner)
- Scale-sensitive style adjustment of members during resize
- Explicit group frame recomputation
- Single-instance move/resize (pointer drag and resize handle)

Drag handlers call these once per pointer sample with values measured
from the drag start, so each call must leave a valid canvas behind.

This mixin is pure domain logic - no UI dependencies.
"""

import math

from constants import MIN_GROUP_SIZE, MIN_COMPONENT_SIZE
from models.geometry import clamp_size, scale_from_anchor, union_rects
from utils.style_scaling import scale_style_properties
from .errors import MutationStatus


def _all_finite(*values) -> bool:
    return all(isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v)
               for v in values)


def _box_ok(x, y, width, height) -> bool:
    """Finite box whose far edges still lie past its near edges"""
    return (_all_finite(x, y, width, height, x + width, y + height)
            and x + width > x and y + height > y)


class CanvasTransformMixin:
    """Mixin containing transform operations for Canvas model

    This mixin expects the parent class to have:
    - self._instances / self._groups collections
    - self._logger: Logger instance
    - self._get_group(id), self._get_instance(id), self._members_of(group)
    """

    # ========================================
    # Group Operations
    # ========================================

    def _check_group_transformable(self, group_id: str):
        """Return (group, status); group is None unless status is OK"""
        group = self._get_group(group_id)
        if group is None:
            return None, MutationStatus.NOT_FOUND
        if group.locked:
            return None, MutationStatus.LOCKED
        if not group.visible:
            return None, MutationStatus.HIDDEN
        return group, MutationStatus.OK

    def move_group(self, group_id: str, dx: float, dy: float) -> MutationStatus:
        """Translate a group's frame and all its members

        Args:
            group_id: Group id
            dx: X offset
            dy: Y offset

        Returns:
            OK, NOT_FOUND, LOCKED (locked group), HIDDEN (invisible group)
            or INVALID_GEOMETRY (non-finite delta, or a frame or member
            box that would overflow or lose its extent). Nothing moves unless OK.
        """
        if not _all_finite(dx, dy):
            return MutationStatus.INVALID_GEOMETRY

        group, status = self._check_group_transformable(group_id)
        if group is None:
            self._logger.debug(f"move_group {group_id}: {status.value}")
            return status

        members = self._members_of(group)
        moved = [(instance.x + dx, instance.y + dy) for instance in members]
        boxes = [(x, y, instance.width, instance.height) for instance, (x, y) in zip(members, moved)]
        boxes.append((group.x + dx, group.y + dy, group.width, group.height))
        if not all(_box_ok(*box) for box in boxes):
            self._logger.warning(f"move_group {group_id}: offset ({dx}, {dy}) overflows the canvas coordinates")
            return MutationStatus.INVALID_GEOMETRY

        group.translate(dx, dy)
        for instance, (x, y) in zip(members, moved):
            instance.x, instance.y = x, y

        self._logger.debug(f"Moved group {group_id} and {len(members)} members by ({dx:.2f}, {dy:.2f})")
        self._notify('move_group')
        return MutationStatus.OK

    def resize_group(self, group_id: str, new_width: float, new_height: float) -> MutationStatus:
        """Proportionally resize a group from its top-left anchor

        Steps:
        1. Clamp the requested size to MIN_GROUP_SIZE
        2. Scale factors against the group's current frame (not a fresh
           union of the members), so repeated resizes compound
        3. Members: offsets from the anchor and sizes scale per axis
        4. Members' fontSize/borderRadius/borderWidth scale by the average
           factor, strokeWidth by the vertical factor
        5. Frame takes the clamped size; its x/y stay put

        Args:
            group_id: Group id
            new_width: Requested frame width
            new_height: Requested frame height

        Returns:
            OK, NOT_FOUND, LOCKED, HIDDEN, or INVALID_GEOMETRY (non-finite
            request, degenerate current frame or member geometry that would
            overflow). Nothing changes unless OK.
        """
        if not _all_finite(new_width, new_height):
            return MutationStatus.INVALID_GEOMETRY

        group, status = self._check_group_transformable(group_id)
        if group is None:
            self._logger.debug(f"resize_group {group_id}: {status.value}")
            return status

        new_width = clamp_size(new_width, MIN_GROUP_SIZE)
        new_height = clamp_size(new_height, MIN_GROUP_SIZE)

        if group.width <= 0 or group.height <= 0:
            self._logger.warning(f"resize_group {group_id}: degenerate frame {group.width} x {group.height}")
            return MutationStatus.INVALID_GEOMETRY

        scale_x = new_width / group.width
        scale_y = new_height / group.height

        members = self._members_of(group)
        scaled = [(scale_from_anchor(group.x, instance.x, scale_x),
                   scale_from_anchor(group.y, instance.y, scale_y),
                   instance.width * scale_x,
                   instance.height * scale_y) for instance in members]
        if not all(_box_ok(*box) for box in scaled):
            self._logger.warning(f"resize_group {group_id}: scale ({scale_x}, {scale_y}) gives invalid member geometry")
            return MutationStatus.INVALID_GEOMETRY

        for instance, (x, y, width, height) in zip(members, scaled):
            instance.x, instance.y = x, y
            instance.width, instance.height = width, height
            scale_style_properties(instance.properties, scale_x, scale_y)

        group.width = new_width
        group.height = new_height

        self._logger.debug(f"Resized group {group_id} to {new_width:.1f} x {new_height:.1f} "
                           f"(scale {scale_x:.4f}, {scale_y:.4f})")
        self._notify('resize_group')
        return MutationStatus.OK

    def recompute_group_bounds(self, group_id: str) -> MutationStatus:
        """Snap a group's frame to the tight union of its current members

        Never called implicitly. An empty group keeps its frame.

        Returns:
            OK or NOT_FOUND
        """
        group = self._get_group(group_id)
        if group is None:
            return MutationStatus.NOT_FOUND

        members = self._members_of(group)
        if not members:
            self._logger.debug(f"recompute_group_bounds {group_id}: no members, frame kept")
            return MutationStatus.OK

        group.bounds = union_rects(inst.bounds for inst in members)
        self._notify('recompute_group_bounds')
        return MutationStatus.OK

    # ========================================
    # Single Instance Operations
    # ========================================

    def _check_instance_movable(self, instance_id: str):
        instance = self._get_instance(instance_id)
        if instance is None:
            return None, MutationStatus.NOT_FOUND
        # Grouped instances move only with their group
        if instance.locked or instance.group_id is not None:
            return None, MutationStatus.LOCKED
        return instance, MutationStatus.OK

    def move_instance(self, instance_id: str, x: float, y: float) -> MutationStatus:
        """Place a free-standing instance's top-left corner at (x, y)

        Returns:
            OK, NOT_FOUND, LOCKED (locked or grouped) or INVALID_GEOMETRY
        """
        if not _all_finite(x, y):
            return MutationStatus.INVALID_GEOMETRY

        instance, status = self._check_instance_movable(instance_id)
        if instance is None:
            return status

        instance.x = float(x)
        instance.y = float(y)
        self._notify('move_instance')
        return MutationStatus.OK

    def resize_instance(self, instance_id: str, width: float, height: float) -> MutationStatus:
        """Resize a free-standing instance (top-left anchored)

        The size is clamped to MIN_COMPONENT_SIZE. Style properties are
        not scaled.

        Returns:
            OK, NOT_FOUND, LOCKED (locked or grouped) or INVALID_GEOMETRY
        """
        if not _all_finite(width, height):
            return MutationStatus.INVALID_GEOMETRY

        instance, status = self._check_instance_movable(instance_id)
        if instance is None:
            return status

        instance.width = clamp_size(width, MIN_COMPONENT_SIZE)
        instance.height = clamp_size(height, MIN_COMPONENT_SIZE)
        self._notify('resize_instance')
        return MutationStatus.OK
