"""
Group Management Mixin for Canvas Model

Provides methods for managing component groups. Groups are identified by
generated id strings; a group owns the ordered list of its member ids and
each member carries a weak back-reference (group_id).
"""

from typing import Any, Dict, List, Optional

from constants import DEFAULT_GROUP_NAME_FORMAT, DEFAULT_TEMPLATE_GROUP_NAME
from models.geometry import union_rects
from ._internal.group import ComponentGroup
from .errors import InvalidSpecError, MutationStatus

# Fields update_group may merge; geometry goes through move/resize
UPDATABLE_GROUP_FIELDS = ('name', 'visible', 'locked')


class CanvasGroupMixin:
    """Mixin providing group management functionality for Canvas model"""

    def _detach_members(self, group: ComponentGroup) -> List[str]:
        """Clear the group back-reference of every live member

        Returns:
            Ids of the members that were detached
        """
        freed = []
        for instance in self._members_of(group):
            if instance.group_id == group.id:
                instance.group_id = None
                freed.append(instance.id)
        return freed

    def create_group(self, member_ids: List[str], name: Optional[str] = None) -> Optional[str]:
        """Group existing instances and select the new group

        Unknown ids are dropped and duplicates collapsed. An instance that
        already belongs to another group is moved out of it.

        Args:
            member_ids: Instance ids to group (one or more)
            name: Display name (default "Group N")

        Returns:
            New group id, or None if no known instance was given
        """
        seen = set()
        members = []
        for instance_id in member_ids:
            instance = self._get_instance(instance_id)
            if instance is not None and instance_id not in seen:
                seen.add(instance_id)
                members.append(instance)

        if not members:
            self._logger.warning("Cannot create group: no known instances given")
            return None

        for instance in members:
            previous = self._owning_group(instance)
            if previous is not None:
                previous.remove_member(instance.id)
                self._logger.info(f"Moved {instance.id} out of group {previous.id}")

        if name is None:
            name = DEFAULT_GROUP_NAME_FORMAT.format(index=len(self._groups) + 1)

        group = ComponentGroup(
            self._new_group_id(), name,
            [inst.id for inst in members],
            union_rects(inst.bounds for inst in members),
        )
        self._groups[group.id] = group
        for instance in members:
            instance.group_id = group.id

        self._set_group_selection(group.id)

        self._logger.info(f"Created group {group.id} with {len(members)} members")
        self._notify('create_group')
        return group.id

    def add_instances_as_group(self, specs: List[Dict[str, Any]], group_name: Optional[str] = None) -> str:
        """Create instances and a group wrapping them in one step

        Used when inserting a multi-part template: no listener ever sees
        the new instances without their group.

        Args:
            specs: Creation payloads (one or more)
            group_name: Display name (default "Template Group")

        Returns:
            New group id

        Raises:
            InvalidSpecError: If specs is empty or any spec is invalid (nothing is created)
        """
        if not specs:
            raise InvalidSpecError("Cannot create a group from zero components")

        instances = [self._build_instance(spec) for spec in specs]
        group = ComponentGroup(
            self._new_group_id(),
            group_name or DEFAULT_TEMPLATE_GROUP_NAME,
            [inst.id for inst in instances],
            union_rects(inst.bounds for inst in instances),
        )

        for instance in instances:
            instance.group_id = group.id
            self._instances[instance.id] = instance
        self._groups[group.id] = group

        self._set_group_selection(group.id)

        self._logger.info(f"Inserted {len(instances)} instances as group {group.id}")
        self._notify('add_instances_as_group')
        return group.id

    def update_group(self, group_id: str, fields: Dict[str, Any]) -> MutationStatus:
        """Merge name/visible/locked into a group

        Returns:
            OK or NOT_FOUND
        """
        group = self._get_group(group_id)
        if group is None:
            return MutationStatus.NOT_FOUND

        ignored = [key for key in fields if key not in UPDATABLE_GROUP_FIELDS]
        if ignored:
            self._logger.warning(f"update_group: ignoring non-updatable fields {ignored}")

        if 'name' in fields:
            group.name = str(fields['name'])
        if 'visible' in fields:
            group.visible = bool(fields['visible'])
        if 'locked' in fields:
            group.locked = bool(fields['locked'])

        self._notify('update_group')
        return MutationStatus.OK

    def delete_group(self, group_id: str) -> MutationStatus:
        """Remove a group, keeping its members on the canvas

        Members become free-standing. If the group was selected, selection
        becomes empty.

        Returns:
            OK or NOT_FOUND
        """
        group = self._groups.pop(group_id, None)
        if group is None:
            self._logger.debug(f"delete_group: {group_id} not found")
            return MutationStatus.NOT_FOUND

        freed = self._detach_members(group)
        if self._selected_group_id == group_id:
            self._clear_selection_state()

        self._logger.info(f"Deleted group {group_id}, detached {len(freed)} members")
        self._notify('delete_group')
        return MutationStatus.OK

    def ungroup_components(self, group_id: str) -> MutationStatus:
        """Dissolve a group and select its former members

        Returns:
            OK or NOT_FOUND
        """
        group = self._groups.pop(group_id, None)
        if group is None:
            self._logger.debug(f"ungroup_components: {group_id} not found")
            return MutationStatus.NOT_FOUND

        freed = self._detach_members(group)
        if freed:
            self._set_component_selection(freed)
        else:
            self._clear_selection_state()

        self._logger.info(f"Ungrouped {group_id}: {len(freed)} members freed")
        self._notify('ungroup_components')
        return MutationStatus.OK
