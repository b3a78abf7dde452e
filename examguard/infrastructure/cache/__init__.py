"""In-process caches."""

from examguard.infrastructure.cache.editing_roles_cache import EditingRolesCache

__all__: list[str] = ["EditingRolesCache"]
