from .authorities import ROLE_PREFIX, role_name_to_capability, roles_to_capabilities, has_authority
