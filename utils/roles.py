ALLOWED_ROLES = {"CLIENT", "ADMIN"}


def normalize_role_names(names):
    """Uppercase, dedupe and keep order. Raises ValueError on unknown roles."""
    out = []
    for name in names or []:
        if not isinstance(name, str):
            raise ValueError("Role names must be strings")
        value = name.strip().upper()
        if value not in ALLOWED_ROLES:
            raise ValueError(f"Unknown role: {name}")
        if value not in out:
            out.append(value)
    return out


def filter_role_names(roles):
    names = []
    for role in roles or []:
        name = role if isinstance(role, str) else getattr(role, "name", None)
        if name in ALLOWED_ROLES:
            names.append(name)
    return names
