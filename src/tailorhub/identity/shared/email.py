"""Structural validation for email addresses."""

_FORBIDDEN_CHARACTERS = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def normalize_email(address: str) -> str:
    return address.strip().lower()


def is_valid_email(address: str) -> bool:
    """Check that an address has one @, valid local and domain parts, and no forbidden characters."""
    if not address or any(ch in address for ch in (" ", "\t", "\n")):
        return False

    if address.count("@") != 1:
        return False

    local_part, domain_part = address.split("@", 1)

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        return False

    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        return False

    if "." not in domain_part:
        return False

    for label in domain_part.split("."):
        if label.startswith("-") or label.endswith("-"):
            return False

    if ".." in local_part or ".." in domain_part:
        return False

    return not any(forbidden in address for forbidden in _FORBIDDEN_CHARACTERS)
