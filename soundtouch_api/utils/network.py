import ipaddress


def is_valid_ip(value: str) -> bool:
    """Check that value is a plain IPv4 or IPv6 literal."""
    if "%" in value:
        # scoped IPv6 addresses are not accepted by the device
        return False
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True
