import re
from typing import Optional

NON_HEX = re.compile(r'[^A-Fa-f0-9]')
MAC_HEX_LENGTH = 12

def format_mac_address(mac: str) -> Optional[str]:
    """
    Canonicalize a user supplied MAC address.

    Separators and any other non-hex characters are dropped, so
    "aa-bb-cc-dd-ee-ff", "aabb.ccdd.eeff" and "AABBCCDDEEFF" all become
    "AA:BB:CC:DD:EE:FF". Returns None unless exactly 12 hex digits remain.
    """
    if not isinstance(mac, str):
        return None

    digits = NON_HEX.sub('', mac)
    if len(digits) != MAC_HEX_LENGTH:
        return None

    digits = digits.upper()
    return ':'.join(digits[i:i + 2] for i in range(0, MAC_HEX_LENGTH, 2))

def is_valid_mac(mac: str) -> bool:
    return format_mac_address(mac) is not None
