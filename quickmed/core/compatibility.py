from typing import Dict, List

from quickmed.utils.constants import BLOOD_TYPES, COMPATIBILITY_MATRIX

def _entry(blood_type: str) -> Dict[str, List[str]]:
    if blood_type not in COMPATIBILITY_MATRIX:
        raise ValueError(f"Unknown blood type: {blood_type}")
    return COMPATIBILITY_MATRIX[blood_type]

def is_compatible(donor: str, recipient: str) -> bool:
    _entry(donor)
    return donor in _entry(recipient)["receive_from"]

def donate_to(blood_type: str) -> List[str]:
    return list(_entry(blood_type)["donate_to"])

def receive_from(blood_type: str) -> List[str]:
    return list(_entry(blood_type)["receive_from"])

def build_matrix() -> Dict[str, Dict[str, bool]]:
    """Recipient -> donor -> compatible, over every ABO/Rh pair."""
    return {
        recipient: {donor: is_compatible(donor, recipient) for donor in BLOOD_TYPES}
        for recipient in BLOOD_TYPES
    }
