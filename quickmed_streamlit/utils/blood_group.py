import re
from typing import Dict, List

NON_ANTIGEN = re.compile(r"[^AB]")

def display_antigens(blood_group: str) -> str:
    """Antigen letters shown for a group: every character except A and B is dropped."""
    return NON_ANTIGEN.sub("", blood_group or "") or "None"

def compatibility_rows(blood_types: List[str], matrix: Dict[str, Dict[str, bool]]) -> List[Dict[str, str]]:
    rows = []
    for recipient in blood_types:
        row = {"Recipient": recipient}
        for donor in blood_types:
            row[donor] = "✓" if matrix[recipient][donor] else "✗"
        rows.append(row)
    return rows
