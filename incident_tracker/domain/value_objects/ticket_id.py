"""
Ticket Id

Architectural Intent:
- ServiceNow incident numbers are the only identifier scraped from tool output
- Recognized anywhere in a line, e.g. "Created INC0099887"
"""

import re
from typing import Optional

TICKET_ID_RE = re.compile(r"INC\d+")


def find_ticket_id(line: str) -> Optional[str]:
    match = TICKET_ID_RE.search(line)
    return match.group(0) if match else None
