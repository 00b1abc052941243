"""Monthly EMI auto-increment for active loans."""
from __future__ import annotations

import copy
import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def apply_loan_emi_progress(data: Dict[str, Any], today: Optional[datetime] = None) -> Tuple[Dict[str, Any], bool]:
    """
    Advance ``emisPaid`` by the calendar months elapsed since each loan's last update.

    Only active loans with a tenure move, the count never passes the tenure and
    ``lastAutoUpdate`` is stamped whenever a loan changes. Returns the (possibly
    new) document and whether anything changed.
    """
    now = today or datetime.now(timezone.utc)
    loans = data.get("loans") or []
    changed = False
    updated_loans = []
    for loan in loans:
        updated = _advance_loan(loan, now)
        if updated is not loan:
            changed = True
        updated_loans.append(updated)

    if not changed:
        return data, False
    result = copy.deepcopy(data)
    result["loans"] = updated_loans
    return result, True


def months_between(start: datetime, end: datetime) -> int:
    return (end.year - start.year) * 12 + (end.month - start.month)


def _advance_loan(loan: Dict[str, Any], now: datetime) -> Dict[str, Any]:
    if loan.get("status") != "Active" or not loan.get("tenure"):
        return loan

    last_update = parse_iso(loan.get("lastAutoUpdate")) or now
    elapsed = months_between(last_update, now)
    if elapsed <= 0:
        return loan

    paid = _to_int(loan.get("emisPaid"))
    tenure = _to_int(loan.get("tenure"))
    if paid is None or tenure is None or paid >= tenure:
        return loan

    return {
        **loan,
        "emisPaid": str(min(tenure, paid + elapsed)),
        "lastAutoUpdate": to_iso(now),
    }


def parse_iso(value: Any) -> Optional[datetime]:
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _to_int(value: Any) -> Optional[int]:
    """Leading-integer parse; None when the value has no digits to read."""
    match = _LEADING_INT.match(str(value or "0"))
    return int(match.group(0)) if match else None


def to_iso(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
