"""Mini README: Finite option sets offered by the bill entry form.

Structure:
    * Option - value/label pair rendered in a dropdown.
    * OptionCatalogue - accounts, payees and repeat cadences plus the payee
      helper text shown beneath the payee selector.

The entry core never looks at these lists; it only stores the selected value
as an opaque string. Demo data is seeded when no options are supplied so the
interface is usable out of the box.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence


@dataclass(frozen=True, slots=True)
class Option:
    """A selectable dropdown value with its display label."""

    value: str
    label: str

    def as_dict(self) -> Dict[str, str]:
        return {"value": self.value, "label": self.label}


def _demo_accounts() -> List[Option]:
    return [
        Option("12000", "My Checking Account: $12000"),
        Option("1200", "My Other Account: $1200"),
        Option("20", "My Another Account: $20"),
    ]


def _demo_payees() -> List[Option]:
    return [Option(name, name) for name in ("London Hydro", "Berlin Vydro", "Miami Bobr")]


def _demo_repeats() -> List[Option]:
    return [Option(str(months), f"Every {months} month till Oct 12.23") for months in (2, 3, 4)]


def _demo_last_payments() -> Dict[str, int]:
    return {"London Hydro": 2, "Berlin Vydro": 3, "Miami Bobr": 4}


@dataclass(slots=True)
class OptionCatalogue:
    """Dropdown options for the account, payee and repeat selectors."""

    accounts: Sequence[Option] = field(default_factory=_demo_accounts)
    payees: Sequence[Option] = field(default_factory=_demo_payees)
    repeats: Sequence[Option] = field(default_factory=_demo_repeats)
    days_since_last_payment: Dict[str, int] = field(default_factory=_demo_last_payments)

    def payee_helper_text(self, payee: str) -> str:
        """Describe how long ago the selected payee was last paid."""

        days: Optional[int] = self.days_since_last_payment.get(payee)
        if days is None:
            return ""
        return f"Last payment was {days} days ago"

    def export(self) -> Dict[str, List[Dict[str, str]]]:
        """Export the option sets for JSON responses."""

        return {
            "accounts": [option.as_dict() for option in self.accounts],
            "payees": [option.as_dict() for option in self.payees],
            "repeats": [option.as_dict() for option in self.repeats],
        }
