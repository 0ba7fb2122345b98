"""Currency and EU compliance checks over the corpus store."""

from engine.compliance.currency import check_currency
from engine.compliance.eu_basis import get_eu_basis, get_provision_eu_basis
from engine.compliance.eu_compliance import validate_eu_compliance
from engine.compliance.implementations import get_slovenian_implementations

__all__ = [
    "check_currency",
    "get_eu_basis",
    "get_provision_eu_basis",
    "get_slovenian_implementations",
    "validate_eu_compliance",
]
