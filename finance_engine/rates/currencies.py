"""Currency listing helpers for rate tables."""

from finance_engine.models.currency import RateTable


def get_available_currencies(table: RateTable) -> list[str]:
    """
    Every distinct code appearing as base or target in the table, sorted.

    Used to populate currency pickers on income/expense forms.
    """
    codes = set()
    for record in table:
        codes.add(record.base_currency)
        codes.add(record.target_currency)
    return sorted(codes)
