"""Date helpers."""

from datetime import date


def get_current_age(date_of_birth: date, date_of_death: date | None = None, today: date | None = None) -> int:
    """Age in whole years, measured at death when a death date is known.

    Args:
        date_of_birth: Birth date.
        date_of_death: Optional death date.
        today: Reference date for living people; defaults to the current date.

    Returns:
        Number of full years elapsed.
    """
    end = date_of_death or today or date.today()
    age = end.year - date_of_birth.year
    if (end.month, end.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age
