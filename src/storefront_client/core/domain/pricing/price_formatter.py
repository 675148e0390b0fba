from storefront_client.core.exceptions import ValidationFailedError

DEFAULT_CURRENCY_PREFIX = "$"


def format_price(minor_units: int, prefix: str = DEFAULT_CURRENCY_PREFIX) -> str:
    """Render an amount in minor currency units as ``<prefix><major>.<minor>``.

    Integer arithmetic only, so arbitrarily large amounts keep exact cents:
    ``format_price(2999) == "$29.99"``. Negative or non-integral input is
    rejected rather than rendered.
    """
    if isinstance(minor_units, bool) or not isinstance(minor_units, int):
        raise ValidationFailedError(
            "Price must be an integer amount of minor units.",
            context={"value": repr(minor_units)},
        )
    if minor_units < 0:
        raise ValidationFailedError(
            "Price cannot be negative.", context={"value": minor_units}
        )
    major, minor = divmod(minor_units, 100)
    return f"{prefix}{major}.{minor:02d}"
