from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from record_validations.models import AttributeSpec, ValidationErrors
from record_validations.validation import validate_attributes

if TYPE_CHECKING:
    import pandas as pd

    from record_validations.config import ValidationSettings

FAILURE_COLUMNS: list[str] = ["row", "attribute", "rule", "expected", "actual"]


def failures_to_frame(errors: ValidationErrors) -> pd.DataFrame:
    """Convert collected failures to a DataFrame.

    Args:
        errors: Failure collector.

    Returns:
        DataFrame with attribute, rule, expected and actual columns.
    """
    import pandas as pd

    return pd.DataFrame(errors.audit_log(), columns=FAILURE_COLUMNS[1:])


def validate_dataframe(
    df: pd.DataFrame,
    specs: Iterable[AttributeSpec],
    settings: ValidationSettings | None = None,
) -> tuple[pd.DataFrame, pd.DataFrame]:
    """Validate every row of a DataFrame.

    Each row is validated as a record whose attributes are its columns.
    Missing values (NaN/NA) are treated as absent.

    Args:
        df: Input DataFrame.
        specs: Attribute declarations to validate.
        settings: Optional settings override.

    Returns:
        Tuple of (validated DataFrame with coerced values, failures DataFrame
        with a ``row`` column holding the row index label).
    """
    import pandas as pd

    specs = list(specs)
    rows: list[dict] = []
    failures: list[dict] = []

    # to_dict("records") keeps per-column dtypes, iterrows upcasts mixed rows
    for index, row in zip(df.index, df.to_dict("records")):
        attributes = {k: (None if _is_missing(v) else v) for k, v in row.items()}
        errors = validate_attributes(attributes, specs, settings=settings)
        rows.append(attributes)
        failures.extend({"row": index, **entry} for entry in errors.audit_log())

    validated = pd.DataFrame(rows, index=df.index, columns=df.columns)
    return validated, pd.DataFrame(failures, columns=FAILURE_COLUMNS)


def _is_missing(value: object) -> bool:
    import pandas as pd

    if not pd.api.types.is_scalar(value):
        return False
    return bool(pd.isna(value))
