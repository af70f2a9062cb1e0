from typing import Any, cast

import pandas as pd


def is_missing_scalar(value: object) -> bool:
    try:
        return bool(pd.isna(cast("Any", value)))
    except (TypeError, ValueError):
        return False
