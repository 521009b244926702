from typing import Annotated, Union

from pydantic import AfterValidator, StrictFloat, StrictInt

INT64_MIN = -2**63
INT64_MAX = 2**63 - 1


def _fits_int64(value: Union[int, float]) -> Union[int, float]:
    # BSON has no integer wider than int64
    if isinstance(value, int) and not INT64_MIN <= value <= INT64_MAX:
        raise ValueError("integer does not fit in 64 bits")
    return value


# JSON numbers only: booleans and numeric strings are rejected, not coerced.
Number = Annotated[Union[StrictInt, StrictFloat], AfterValidator(_fits_int64)]
