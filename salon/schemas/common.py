# salon/schemas/common.py

from typing import Annotated, Optional
from pydantic import AfterValidator, BaseModel, StringConstraints

from ..validators import DATE_PATTERN, TIME_PATTERN, normalize_date, normalize_time

DateStr = Annotated[str, StringConstraints(pattern=DATE_PATTERN), AfterValidator(normalize_date)]
TimeStr = Annotated[str, StringConstraints(pattern=TIME_PATTERN), AfterValidator(normalize_time)]


class RecordSaved(BaseModel):
    success: bool = True
    id: Optional[int] = None
