from typing import Optional
from datetime import datetime

from pydantic import Field

from reservation_engine.schemas.common import EngineModel


# Showing: external entity, only ever referenced or embedded in a seat map
class Showing(EngineModel):
    id: str = Field(alias="_id")
    start_time: datetime
    end_time: Optional[datetime] = None
    movie: Optional[str] = None
    theatre: Optional[str] = None
    screen: Optional[str] = None
    is_active: bool = True
