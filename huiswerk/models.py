from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

# Tijden altijd als "HH:MM"
TimeText = str


class ParsedHomeworkItem(BaseModel):
    subject: str
    description: str
    deadline: date  # geserialiseerd als ISO "YYYY-MM-DD"


class ParsedLessonItem(BaseModel):
    day_of_week: int = Field(ge=0, le=6)  # 0 = zondag ... 6 = zaterdag
    time_start: TimeText
    time_end: TimeText
    subject: str
    teacher_name: Optional[str] = None
    location: Optional[str] = None


class HomeworkParseRequest(BaseModel):
    text: str = ""
    reference_date: Optional[date] = None


class ScheduleParseRequest(BaseModel):
    text: str = ""


class HomeworkParseResponse(BaseModel):
    success: bool
    count: int
    items: List[ParsedHomeworkItem] = []
    message: Optional[str] = None


class ScheduleParseResponse(BaseModel):
    success: bool
    count: int
    items: List[ParsedLessonItem] = []
    message: Optional[str] = None
