from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Course(BaseModel):
    code: str = Field(min_length=1)
    title: str
    prerequisites: List[str] = Field(default_factory=list)


class RecordWarning(BaseModel):
    line_number: int
    reason: str
    line: str

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.reason}"


class Catalog:
    """Loaded courses keyed by normalized course code.

    Built once by the loader and then only read; reloading produces a new
    Catalog rather than mutating this one.
    """

    def __init__(self, courses: Optional[Dict[str, Course]] = None):
        self._courses: Dict[str, Course] = dict(courses or {})

    def __len__(self) -> int:
        return len(self._courses)

    def __contains__(self, code: object) -> bool:
        return code in self._courses

    def __iter__(self) -> Iterator[str]:
        return iter(self._courses)

    def is_empty(self) -> bool:
        return not self._courses

    def get(self, code: str) -> Optional[Course]:
        return self._courses.get(code)

    def codes(self) -> List[str]:
        """Course codes in ascending lexicographic order."""
        return sorted(self._courses)

    def courses(self) -> List[Course]:
        return [self._courses[code] for code in self.codes()]


class LoadResult(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    catalog: Catalog
    source: str
    warnings: List[RecordWarning] = Field(default_factory=list)

    @property
    def course_count(self) -> int:
        return len(self.catalog)
