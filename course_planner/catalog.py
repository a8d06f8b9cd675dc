import io
from typing import Dict, Iterable, List

from course_planner.logger import logger
from course_planner.models import Catalog, Course, LoadResult, RecordWarning
from course_planner.normalize import is_comment, normalize_code, split_record


def parse_records(lines: Iterable[str], source: str = "<text>") -> LoadResult:
    """Build a fresh catalog from catalog lines.

    Each record is ``code,title[,prereq...]``. Blank and ``#`` lines are
    skipped silently; short records and records whose code normalizes to
    nothing are skipped with a warning. A repeated code replaces the earlier
    record (last one wins).
    """
    courses: Dict[str, Course] = {}
    warnings: List[RecordWarning] = []

    def warn(line_number: int, reason: str, line: str) -> None:
        warning = RecordWarning(line_number=line_number, reason=reason, line=line)
        warnings.append(warning)
        logger.warn(f"{source}: {warning}")

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")
        if is_comment(line):
            continue

        fields = split_record(line)
        if len(fields) < 2:
            warn(line_number, "not enough fields; skipping", line)
            continue

        code = normalize_code(fields[0])
        if not code:
            warn(line_number, "empty course code after normalization; skipping", line)
            continue

        prerequisites = [p for p in (normalize_code(f) for f in fields[2:]) if p]

        if code in courses:
            warn(line_number, f"duplicate course code {code}; replacing earlier record", line)

        courses[code] = Course(code=code, title=fields[1], prerequisites=prerequisites)

    logger.debug(f"Parsed {len(courses)} courses from {source}")
    return LoadResult(catalog=Catalog(courses), source=source, warnings=warnings)


def parse_catalog_text(text: str) -> LoadResult:
    # Same line splitting as reading a file in text mode
    return parse_records(io.StringIO(text, newline=None).readlines())


def load_catalog(path) -> LoadResult:
    """Read and parse a catalog file.

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: if the path cannot be read

    Bytes that are not valid UTF-8 are replaced rather than failing the load.
    """
    try:
        # utf-8-sig drops a leading BOM; per-field stripping covers the rest
        with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
            lines = f.readlines()
    except FileNotFoundError as e:
        raise FileNotFoundError(f"File not found: {path}") from e
    except OSError as e:
        raise ValueError(f"Failed to read {path}: {e}") from e

    result = parse_records(lines, source=str(path))
    logger.debug(f"Loaded {result.course_count} courses from {path}")
    return result
